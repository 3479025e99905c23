"""Pending transaction wrapper."""

import logging
from typing import Any, Optional

from web3 import Web3
from web3.exceptions import TimeExhausted

from ..config import DEFAULT_RECEIPT_POLL_INTERVAL, DEFAULT_RECEIPT_TIMEOUT
from ..exceptions import TransactionError
from ..logger import bind_logger

_log = logging.getLogger(__name__)


class Transaction:
    """
    A transaction that has been submitted to the blockchain.

    Use :meth:`get_receipt` to block until it has been mined.
    """

    def __init__(self, web3: Web3, tx_hash: Any, logger: Any = _log):
        self._web3 = web3
        self._hash = tx_hash
        self._logger = bind_logger(logger)

    @property
    def hash(self) -> str:
        """Transaction hash as a 0x-prefixed hex string."""
        if isinstance(self._hash, str):
            return Web3.to_hex(hexstr=self._hash)
        return Web3.to_hex(self._hash)

    def get_receipt(
        self,
        timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        poll_interval: float = DEFAULT_RECEIPT_POLL_INTERVAL,
    ) -> Any:
        """
        Wait for the transaction to be mined and return its receipt.

        Args:
            timeout: Seconds to wait before giving up
            poll_interval: Seconds between receipt lookups

        Returns:
            The transaction receipt

        Raises:
            TransactionError: If no receipt arrives in time, or the
                transaction reverted
        """
        self._logger.debug("Fetch receipt for tx %s ...", self.hash)

        try:
            receipt = self._web3.eth.wait_for_transaction_receipt(
                self._hash, timeout=timeout, poll_latency=poll_interval
            )
        except TimeExhausted as exc:
            self._logger.error("Transaction receipt error: %s", exc)
            raise TransactionError(
                f"No receipt for transaction {self.hash} after {timeout} seconds",
                tx_hash=self.hash,
            ) from exc

        if receipt.get("status") == 0:
            self._logger.error("Transaction %s reverted", self.hash)
            raise TransactionError(
                "Transaction reverted",
                tx_hash=self.hash,
                details={"block_number": receipt.get("blockNumber")},
            )

        self._logger.debug(
            "Receipt for tx %s in block %s", self.hash, receipt.get("blockNumber")
        )
        return receipt

    def __repr__(self) -> str:
        return f"Transaction({self.hash})"
