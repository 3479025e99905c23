"""Factory for contract wrappers sharing one connection and account."""

from typing import Any, Mapping, Union

from web3 import Web3

from ..config import (
    DEFAULT_GAS,
    DEFAULT_RECEIPT_POLL_INTERVAL,
    DEFAULT_RECEIPT_TIMEOUT,
    Account,
)
from ..logger import PACKAGE_LOGGER
from .contract import Contract, ContractSource


class ContractFactory:
    """
    Factory for creating new contract wrappers.

    Every contract made by the factory uses the same web3 connection,
    default account, gas amount and logger.
    """

    def __init__(
        self,
        web3: Web3,
        account: Union[Account, str, Mapping[str, Any]],
        gas: int = DEFAULT_GAS,
        logger: Any = PACKAGE_LOGGER,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        poll_interval: float = DEFAULT_RECEIPT_POLL_INTERVAL,
    ):
        self._web3 = web3
        self._account = Account.from_value(account)
        self._gas = gas
        self._logger = logger
        self._receipt_timeout = receipt_timeout
        self._poll_interval = poll_interval

    def make(self, contract: ContractSource) -> Contract:
        """
        Make a wrapper for the given contract.

        Args:
            contract: Compiled contract: a ``ContractArtifact``, compiler
                output mapping, or path to an artifact file

        Returns:
            The contract wrapper
        """
        return Contract(
            web3=self._web3,
            contract=contract,
            account=self._account,
            gas=self._gas,
            logger=self._logger,
            receipt_timeout=self._receipt_timeout,
            poll_interval=self._poll_interval,
        )
