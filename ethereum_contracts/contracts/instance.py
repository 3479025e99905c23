"""
Wrapper for a contract deployed at a particular address.
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from web3 import Web3
from web3.exceptions import Web3Exception

from ..exceptions import CallError, TransactionError
from ..logger import PrefixedLogger
from .arguments import to_web3_args
from .transaction import Transaction

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .contract import Contract


class ContractInstance:
    """
    Instance of a :class:`Contract` at a particular address.

    Log output goes through the parent contract's logger, with the instance
    address prepended to every message.
    """

    def __init__(self, contract: "Contract", address: str):
        self._contract = contract
        self._web3 = contract.web3
        self._address = address
        self._inst = self._web3.eth.contract(
            address=Web3.to_checksum_address(address), abi=contract.abi
        )
        self._logger = PrefixedLogger(lambda: self._contract.logger, f"[{address}]: ")

    @property
    def address(self) -> str:
        return self._address

    @property
    def contract(self) -> "Contract":
        return self._contract

    @property
    def logger(self) -> PrefixedLogger:
        return self._logger

    def _prepare(self, method: str, args: Optional[Mapping[str, Any]]) -> Any:
        sorted_args = self._contract.sanitize_method_args(method, args)
        descriptor = self._contract.get_method_descriptor(method)
        return descriptor, to_web3_args(descriptor, sorted_args)

    def local_call(self, method: str, args: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Make a method call to the contract locally, without a transaction.

        Args:
            method: Name of the method to call
            args: Method arguments by name

        Returns:
            The decoded return value: a single value for methods with one
            output, a list otherwise

        Raises:
            MethodNotFoundError, MissingArgumentError, ConversionError: If the
                arguments or return values are invalid
            CallError: If the node rejects the call
        """
        self._logger.info("Local call %s ...", method)

        descriptor, web3_args = self._prepare(method, args)

        try:
            result = getattr(self._inst.functions, method)(*web3_args).call()
        except (Web3Exception, ValueError) as exc:
            self._logger.error("Local call error: %s", exc)
            raise CallError(
                f"Local call to {method} failed: {exc}",
                method=method,
                details={"error": str(exc)},
            ) from exc

        # web3 unwraps single return values
        if len(descriptor.outputs) == 1:
            return self._contract.sanitize_method_return_values(method, [result])[0]

        return self._contract.sanitize_method_return_values(method, result)

    def send_call(
        self,
        method: str,
        args: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Make a method call to the contract by creating a transaction.

        Args:
            method: Name of the method to call
            args: Method arguments by name
            options: Overrides for 'account' and/or 'gas'

        Returns:
            The transaction receipt

        Raises:
            MethodNotFoundError, MissingArgumentError, ConversionError: If the
                arguments are invalid; nothing is sent in that case
            AccountUnlockError: If the account cannot be unlocked
            TransactionError: If the transaction fails or reverts
        """
        options = self._contract.options.merged(options)

        self._logger.info("Call method %s from account %s...", method, options.account.address)

        _, web3_args = self._prepare(method, args)

        self._contract.unlock_account(options.account)

        self._logger.debug("Execute method %s ...", method)

        try:
            tx_hash = getattr(self._inst.functions, method)(*web3_args).transact(
                options.as_transaction()
            )
        except (Web3Exception, ValueError) as exc:
            self._logger.error("Method call error: %s", exc)
            raise TransactionError(
                f"Method call {method} failed: {exc}", details={"error": str(exc)}
            ) from exc

        tx = Transaction(self._web3, tx_hash, self._logger)

        return tx.get_receipt(
            timeout=self._contract.receipt_timeout,
            poll_interval=self._contract.poll_interval,
        )

    def __repr__(self) -> str:
        return f"ContractInstance({self._address})"
