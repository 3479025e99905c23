"""
Contract wrapper for deployment.

This module provides a high-level interface for deploying a compiled
contract. Arguments are passed by name and coerced against the contract ABI
before anything is sent to the node.
"""

from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from web3 import Web3
from web3.exceptions import Web3Exception

from ..abi.coercion import coerce_inputs, decode_outputs
from ..abi.descriptors import CONSTRUCTOR, MethodDescriptor, resolve_descriptor
from ..artifacts.loader import ContractArtifact, load_artifact, parse_artifact
from ..config import (
    DEFAULT_GAS,
    DEFAULT_RECEIPT_POLL_INTERVAL,
    DEFAULT_RECEIPT_TIMEOUT,
    DEFAULT_UNLOCK_DURATION,
    Account,
    TransactionOptions,
)
from ..exceptions import AccountUnlockError, DeploymentError, MethodNotFoundError
from ..logger import PACKAGE_LOGGER, BoundLogger, bind_logger
from .arguments import to_web3_args
from .instance import ContractInstance
from .transaction import Transaction

ContractSource = Union[ContractArtifact, Mapping[str, Any], str, Path]


def _as_artifact(contract: ContractSource) -> ContractArtifact:
    if isinstance(contract, ContractArtifact):
        return contract
    if isinstance(contract, (str, Path)):
        return parse_artifact(load_artifact(contract))
    return parse_artifact(contract)


class Contract:
    """
    Wrapper for deploying a compiled contract.

    Args:
        web3: Connected ``Web3`` instance
        contract: Compiled contract: a :class:`ContractArtifact`, compiler
            output mapping, or path to an artifact file
        account: Default account to send transactions from
        gas: Default gas amount for transactions
        logger: Logger to use, see :mod:`ethereum_contracts.logger`
        receipt_timeout: Seconds to wait for transaction receipts
        poll_interval: Seconds between receipt lookups
    """

    def __init__(
        self,
        web3: Web3,
        contract: ContractSource,
        account: Union[Account, str, Mapping[str, Any]],
        gas: int = DEFAULT_GAS,
        logger: Any = PACKAGE_LOGGER,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        poll_interval: float = DEFAULT_RECEIPT_POLL_INTERVAL,
    ):
        self._web3 = web3
        self._artifact = _as_artifact(contract)
        self._descriptors = self._artifact.descriptors
        self._contract = web3.eth.contract(
            abi=list(self._artifact.abi),
            bytecode=self._artifact.bytecode if self._artifact.bytecode != "0x" else None,
        )
        self._options = TransactionOptions(account=Account.from_value(account), gas=gas)
        self._logger = bind_logger(logger)
        self.receipt_timeout = receipt_timeout
        self.poll_interval = poll_interval

    @property
    def web3(self) -> Web3:
        return self._web3

    @property
    def abi(self) -> List[Mapping[str, Any]]:
        return list(self._artifact.abi)

    @property
    def bytecode(self) -> str:
        return self._artifact.bytecode

    @property
    def descriptors(self) -> Tuple[MethodDescriptor, ...]:
        return self._descriptors

    @property
    def options(self) -> TransactionOptions:
        """Default transaction options."""
        return self._options

    @property
    def logger(self) -> BoundLogger:
        return self._logger

    @logger.setter
    def logger(self, value: Any) -> None:
        """Any object with some of debug/info/warning/error; ``None`` silences."""
        self._logger = bind_logger(value)

    def deploy(
        self,
        args: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ContractInstance:
        """
        Deploy the contract to the blockchain.

        Args:
            args: Constructor arguments by name
            options: Overrides for 'account' and/or 'gas'

        Returns:
            The deployed contract instance

        Raises:
            MethodNotFoundError, MissingArgumentError, ConversionError: If the
                constructor arguments are invalid; nothing is sent in that case
            AccountUnlockError: If the account cannot be unlocked
            DeploymentError: If contract creation fails
        """
        options = self._options.merged(options)

        self.logger.info("Deploy contract from account %s...", options.account.address)

        sorted_args = self.sanitize_method_args(CONSTRUCTOR, args)
        web3_args = to_web3_args(self.get_method_descriptor(CONSTRUCTOR), sorted_args)

        self.unlock_account(options.account)

        self.logger.debug("Deploy contract ...")

        try:
            tx_hash = self._contract.constructor(*web3_args).transact(options.as_transaction())
        except (Web3Exception, ValueError) as exc:
            self.logger.error("Contract creation error: %s", exc)
            raise DeploymentError(
                f"Contract creation failed: {exc}", details={"error": str(exc)}
            ) from exc

        tx = Transaction(self._web3, tx_hash, self.logger)
        self.logger.debug("New contract transaction: %s", tx.hash)

        receipt = tx.get_receipt(timeout=self.receipt_timeout, poll_interval=self.poll_interval)
        address = receipt.get("contractAddress")

        if not address:
            raise DeploymentError("Receipt has no contract address", tx_hash=tx.hash)

        self.logger.info("New contract address: %s", address)

        return ContractInstance(contract=self, address=address)

    def unlock_account(self, account: Account) -> None:
        """
        Unlock an account on the node for a short while.

        Accounts without a password are assumed to be usable as is.

        Raises:
            AccountUnlockError: If the node refuses to unlock the account
        """
        if account.password is None:
            self.logger.debug("No password for account %s, not unlocking.", account.address)
            return

        try:
            unlocked = self._web3.manager.request_blocking(
                "personal_unlockAccount",
                [account.address, account.password, DEFAULT_UNLOCK_DURATION],
            )
        except (Web3Exception, ValueError) as exc:
            self.logger.info("Error unlocking account %s: %s", account.address, exc)
            raise AccountUnlockError(account.address, str(exc)) from exc

        if unlocked is False:
            self.logger.info("Node refused to unlock account %s", account.address)
            raise AccountUnlockError(account.address, "account could not be unlocked")

        self.logger.info(
            "Unlocked account %s for %s seconds.", account.address, DEFAULT_UNLOCK_DURATION
        )

    def get_method_descriptor(self, method: str) -> Optional[MethodDescriptor]:
        """
        Get the ABI descriptor for a method name or type.

        Returns:
            The descriptor if found, ``None`` otherwise
        """
        self.logger.debug("Get descriptor for method: %s ...", method)
        return resolve_descriptor(self._descriptors, method)

    def sanitize_method_args(
        self,
        method: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> List[Any]:
        """
        Coerce named arguments for a method into positional form.

        Args:
            method: The method name or type we wish to invoke
            args: Arguments for the method, by name

        Returns:
            Coerced arguments in declaration order

        Raises:
            MethodNotFoundError: If the method does not exist
            MissingArgumentError: If an argument is missing
            ConversionError: If an argument cannot be coerced
        """
        args = args or {}

        self.logger.debug("Sanitize %d arguments for method: %s ...", len(args), method)

        descriptor = self.get_method_descriptor(method)

        if descriptor is None:
            # no constructor in the ABI means the built-in one
            if method == CONSTRUCTOR:
                self.logger.debug("Built-in constructor, so no arguments.")
                return []
            raise MethodNotFoundError(method)

        return coerce_inputs(descriptor, args)

    def sanitize_method_return_values(self, method: str, value: Any) -> Any:
        """
        Decode the value or values returned by a method.

        Args:
            method: The method name or type that was invoked
            value: Return value, or list of return values

        Returns:
            Value or values matching the method's declared outputs

        Raises:
            MethodNotFoundError: If the method does not exist
            ConversionError: If a value cannot be decoded
        """
        values_count = len(value) if isinstance(value, (list, tuple)) else 1
        self.logger.debug(
            "Sanitize %d return values from method: %s ...", values_count, method
        )

        descriptor = self.get_method_descriptor(method)

        if descriptor is None:
            raise MethodNotFoundError(method)

        return decode_outputs(descriptor, value)

