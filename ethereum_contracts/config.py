"""Configuration containers for contract wrappers."""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

from web3 import Web3

DEFAULT_GAS = 750000
DEFAULT_UNLOCK_DURATION = 2
DEFAULT_RECEIPT_TIMEOUT = 120.0
DEFAULT_RECEIPT_POLL_INTERVAL = 1.0


@dataclass(frozen=True)
class Account:
    """
    Account that transactions are sent from.

    Attributes:
        address: Account address
        password: Passphrase used to unlock the account on the node. When
            ``None`` the account is assumed to be unlocked already, or to be
            signed for locally by web3 middleware.
    """

    address: str
    password: Optional[str] = None

    @classmethod
    def from_value(cls, value: Union["Account", str, Mapping[str, Any]]) -> "Account":
        """
        Build an account from an ``Account``, an address or a mapping.

        Raises:
            ValueError: If no address can be found in the value
        """
        if isinstance(value, Account):
            return value

        if isinstance(value, str):
            return cls(address=value)

        if isinstance(value, Mapping) and value.get("address"):
            return cls(address=value["address"], password=value.get("password"))

        raise ValueError(f"Invalid account: {value!r}")


@dataclass(frozen=True)
class TransactionOptions:
    """Per-transaction settings; per-call overrides are merged over defaults."""

    account: Account
    gas: int = DEFAULT_GAS

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "TransactionOptions":
        """
        Return a copy with ``account`` and ``gas`` taken from overrides.

        Args:
            overrides: Mapping that may contain 'account' and/or 'gas'

        Returns:
            The merged options
        """
        if not overrides:
            return self

        changes = {}
        if overrides.get("account") is not None:
            changes["account"] = Account.from_value(overrides["account"])
        if overrides.get("gas") is not None:
            changes["gas"] = int(overrides["gas"])

        return replace(self, **changes)

    def as_transaction(self) -> dict:
        """Transaction fields understood by web3's ``transact``."""
        address = self.account.address
        if Web3.is_address(address):
            address = Web3.to_checksum_address(address)
        return {"from": address, "gas": self.gas}
