"""Exception hierarchy for contract deployment and invocation."""

from typing import Any, Dict, Optional


class ContractError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MethodNotFoundError(ContractError):
    """Raised when a method name or type matches no ABI descriptor."""

    def __init__(self, method: str):
        super().__init__(f"Method not found: {method}")
        self.method = method


class MissingArgumentError(ContractError):
    """Raised when a declared input is absent from the argument mapping."""

    def __init__(self, argument: str, method: str):
        super().__init__(f"Missing argument {argument} for method {method}")
        self.argument = argument
        self.method = method


class CoercionError(ContractError):
    """Raised when a value cannot be coerced to its target type."""

    def __init__(
        self,
        message: str,
        value: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.value = value


class ValueNotNumericError(CoercionError):
    """Raised when an integer type receives a value that is not a number."""

    pass


class ValueOutOfBoundsError(CoercionError):
    """Raised when a number falls outside the range of its integer type."""

    def __init__(self, value: Any, min_value: int, max_value: int):
        super().__init__(
            f"Value out of bounds (min={min_value}, max={max_value})", value=value
        )
        self.min_value = min_value
        self.max_value = max_value


class InvalidAddressError(CoercionError):
    """Raised when a value is not a well-formed account address."""

    def __init__(self, value: Any):
        super().__init__("Value is not a valid address", value=value)


class InvalidBytesError(CoercionError):
    """Raised when a byte type receives something other than a byte sequence."""

    def __init__(self, value: Any):
        super().__init__("Value must be a byte array", value=value)


class InvalidByteLengthError(CoercionError):
    """Raised when a fixed-width byte type receives too long a sequence."""

    def __init__(self, value: Any, max_length: int):
        super().__init__(
            f"Value length must not be greater than {max_length}", value=value
        )
        self.max_length = max_length


class DecodingError(CoercionError):
    """Raised when a value returned by a contract cannot be decoded."""

    pass


class ConversionError(ContractError):
    """Raised when converting a single argument or return value fails.

    The message of the underlying error is embedded in this error's message
    and the underlying error is kept as ``cause``.
    """

    def __init__(
        self,
        message: str,
        argument: str,
        method: str,
        cause: ContractError,
    ):
        super().__init__(f"{message}: {cause.message}", details=dict(cause.details))
        self.argument = argument
        self.method = method
        self.cause = cause


class ArtifactError(ContractError):
    """Raised when a compiled contract artifact is malformed."""

    pass


class AccountUnlockError(ContractError):
    """Raised when the node refuses to unlock an account."""

    def __init__(
        self,
        address: str,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = f"Error unlocking account {address}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details)
        self.address = address


class TransactionError(ContractError):
    """Raised when submitting or confirming a transaction fails."""

    def __init__(
        self,
        message: str,
        tx_hash: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.tx_hash = tx_hash


class DeploymentError(TransactionError):
    """Raised when contract creation fails."""

    pass


class CallError(ContractError):
    """Raised when a local (read-only) contract call fails."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.method = method
