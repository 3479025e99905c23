"""Adaptation of coerced arguments to the Python types web3.py accepts."""

from typing import Any, List, Optional, Sequence

from web3 import Web3

from ..abi.descriptors import MethodDescriptor
from ..abi.types import AbiType, TypeFamily
from ..exceptions import ConversionError, InvalidBytesError


def _to_web3_value(value: Any, abi_type: AbiType) -> Any:
    if abi_type.family is TypeFamily.ADDRESS:
        return Web3.to_checksum_address(value)

    if abi_type.family in (TypeFamily.BYTES, TypeFamily.FIXED_BYTES):
        try:
            data = bytes(value)
        except (TypeError, ValueError) as exc:
            raise InvalidBytesError(value) from exc
        if abi_type.family is TypeFamily.FIXED_BYTES:
            data = data.ljust(abi_type.length, b"\0")
        return data

    return value


def to_web3_args(descriptor: Optional[MethodDescriptor], values: Sequence[Any]) -> List[Any]:
    """
    Adapt coerced values to the Python types web3.py accepts.

    Addresses become checksum addresses and byte sequences become ``bytes``,
    right-padded with zeros for fixed-width types.

    Args:
        descriptor: Descriptor the values were coerced against
        values: Coerced values, in input order

    Returns:
        Values ready to pass to a contract function

    Raises:
        ConversionError: If a byte sequence holds something other than bytes
    """
    if descriptor is None:
        return list(values)

    method = descriptor.name or descriptor.type
    adapted = []
    for param, value in zip(descriptor.inputs, values):
        try:
            adapted.append(_to_web3_value(value, param.abi_type))
        except InvalidBytesError as exc:
            raise ConversionError(
                f"Error converting value for argument {param.name} of method {method}",
                argument=param.name,
                method=method,
                cause=exc,
            ) from exc
    return adapted
