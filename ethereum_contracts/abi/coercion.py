"""
Coercion of contract call arguments and decoding of returned values.

Arguments arrive as a mapping of parameter name to an arbitrary JSON-ish
value. They are coerced, in the order the ABI declares them, into the exact
representation each input type requires. Values that cannot be represented
safely are rejected rather than silently altered.

Every function here is pure: no I/O and no logging. The only collaborators
are the address predicate and the units conversion primitive, both taken
from web3 by default.
"""

import json
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Mapping, Optional, Union

from web3 import Web3

from ..exceptions import (
    CoercionError,
    ConversionError,
    DecodingError,
    InvalidAddressError,
    InvalidByteLengthError,
    InvalidBytesError,
    MissingArgumentError,
    ValueNotNumericError,
    ValueOutOfBoundsError,
)
from .descriptors import MethodDescriptor
from .types import AbiType, TypeFamily, parse_type

AddressPredicate = Callable[[Any], bool]
UnitConverter = Callable[[int, str], Union[int, Decimal]]

_FALSE_STRINGS = ("", "0", "false")
_BYTE_SEQUENCE_TYPES = (bytes, bytearray, list, tuple)


def to_text(value: Any) -> str:
    """
    Render a value as text the way a JSON-speaking caller expects.

    Booleans become ``"true"``/``"false"``, ``None`` becomes ``"null"``,
    integral floats lose their ``.0`` and mappings become JSON. Lists and
    tuples render as their elements joined by commas, so ``[]`` is ``""``
    and ``[0]`` is ``"0"``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        # None elements render empty
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)


def _parse_number(value: Any) -> Optional[Union[int, Decimal]]:
    """Permissive numeric parse; ``None`` means 'not a number'."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else Decimal(value)
    if isinstance(value, Decimal):
        return None if value.is_nan() else value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return 0

    if "_" in text:
        return None

    unsigned = text.lstrip("+-")

    if unsigned.lower().startswith(("0x", "0o", "0b")):
        try:
            return int(text, 0)
        except ValueError:
            return None

    # only the spelled-out 'Infinity' counts as a number
    if unsigned.lower().startswith(("inf", "nan", "snan")) and unsigned != "Infinity":
        return None

    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    return None if number.is_nan() else number


def _is_integral(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return False


def _coerce_integer(value: Any, abi_type: AbiType) -> Union[int, float, Decimal]:
    number = _parse_number(value)
    if number is None:
        raise ValueNotNumericError("Value is not a number", value=value)

    min_value, max_value = abi_type.bounds
    if number < min_value or number > max_value:
        raise ValueOutOfBoundsError(value, min_value, max_value)

    if isinstance(number, Decimal):
        if _is_integral(number):
            return int(number)
        # in-range fractions pass through as numbers
        return float(number) if isinstance(value, float) else number

    return number


def _coerce_address(value: Any, is_address: AddressPredicate) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        text = "0x" + format(value, "x").rjust(40, "0")[-40:]
    elif _is_integral(value):
        text = "0x" + format(int(value), "x").rjust(40, "0")[-40:]
    else:
        text = to_text(value)

    if not is_address(text):
        raise InvalidAddressError(value)

    return text


def _coerce_bytes(value: Any, abi_type: AbiType) -> Any:
    if not isinstance(value, _BYTE_SEQUENCE_TYPES):
        raise InvalidBytesError(value)

    if abi_type.family is TypeFamily.FIXED_BYTES and len(value) > abi_type.length:
        raise InvalidByteLengthError(value, abi_type.length)

    return value


def coerce_value(
    value: Any,
    abi_type: Union[AbiType, str],
    *,
    is_address: AddressPredicate = Web3.is_address,
) -> Any:
    """
    Coerce a single value to the representation its type requires.

    Args:
        value: Application-level value
        abi_type: Target type, parsed or as a tag string
        is_address: Predicate deciding whether a string is a valid address

    Returns:
        The coerced value

    Raises:
        CoercionError: If the value cannot be represented in the target type
    """
    if isinstance(abi_type, str):
        abi_type = parse_type(abi_type)

    family = abi_type.family

    if abi_type.is_integer:
        return _coerce_integer(value, abi_type)
    if family is TypeFamily.BOOL:
        return to_text(value) not in _FALSE_STRINGS
    if family is TypeFamily.STRING:
        return to_text(value)
    if family is TypeFamily.ADDRESS:
        return _coerce_address(value, is_address)
    if family in (TypeFamily.BYTES, TypeFamily.FIXED_BYTES):
        return _coerce_bytes(value, abi_type)

    return value


def _method_label(descriptor: MethodDescriptor) -> str:
    return descriptor.name or descriptor.type


def coerce_inputs(
    descriptor: MethodDescriptor,
    args: Optional[Mapping[str, Any]],
    *,
    is_address: AddressPredicate = Web3.is_address,
) -> List[Any]:
    """
    Coerce named arguments into the positional list a method expects.

    Args:
        descriptor: Descriptor of the method being called
        args: Argument values keyed by parameter name
        is_address: Predicate deciding whether a string is a valid address

    Returns:
        Coerced values in the order the descriptor declares its inputs

    Raises:
        MissingArgumentError: If a declared input has no value
        ConversionError: If a value cannot be coerced
    """
    args = args or {}
    method = _method_label(descriptor)
    coerced = []

    for param in descriptor.inputs:
        if param.name not in args:
            raise MissingArgumentError(param.name, method)

        try:
            coerced.append(
                coerce_value(args[param.name], param.abi_type, is_address=is_address)
            )
        except CoercionError as exc:
            raise ConversionError(
                f"Error converting value for argument {param.name} of method {method}",
                argument=param.name,
                method=method,
                cause=exc,
            ) from exc

    return coerced


def decode_value(
    value: Any,
    abi_type: Union[AbiType, str],
    *,
    from_wei: UnitConverter = Web3.from_wei,
) -> Any:
    """
    Decode a raw value returned by a contract.

    Integers pass through a wei-to-wei units conversion and come back as
    plain ``int``; addresses are normalized to lower-case hex. Everything
    else is returned unchanged.

    Raises:
        DecodingError: If the value does not fit its declared type
    """
    if isinstance(abi_type, str):
        abi_type = parse_type(abi_type)

    if abi_type.is_integer:
        try:
            number = int(value)
            magnitude = int(from_wei(abs(number), "wei"))
        except (TypeError, ValueError) as exc:
            raise DecodingError("Value is not a number", value=value) from exc
        return -magnitude if number < 0 else magnitude

    if abi_type.family is TypeFamily.ADDRESS:
        try:
            return Web3.to_checksum_address(value).lower()
        except (TypeError, ValueError) as exc:
            raise DecodingError("Value is not a valid address", value=value) from exc

    return value


def decode_outputs(
    descriptor: MethodDescriptor,
    value: Any,
    *,
    from_wei: UnitConverter = Web3.from_wei,
) -> Any:
    """
    Decode the value or values returned by a method.

    A list or tuple is treated as one raw value per declared output; anything
    else as a single raw value. The result has the same shape: a list for
    sequence input, the first decoded value for single input.

    Raises:
        ConversionError: If a returned value cannot be decoded
    """
    is_sequence = isinstance(value, (list, tuple))
    remaining = list(value) if is_sequence else [value]
    method = _method_label(descriptor)
    decoded = []

    for index, param in enumerate(descriptor.outputs):
        label = param.name or str(index)
        raw = remaining.pop(0) if remaining else None
        try:
            decoded.append(decode_value(raw, param.abi_type, from_wei=from_wei))
        except CoercionError as exc:
            raise ConversionError(
                f"Error converting return value {label} of method {method}",
                argument=label,
                method=method,
                cause=exc,
            ) from exc

    if is_sequence:
        return decoded
    return decoded[0] if decoded else None
