"""
Parsed representation of ABI type tags.

Type tags such as ``uint8``, ``bytes32`` or ``address`` are parsed once into
an :class:`AbiType` so that coercion can dispatch on a closed set of families
rather than re-testing string prefixes at every call site.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

DEFAULT_INT_BITS = 256
MAX_FIXED_BYTES = 32

_INTEGER_RE = re.compile(r"^(u?int)(\d*)$")
_FIXED_BYTES_RE = re.compile(r"^bytes(\d+)$")


class TypeFamily(Enum):
    """Families of values the coercion engine knows how to handle."""

    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    ADDRESS = "address"
    BYTES = "bytes"
    FIXED_BYTES = "fixed_bytes"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class AbiType:
    """
    A type tag parsed into its family and size.

    Attributes:
        tag: The original tag string from the ABI
        family: The type family
        size: Bit width for integer families, byte length for fixed-width
            byte arrays, ``None`` otherwise
    """

    tag: str
    family: TypeFamily
    size: Optional[int] = None

    @property
    def is_integer(self) -> bool:
        return self.family in (TypeFamily.INT, TypeFamily.UINT)

    @property
    def bounds(self) -> Tuple[int, int]:
        """
        Inclusive ``(min, max)`` range of an integer type.

        The signed minimum is ``-(2**(N-1) - 1)``, one less in magnitude than
        the two's complement minimum.

        Raises:
            TypeError: If this is not an integer type
        """
        if self.family is TypeFamily.INT:
            limit = 2 ** (self.size - 1) - 1
            return -limit, limit
        if self.family is TypeFamily.UINT:
            return 0, 2 ** self.size - 1
        raise TypeError(f"Type {self.tag} has no numeric bounds")

    @property
    def length(self) -> Optional[int]:
        """Maximum length of a fixed-width byte array, ``None`` otherwise."""
        if self.family is TypeFamily.FIXED_BYTES:
            return self.size
        return None


def parse_type(tag: str) -> AbiType:
    """
    Parse an ABI type tag.

    Unknown tags (arrays, tuples, fixed-point numbers, ...) parse to the
    ``PASSTHROUGH`` family; this function never fails.

    Args:
        tag: Type tag as it appears in the ABI (e.g., 'uint8', 'bytes32')

    Returns:
        The parsed type
    """
    tag = tag.strip()

    match = _INTEGER_RE.match(tag)
    if match:
        bits = int(match.group(2)) if match.group(2) else DEFAULT_INT_BITS
        if bits > 0:
            family = TypeFamily.UINT if match.group(1) == "uint" else TypeFamily.INT
            return AbiType(tag, family, bits)
        return AbiType(tag, TypeFamily.PASSTHROUGH)

    if tag in ("bool", "boolean"):
        return AbiType(tag, TypeFamily.BOOL)

    if tag == "string":
        return AbiType(tag, TypeFamily.STRING)

    if tag == "address":
        return AbiType(tag, TypeFamily.ADDRESS)

    if tag == "bytes":
        return AbiType(tag, TypeFamily.BYTES)

    # See https://docs.soliditylang.org/en/latest/types.html#fixed-size-byte-arrays
    if tag == "byte":
        return AbiType(tag, TypeFamily.FIXED_BYTES, 1)

    match = _FIXED_BYTES_RE.match(tag)
    if match:
        length = int(match.group(1))
        if 1 <= length <= MAX_FIXED_BYTES:
            return AbiType(tag, TypeFamily.FIXED_BYTES, length)

    return AbiType(tag, TypeFamily.PASSTHROUGH)
