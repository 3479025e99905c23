"""ABI descriptors, type parsing and argument coercion."""
from .coercion import coerce_inputs, coerce_value, decode_outputs, decode_value
from .descriptors import (
    CONSTRUCTOR,
    MethodDescriptor,
    Parameter,
    parse_abi,
    resolve_descriptor,
)
from .types import AbiType, TypeFamily, parse_type

__all__ = [
    "CONSTRUCTOR",
    "AbiType",
    "MethodDescriptor",
    "Parameter",
    "TypeFamily",
    "coerce_inputs",
    "coerce_value",
    "decode_outputs",
    "decode_value",
    "parse_abi",
    "parse_type",
    "resolve_descriptor",
]
