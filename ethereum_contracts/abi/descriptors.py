"""
ABI method descriptors and their lookup.

A descriptor is an immutable view of one ABI entry. Descriptors are built
once when a contract wrapper is created and are never mutated afterwards.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Union

from web3 import Web3

from ..exceptions import ArtifactError
from .types import AbiType, parse_type

CONSTRUCTOR = "constructor"


@dataclass(frozen=True)
class Parameter:
    """A named, typed input or output of a method."""

    name: str
    type: str
    abi_type: AbiType = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "abi_type", parse_type(self.type))

    @classmethod
    def from_abi(cls, entry: Dict[str, Any]) -> "Parameter":
        return cls(name=entry.get("name") or "", type=entry.get("type", ""))


@dataclass(frozen=True)
class MethodDescriptor:
    """
    One entry of a contract ABI.

    Attributes:
        name: Method or event name, ``None`` for the constructor
        type: Entry type ('function', 'constructor', 'event', ...)
        inputs: Declared inputs in order
        outputs: Declared outputs in order
    """

    name: Optional[str]
    type: str
    inputs: Tuple[Parameter, ...] = ()
    outputs: Tuple[Parameter, ...] = ()

    @classmethod
    def from_abi(cls, entry: Dict[str, Any]) -> "MethodDescriptor":
        """
        Build a descriptor from a raw ABI entry.

        Args:
            entry: ABI entry dictionary

        Returns:
            The descriptor

        Raises:
            ArtifactError: If the entry is not a mapping
        """
        if not isinstance(entry, dict):
            raise ArtifactError(f"ABI entry must be an object, got {type(entry).__name__}")

        return cls(
            name=entry.get("name"),
            type=entry.get("type", "function"),
            inputs=tuple(Parameter.from_abi(item) for item in entry.get("inputs", [])),
            outputs=tuple(Parameter.from_abi(item) for item in entry.get("outputs", [])),
        )

    @property
    def signature(self) -> str:
        """Canonical signature, e.g. ``transfer(address,uint256)``."""
        types = ",".join(param.type for param in self.inputs)
        return f"{self.name or self.type}({types})"

    @property
    def selector(self) -> str:
        """4-byte function selector as a 0x-prefixed hex string."""
        return Web3.to_hex(Web3.keccak(text=self.signature)[:4])


def parse_abi(abi: Union[str, Iterable[Dict[str, Any]]]) -> Tuple[MethodDescriptor, ...]:
    """
    Parse a contract ABI into descriptors.

    Args:
        abi: ABI as a list of entries, or its JSON text

    Returns:
        Descriptors in ABI order

    Raises:
        ArtifactError: If the ABI cannot be parsed
    """
    if isinstance(abi, (str, bytes)):
        try:
            abi = json.loads(abi)
        except ValueError as exc:
            raise ArtifactError(
                "Contract interface is not valid JSON", details={"error": str(exc)}
            ) from exc

    if not isinstance(abi, list):
        raise ArtifactError(f"Contract ABI must be a list, got {type(abi).__name__}")

    return tuple(MethodDescriptor.from_abi(entry) for entry in abi)


def resolve_descriptor(
    descriptors: Sequence[MethodDescriptor],
    identifier: str,
) -> Optional[MethodDescriptor]:
    """
    Find the descriptor for a method name or entry type.

    Names take precedence over types, so passing ``"constructor"`` finds the
    constructor even though it has no name.

    Args:
        descriptors: Parsed contract ABI
        identifier: Method name, or an entry type such as 'constructor'

    Returns:
        The matching descriptor, or ``None`` if there is none
    """
    for descriptor in descriptors:
        if descriptor.name == identifier:
            return descriptor

    for descriptor in descriptors:
        if descriptor.type == identifier:
            return descriptor

    return None
