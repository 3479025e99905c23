"""
Artifact loader for compiled smart contracts.

This module reads the ABI and bytecode of a contract from compiler output.
Two layouts are understood: ``solc --combined-json`` style entries, where the
ABI is a JSON string under ``interface``, and Hardhat/Truffle artifacts,
where it is a list under ``abi``.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..abi.descriptors import MethodDescriptor, parse_abi, resolve_descriptor
from ..exceptions import ArtifactError

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ContractArtifact:
    """
    ABI and bytecode of a compiled contract.

    Attributes:
        abi: Raw ABI entries
        bytecode: Deployment bytecode as a 0x-prefixed hex string
        name: Contract name, when the artifact records one
    """

    abi: Tuple[Dict[str, Any], ...]
    bytecode: str
    name: Optional[str] = None

    @property
    def descriptors(self) -> Tuple[MethodDescriptor, ...]:
        return parse_abi(list(self.abi))


def load_artifact(path: PathLike) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        path: Path to the artifact file

    Returns:
        Artifact dictionary

    Raises:
        FileNotFoundError: If the artifact file doesn't exist
        ArtifactError: If the file is not valid JSON
    """
    artifact_path = Path(path)

    if not artifact_path.exists():
        raise FileNotFoundError(f"Artifact file not found: {artifact_path}")

    with open(artifact_path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except ValueError as exc:
            raise ArtifactError(
                f"Artifact file is not valid JSON: {artifact_path}",
                details={"error": str(exc)},
            ) from exc


def _normalize_bytecode(bytecode: Any) -> str:
    if isinstance(bytecode, Mapping):
        # Truffle and some solc outputs nest it as {"object": "..."}
        bytecode = bytecode.get("object", "")
    bytecode = (bytecode or "").strip()
    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode
    return bytecode


def parse_artifact(data: Mapping[str, Any], name: Optional[str] = None) -> ContractArtifact:
    """
    Build a :class:`ContractArtifact` from compiler output.

    Args:
        data: Artifact mapping with either 'interface' (JSON text) or 'abi'
        name: Contract name, overriding any name in the artifact

    Returns:
        The parsed artifact

    Raises:
        ArtifactError: If the artifact has no usable ABI
    """
    if "abi" in data:
        abi = data["abi"]
    elif "interface" in data:
        abi = data["interface"]
    else:
        raise ArtifactError("Artifact has neither 'abi' nor 'interface'")

    if isinstance(abi, (str, bytes)):
        try:
            abi = json.loads(abi)
        except ValueError as exc:
            raise ArtifactError(
                "Contract interface is not valid JSON", details={"error": str(exc)}
            ) from exc

    if not isinstance(abi, list):
        raise ArtifactError(f"Contract ABI must be a list, got {type(abi).__name__}")

    return ContractArtifact(
        abi=tuple(abi),
        bytecode=_normalize_bytecode(data.get("bytecode")),
        name=name or data.get("contractName"),
    )


def get_abi(path: PathLike) -> List[Dict[str, Any]]:
    """
    Get the ABI of the contract in an artifact file.

    Args:
        path: Path to the artifact file

    Returns:
        Contract ABI as a list
    """
    return list(parse_artifact(load_artifact(path)).abi)


def get_bytecode(path: PathLike) -> str:
    """
    Get the deployment bytecode of the contract in an artifact file.

    Args:
        path: Path to the artifact file

    Returns:
        Bytecode as a hex string (with '0x' prefix)
    """
    return parse_artifact(load_artifact(path)).bytecode


def get_function_selector(path: PathLike, function_name: str) -> Optional[str]:
    """
    Get the function selector (4-byte signature) for a specific function.

    Args:
        path: Path to the artifact file
        function_name: Name of the function

    Returns:
        Function selector as a hex string, or None if not found
    """
    descriptor = resolve_descriptor(parse_artifact(load_artifact(path)).descriptors, function_name)

    if descriptor is None or descriptor.type != "function":
        return None

    return descriptor.selector
