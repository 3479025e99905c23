"""Artifact loading utilities for compiled smart contracts."""
from .loader import (
    ContractArtifact,
    get_abi,
    get_bytecode,
    get_function_selector,
    load_artifact,
    parse_artifact,
)

__all__ = [
    "ContractArtifact",
    "get_abi",
    "get_bytecode",
    "get_function_selector",
    "load_artifact",
    "parse_artifact",
]
