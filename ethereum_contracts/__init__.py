"""
Ethereum Contracts

Deploy smart contracts and invoke their methods through web3, passing
arguments by name. Arguments are coerced to the types the contract ABI
declares before anything is sent, and returned values are decoded back.
"""

import logging

__version__ = "1.0.0"

from .abi import (
    AbiType,
    MethodDescriptor,
    TypeFamily,
    coerce_inputs,
    coerce_value,
    decode_outputs,
    decode_value,
    parse_abi,
    parse_type,
    resolve_descriptor,
)
from .artifacts.loader import (
    ContractArtifact,
    get_abi,
    get_bytecode,
    get_function_selector,
    load_artifact,
    parse_artifact,
)
from .config import Account, TransactionOptions
from .contracts import Contract, ContractFactory, ContractInstance, Transaction
from .exceptions import (
    AccountUnlockError,
    ArtifactError,
    CallError,
    CoercionError,
    ContractError,
    ConversionError,
    DecodingError,
    DeploymentError,
    InvalidAddressError,
    InvalidByteLengthError,
    InvalidBytesError,
    MethodNotFoundError,
    MissingArgumentError,
    TransactionError,
    ValueNotNumericError,
    ValueOutOfBoundsError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    # Contract wrappers
    'Contract',
    'ContractFactory',
    'ContractInstance',
    'Transaction',
    'Account',
    'TransactionOptions',
    # ABI handling
    'AbiType',
    'MethodDescriptor',
    'TypeFamily',
    'coerce_inputs',
    'coerce_value',
    'decode_outputs',
    'decode_value',
    'parse_abi',
    'parse_type',
    'resolve_descriptor',
    # Artifacts
    'ContractArtifact',
    'get_abi',
    'get_bytecode',
    'get_function_selector',
    'load_artifact',
    'parse_artifact',
    # Exceptions
    'ContractError',
    'MethodNotFoundError',
    'MissingArgumentError',
    'CoercionError',
    'ValueNotNumericError',
    'ValueOutOfBoundsError',
    'InvalidAddressError',
    'InvalidBytesError',
    'InvalidByteLengthError',
    'DecodingError',
    'ConversionError',
    'ArtifactError',
    'AccountUnlockError',
    'TransactionError',
    'DeploymentError',
    'CallError',
]
