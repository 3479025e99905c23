"""Contract deployment and invocation wrappers."""
from .contract import Contract
from .factory import ContractFactory
from .instance import ContractInstance
from .transaction import Transaction

__all__ = ["Contract", "ContractFactory", "ContractInstance", "Transaction"]
