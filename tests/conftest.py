from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from ethereum_contracts.abi.descriptors import parse_abi

COINBASE = "0x9560e8ac6718a6a1cdcff189d603c9063e413da6"
DEST = "0x2bd2326c993dfaef84f696526064ff22eba5b362"
DEPLOYED = "0xaa1a6e3e6ef20068f7f8d8c835d2d22fd5116444"
TX_HASH = b"\x12" * 32


def _function(name: str, inputs=(), outputs=()) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": n, "type": t} for n, t in outputs],
        "stateMutability": "nonpayable",
    }


TYPES_ABI = [
    _function("set_int8", [("val", "int8")], [("", "int8")]),
    _function("set_uint8", [("val", "uint8")], [("", "uint8")]),
    _function("set_bool", [("val", "bool")], [("", "bool")]),
    _function("set_string", [("val", "string")], [("", "string")]),
    _function("set_address", [("val", "address")], [("", "address")]),
    _function("set_bytes32", [("val", "bytes32")], [("", "bytes32")]),
]

LOCAL_ABI = [
    _function("getZero"),
    _function("getOne", [("val", "uint256")], [("", "uint256")]),
    _function("getTwo", [("s", "string"), ("a", "address")], [("s", "string"), ("a", "address")]),
    _function("increment", [("_amount", "uint256")]),
    {
        "type": "event",
        "name": "Incremented",
        "inputs": [{"name": "amount", "type": "uint256", "indexed": False}],
        "anonymous": False,
    },
]

PAY_ABI = [
    {
        "type": "constructor",
        "inputs": [
            {"name": "_fee", "type": "uint256"},
            {"name": "_dest", "type": "address"},
            {"name": "_str", "type": "string"},
            {"name": "_data", "type": "bytes"},
            {"name": "_flag", "type": "bool"},
        ],
        "stateMutability": "payable",
    },
    _function("getDest", outputs=[("", "address")]),
]


@pytest.fixture
def types_descriptors():
    return parse_abi(TYPES_ABI)


@pytest.fixture
def local_descriptors():
    return parse_abi(LOCAL_ABI)


class RecordingLogger:
    """Collects log calls as (level, message, args) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, tuple[Any, ...]]] = []

    def _record(self, level: str, msg: str, *args: Any) -> None:
        self.records.append((level, msg, args))

    def debug(self, msg: str, *args: Any) -> None:
        self._record("debug", msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._record("info", msg, *args)

    def warning(self, msg: str, *args: Any) -> None:
        self._record("warning", msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._record("error", msg, *args)


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def web3():
    """Web3 double: deployments succeed at ``DEPLOYED`` and receipts arrive at once."""
    w3 = MagicMock()
    factory = MagicMock(name="factory")
    instance = MagicMock(name="instance")

    def contract(**kwargs):
        return instance if "address" in kwargs else factory

    w3.eth.contract.side_effect = contract
    factory.constructor.return_value.transact.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {
        "status": 1,
        "blockNumber": 7,
        "contractAddress": DEPLOYED,
        "transactionHash": TX_HASH,
    }
    w3.manager.request_blocking.return_value = True
    w3.factory = factory
    w3.instance = instance
    return w3
