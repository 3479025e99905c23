"""Tests for ABI descriptor parsing and resolution."""

import json

import pytest

from ethereum_contracts.abi.descriptors import (
    MethodDescriptor,
    Parameter,
    parse_abi,
    resolve_descriptor,
)
from ethereum_contracts.abi.types import TypeFamily
from ethereum_contracts.exceptions import ArtifactError

from conftest import LOCAL_ABI, PAY_ABI

TRANSFER = {
    "type": "function",
    "name": "transfer",
    "inputs": [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
    "outputs": [{"name": "", "type": "bool"}],
}


def test_parse_abi_keeps_order_and_types():
    descriptors = parse_abi(LOCAL_ABI)

    assert [d.name for d in descriptors] == [
        "getZero",
        "getOne",
        "getTwo",
        "increment",
        "Incremented",
    ]
    get_two = descriptors[2]
    assert [p.name for p in get_two.inputs] == ["s", "a"]
    assert get_two.inputs[1].abi_type.family is TypeFamily.ADDRESS
    assert descriptors[4].type == "event"


def test_parse_abi_accepts_json_text():
    assert parse_abi(json.dumps(PAY_ABI)) == parse_abi(PAY_ABI)


def test_parse_abi_rejects_invalid_json():
    with pytest.raises(ArtifactError):
        parse_abi("[{not json")


def test_parse_abi_rejects_non_list():
    with pytest.raises(ArtifactError):
        parse_abi({"type": "function"})


def test_parse_abi_rejects_non_object_entry():
    with pytest.raises(ArtifactError):
        parse_abi(["transfer"])


def test_constructor_has_no_name():
    constructor = parse_abi(PAY_ABI)[0]
    assert constructor.name is None
    assert constructor.type == "constructor"
    assert len(constructor.inputs) == 5


def test_signature_and_selector():
    descriptor = MethodDescriptor.from_abi(TRANSFER)
    assert descriptor.signature == "transfer(address,uint256)"
    assert descriptor.selector == "0xa9059cbb"


def test_parameter_parses_type():
    param = Parameter(name="val", type="bytes32")
    assert param.abi_type.length == 32


class TestResolveDescriptor:
    """Lookup by name, then by entry type."""

    def test_by_name(self, local_descriptors):
        assert resolve_descriptor(local_descriptors, "getOne").name == "getOne"

    def test_constructor_by_type(self):
        descriptor = resolve_descriptor(parse_abi(PAY_ABI), "constructor")
        assert descriptor is not None
        assert descriptor.type == "constructor"

    def test_name_takes_precedence_over_type(self):
        abi = PAY_ABI + [dict(TRANSFER, name="constructor")]
        descriptor = resolve_descriptor(parse_abi(abi), "constructor")
        assert descriptor.type == "function"

    def test_missing_returns_none(self, local_descriptors):
        assert resolve_descriptor(local_descriptors, "invalid") is None

    def test_missing_constructor_returns_none(self, local_descriptors):
        assert resolve_descriptor(local_descriptors, "constructor") is None
