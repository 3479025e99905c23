"""Tests for calls on a deployed contract instance."""

import pytest
from web3 import Web3

from ethereum_contracts import Contract
from ethereum_contracts.exceptions import (
    CallError,
    ConversionError,
    MethodNotFoundError,
    TransactionError,
)

from conftest import COINBASE, DEPLOYED, LOCAL_ABI, TX_HASH, TYPES_ABI


@pytest.fixture
def local_instance(web3):
    contract = Contract(
        web3=web3,
        contract={"abi": LOCAL_ABI, "bytecode": "0x6060"},
        account={"address": COINBASE, "password": "1234"},
        gas=750000,
    )
    return contract.deploy()


@pytest.fixture
def types_instance(web3):
    contract = Contract(web3=web3, contract={"abi": TYPES_ABI}, account=COINBASE)
    return contract.deploy()


def test_instance_binds_to_deployed_address(web3, local_instance):
    web3.eth.contract.assert_called_with(
        address=Web3.to_checksum_address(DEPLOYED), abi=LOCAL_ABI
    )
    assert local_instance.address == DEPLOYED


class TestLocalCall:
    """Local calls coerce arguments and decode return values."""

    def test_bad_method(self, local_instance):
        with pytest.raises(MethodNotFoundError) as excinfo:
            local_instance.local_call("invalid")
        assert "Method not found" in str(excinfo.value)

    def test_zero_return_values(self, web3, local_instance):
        web3.instance.functions.getZero.return_value.call.return_value = []
        assert local_instance.local_call("getZero") == []

    def test_one_return_value(self, web3, local_instance):
        get_one = web3.instance.functions.getOne
        get_one.return_value.call.return_value = 123

        assert local_instance.local_call("getOne", {"val": "123"}) == 123
        get_one.assert_called_once_with(123)

    def test_two_return_values(self, web3, local_instance):
        address = "0xaa1a6e3e6ef20068f7f8d8c835d2d22fd5116444"
        get_two = web3.instance.functions.getTwo
        get_two.return_value.call.return_value = ["abc", Web3.to_checksum_address(address)]

        assert local_instance.local_call("getTwo", {"s": "abc", "a": address}) == [
            "abc",
            address,
        ]
        get_two.assert_called_once_with("abc", Web3.to_checksum_address(address))

    def test_int8_out_of_bounds(self, web3, types_instance):
        with pytest.raises(ConversionError) as excinfo:
            types_instance.local_call("set_int8", {"val": 2**7})
        assert "Value out of bounds" in str(excinfo.value)
        web3.instance.functions.set_int8.assert_not_called()

    def test_address_from_number(self, web3, types_instance):
        expected = "0x000000000000000000000000000000000000007b"
        set_address = web3.instance.functions.set_address
        set_address.return_value.call.return_value = Web3.to_checksum_address(expected)

        assert types_instance.local_call("set_address", {"val": 123}) == expected

    def test_fixed_bytes_are_padded_for_web3(self, web3, types_instance):
        set_bytes32 = web3.instance.functions.set_bytes32
        set_bytes32.return_value.call.return_value = b"abc".ljust(32, b"\0")

        result = types_instance.local_call("set_bytes32", {"val": list(b"abc")})

        set_bytes32.assert_called_once_with(b"abc".ljust(32, b"\0"))
        assert result == b"abc".ljust(32, b"\0")

    def test_node_error(self, web3, local_instance):
        web3.instance.functions.getOne.return_value.call.side_effect = ValueError("execution reverted")

        with pytest.raises(CallError) as excinfo:
            local_instance.local_call("getOne", {"val": 1})

        assert excinfo.value.method == "getOne"
        assert "execution reverted" in str(excinfo.value)


class TestSendCall:
    """Transactions unlock the account, submit, and wait for a receipt."""

    def test_bad_method(self, local_instance):
        with pytest.raises(MethodNotFoundError):
            local_instance.send_call("invalid")

    def test_bad_argument(self, web3, local_instance):
        with pytest.raises(ConversionError) as excinfo:
            local_instance.send_call("increment", {"_amount": "haha"})

        assert "Value is not a number" in str(excinfo.value)
        web3.instance.functions.increment.assert_not_called()

    def test_good_call(self, web3, local_instance):
        receipt = {"status": 1, "blockNumber": 9, "transactionHash": TX_HASH}
        web3.eth.wait_for_transaction_receipt.return_value = receipt
        increment = web3.instance.functions.increment
        increment.return_value.transact.return_value = TX_HASH
        web3.manager.request_blocking.reset_mock()

        result = local_instance.send_call("increment", {"_amount": 12})

        assert result == receipt
        increment.assert_called_once_with(12)
        increment.return_value.transact.assert_called_once_with(
            {"from": Web3.to_checksum_address(COINBASE), "gas": 750000}
        )
        web3.manager.request_blocking.assert_called_once_with(
            "personal_unlockAccount", [COINBASE, "1234", 2]
        )

    def test_gas_override(self, web3, local_instance):
        increment = web3.instance.functions.increment
        increment.return_value.transact.return_value = TX_HASH

        local_instance.send_call("increment", {"_amount": 12}, {"gas": 100})

        increment.return_value.transact.assert_called_once_with(
            {"from": Web3.to_checksum_address(COINBASE), "gas": 100}
        )

    def test_submission_failure(self, web3, local_instance):
        increment = web3.instance.functions.increment
        increment.return_value.transact.side_effect = ValueError("gas too low")

        with pytest.raises(TransactionError) as excinfo:
            local_instance.send_call("increment", {"_amount": 12})

        assert "gas too low" in str(excinfo.value)

    def test_reverted(self, web3, local_instance):
        web3.instance.functions.increment.return_value.transact.return_value = TX_HASH
        web3.eth.wait_for_transaction_receipt.return_value = {"status": 0}

        with pytest.raises(TransactionError) as excinfo:
            local_instance.send_call("increment", {"_amount": 12})

        assert excinfo.value.tx_hash == Web3.to_hex(TX_HASH)
