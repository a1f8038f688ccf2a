"""Unit tests for ERC20 transfer encoding."""

from unittest.mock import MagicMock, patch

import pytest
from web3 import Web3

from unit_swap_kit.shared.constants.contracts import (
    ERC20_TRANSFER_FUNCTION_NAME,
    ERC20_TRANSFER_SELECTOR,
    ZERO_ADDRESS,
)
from unit_swap_kit.shared.unit_utils.transfer_encoder import (
    decode_transfer,
    encode_transfer,
)

RECIPIENT = "0x1234567890123456789012345678901234567890"


def test_encodes_standard_transfer_call():
    data = encode_transfer("0x1111111111111111111111111111111111111111", 100)

    assert data.hex() == (
        "a9059cbb"
        + "000000000000000000000000" + "1111111111111111111111111111111111111111"
        + "0" * 62 + "64"
    )


def test_selector_and_length():
    data = encode_transfer(RECIPIENT, 1)

    assert data[:4] == ERC20_TRANSFER_SELECTOR
    assert len(data) == 4 + 32 + 32


def test_encoding_is_deterministic():
    assert encode_transfer(RECIPIENT, 42) == encode_transfer(RECIPIENT.lower(), 42)


@pytest.mark.parametrize("amount", [0, 1, 22, 10**18, 2**256 - 1])
def test_round_trip_recovers_destination_and_amount(amount):
    destination, decoded_amount = decode_transfer(encode_transfer(RECIPIENT, amount))

    assert destination == Web3.to_checksum_address(RECIPIENT)
    assert decoded_amount == amount


@pytest.mark.parametrize("destination", [None, ""])
def test_empty_destination_encodes_zero_address(destination):
    decoded_destination, _ = decode_transfer(encode_transfer(destination, 5))

    assert decoded_destination == ZERO_ADDRESS


def test_decode_rejects_other_calls():
    with pytest.raises(ValueError, match="Not an ERC20 transfer call"):
        decode_transfer(bytes.fromhex("095ea7b3") + b"\x00" * 64)


@patch("unit_swap_kit.shared.unit_utils.transfer_encoder.Web3")
def test_uses_web3_contract_encoder(mock_web3):
    mock_contract = MagicMock()
    mock_contract.encode_abi.return_value = "0xa9059cbb"
    mock_web3.return_value.eth.contract.return_value = mock_contract
    mock_web3.return_value.to_checksum_address.return_value = RECIPIENT

    result = encode_transfer(RECIPIENT, 100)

    mock_contract.encode_abi.assert_called_once_with(
        abi_element_identifier=ERC20_TRANSFER_FUNCTION_NAME,
        args=[RECIPIENT, 100],
    )
    assert result == bytes.fromhex("a9059cbb")
