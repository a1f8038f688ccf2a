from typing import Optional, Tuple

from web3 import Web3

from unit_swap_kit.shared.constants.contracts import (
    ERC20_TRANSFER_FUNCTION_ABI,
    ERC20_TRANSFER_FUNCTION_NAME,
    ERC20_TRANSFER_SELECTOR,
    ZERO_ADDRESS,
)


def encode_transfer(destination: Optional[str], amount: int) -> bytes:
    """Encode an ERC20 `transfer(address,uint256)` call.

    The destination is not validated; an empty one encodes the zero address.
    """
    w3 = Web3()
    contract = w3.eth.contract(abi=ERC20_TRANSFER_FUNCTION_ABI)
    recipient: str = w3.to_checksum_address(destination or ZERO_ADDRESS)
    encoded: str = contract.encode_abi(
        abi_element_identifier=ERC20_TRANSFER_FUNCTION_NAME,
        args=[recipient, amount],
    )
    return bytes.fromhex(encoded.removeprefix("0x"))


def decode_transfer(data: bytes) -> Tuple[str, int]:
    """Decode call data produced by `encode_transfer` into (destination, amount)."""
    if data[:4] != ERC20_TRANSFER_SELECTOR:
        raise ValueError(f"Not an ERC20 transfer call: 0x{data[:4].hex()}")
    contract = Web3().eth.contract(abi=ERC20_TRANSFER_FUNCTION_ABI)
    _, params = contract.decode_function_input(data)
    return params["to"], params["amount"]
