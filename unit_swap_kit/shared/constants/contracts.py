ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

ERC20_TRANSFER_FUNCTION_NAME = "transfer"
ERC20_TRANSFER_FUNCTION_ABI = [
    {
        "type": "function",
        "name": ERC20_TRANSFER_FUNCTION_NAME,
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    }
]

# keccak256("transfer(address,uint256)")[:4]
ERC20_TRANSFER_SELECTOR = bytes.fromhex("a9059cbb")

# largest amount a uint256 argument can carry
MAX_UINT256 = 2**256 - 1
