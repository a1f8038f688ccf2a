from unit_swap_kit.shared.configuration import Context
from unit_swap_kit.shared.parameter_schemas import TokenMetadata
from unit_swap_kit.shared.unit_utils.amount_validator import validate_input

TKN = TokenMetadata(
    symbol="TKN", address="0x6B175474E89094C44Da98b954EedeAC495271d0F", decimal=2
)


def test_rejects_missing_or_negative_values():
    context = Context()

    assert not validate_input(None, "ETH", context)
    assert not validate_input(-1, "ETH", context)


def test_accepts_anything_when_balance_unknown():
    assert validate_input(10**30, "ETH", Context())
    assert validate_input(0, "ETH", Context())


def test_accepts_anything_when_offline():
    context = Context(ether_balance=1, offline=True)

    assert validate_input(10**30, "ETH", context)


def test_network_unit_amount_and_gas_must_fit_balance():
    context = Context(ether_balance=1000, gas_cost=100)

    assert validate_input(900, "ETH", context)
    assert not validate_input(901, "ETH", context)


def test_token_amount_checked_against_token_balance():
    context = Context(tokens=[TKN], ether_balance=1000, token_balances={"TKN": 50})

    assert validate_input(50, "TKN", context)
    assert not validate_input(51, "TKN", context)


def test_token_amount_without_known_token_balance_is_valid():
    context = Context(tokens=[TKN], ether_balance=1000)

    assert validate_input(10**20, "TKN", context)


def test_token_transfer_requires_gas_in_network_unit():
    context = Context(
        tokens=[TKN], ether_balance=10, gas_cost=11, token_balances={"TKN": 50}
    )

    assert not validate_input(1, "TKN", context)


def test_rejects_amounts_that_do_not_fit_uint256():
    max_uint256 = 2**256 - 1

    assert validate_input(max_uint256, "ETH", Context())
    assert not validate_input(max_uint256 + 1, "ETH", Context())
    assert not validate_input(max_uint256 + 1, "ETH", Context(offline=True))
