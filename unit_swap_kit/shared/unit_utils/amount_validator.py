from typing import Optional

from unit_swap_kit.shared.configuration import Context
from unit_swap_kit.shared.constants.contracts import MAX_UINT256
from unit_swap_kit.shared.unit_utils.token_resolver import TokenResolver


def validate_input(value: Optional[int], unit: str, context: Context) -> bool:
    """Check a rebased amount against the balances known to the wallet.

    Args:
        value: Amount in the smallest denomination of `unit`, None if the raw
            input was not a number.
        unit: The unit the amount is denominated in.
        context: Wallet state with balances, gas cost and offline flag.

    Returns:
        bool: False for missing, negative or above-uint256 amounts and for amounts the known
        balances cannot cover. True whenever there is nothing to check against.
    """
    if value is None or value < 0 or value > MAX_UINT256:
        return False

    if context.offline or context.ether_balance is None:
        return True

    gas_cost: int = context.gas_cost or 0

    if TokenResolver(context).is_network_unit(unit):
        return value + gas_cost <= context.ether_balance

    # gas is always paid in the network unit
    if gas_cost > context.ether_balance:
        return False

    token_balance: Optional[int] = context.token_balances.get(unit)
    if token_balance is None:
        return True
    return value <= token_balance
