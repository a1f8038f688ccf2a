import re
from decimal import Decimal, getcontext, localcontext, ROUND_FLOOR

from unit_swap_kit.shared.models import AmountField

# Set high precision for large token calculations
getcontext().prec = 100

# Plain non-negative decimal notation: "1", "1.5", ".5", "1."
_NUMBER_PATTERN = re.compile(r"\d+\.?\d*|\.\d+")


def to_base_unit(amount: float | Decimal | str, decimals: int) -> Decimal:
    """
    Converts a token amount to base units (the smallest denomination).
    Precision beyond `decimals` is truncated, never rounded up.
    Example: `to_base_unit("1.5", 8) => Decimal('150000000')`
    """
    amount_dec = Decimal(amount)
    with localcontext() as ctx:
        # enough digits for the product to be exact before flooring
        ctx.prec = max(ctx.prec, len(amount_dec.as_tuple().digits) + decimals + 1)
        ctx.rounding = ROUND_FLOOR
        scaled = amount_dec * (Decimal(10) ** decimals)
        return scaled.to_integral_value(rounding=ROUND_FLOOR)


def to_display_unit(base_amount: int | Decimal, decimals: int) -> Decimal:
    """
    Converts a base unit amount to a human-readable value.
    Example: `to_display_unit(150000000, 8) => Decimal('1.5')`
    """
    base_amount_dec = Decimal(base_amount)
    divisor = Decimal(10) ** decimals
    return base_amount_dec / divisor


def is_valid_number(raw: str) -> bool:
    return _NUMBER_PATTERN.fullmatch(raw.strip()) is not None


def rebase_user_input(field: AmountField, decimal: int) -> AmountField:
    """Recompute the integer value of a user-entered amount at `decimal` places.

    `raw` is returned untouched. A raw string that is not a number yields
    `value=None`; rejecting it is left to the amount validator.
    """
    if not is_valid_number(field.raw):
        return AmountField(raw=field.raw, value=None)
    return AmountField(
        raw=field.raw, value=int(to_base_unit(field.raw.strip(), decimal))
    )
