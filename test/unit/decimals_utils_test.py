from decimal import Decimal

import pytest

from unit_swap_kit.shared.models import AmountField
from unit_swap_kit.shared.unit_utils.decimals_utils import (
    is_valid_number,
    rebase_user_input,
    to_base_unit,
    to_display_unit,
)


def test_to_base_unit_scales_by_decimals():
    assert to_base_unit("1.5", 8) == Decimal("150000000")
    assert to_base_unit(Decimal("1"), 18) == Decimal(10**18)


def test_to_base_unit_truncates_extra_precision():
    """Digits beyond the target decimals are dropped, never rounded up."""
    assert to_base_unit("1.99", 1) == Decimal("19")
    assert to_base_unit("0.0000009", 6) == Decimal("0")


def test_to_base_unit_truncates_fractions_longer_than_context_precision():
    nines = "0." + "9" * 120

    assert to_base_unit(nines, 18) == Decimal(10**18 - 1)
    assert to_base_unit("1" * 90 + "." + "9" * 30, 18) == Decimal("1" * 90 + "9" * 18)


def test_rebase_long_fraction_never_rounds_up():
    assert rebase_user_input(AmountField(raw="0." + "9" * 120), 18).value == 10**18 - 1


def test_to_display_unit_inverts_to_base_unit():
    assert to_display_unit(150000000, 8) == Decimal("1.5")


@pytest.mark.parametrize("raw", ["1", "1.5", ".5", "1.", "007", " 2 "])
def test_is_valid_number_accepts_plain_decimals(raw):
    assert is_valid_number(raw)


@pytest.mark.parametrize("raw", ["", ".", "-1", "+1", "1e5", "1.2.3", "abc", "NaN", "Infinity", "1,5"])
def test_is_valid_number_rejects_everything_else(raw):
    assert not is_valid_number(raw)


def test_rebase_preserves_raw_and_scales_value():
    result = rebase_user_input(AmountField(raw="2.25", value=None), 18)

    assert result.raw == "2.25"
    assert result.value == 2_250_000_000_000_000_000


def test_rebase_ignores_value_from_previous_scale():
    """The stale integer value is never carried over, only raw is read."""
    stale = AmountField(raw="3", value=3 * 10**18)

    assert rebase_user_input(stale, 2).value == 300


def test_rebase_zero_decimal_token_truncates_fraction():
    assert rebase_user_input(AmountField(raw="7.9"), 0).value == 7


def test_rebase_invalid_input_yields_no_value():
    result = rebase_user_input(AmountField(raw="12abc", value=5), 18)

    assert result.raw == "12abc"
    assert result.value is None


@pytest.mark.parametrize("decimal", [0, 1, 6, 18])
def test_rebase_is_idempotent_at_same_decimal(decimal):
    once = rebase_user_input(AmountField(raw="123.456789"), decimal)
    twice = rebase_user_input(once, decimal)

    assert twice == once
