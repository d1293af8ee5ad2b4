"""Unit tests for tax-inclusive amount calculation."""

from decimal import Decimal

import pytest

from esewapay.common.errors import ValidationError
from esewapay.services.initiation.amounts import (
    compute_amounts,
    format_amount,
    parse_amount,
    round2,
)


def test_round_number_gets_thirteen_percent_tax():
    """100 -> 100.00 + 13.00 = 113.00."""

    amounts = compute_amounts(100)
    assert format_amount(amounts.base_amount) == "100.00"
    assert format_amount(amounts.tax_amount) == "13.00"
    assert format_amount(amounts.total_amount) == "113.00"


def test_minimum_amount():
    amounts = compute_amounts(1)
    assert (amounts.base_amount, amounts.tax_amount, amounts.total_amount) == (
        Decimal("1.00"),
        Decimal("0.13"),
        Decimal("1.13"),
    )


def test_tax_is_rounded_before_adding():
    """99.99 * 0.13 = 12.9987 rounds to 13.00 before the total is taken."""

    amounts = compute_amounts(99.99)
    assert amounts.tax_amount == Decimal("13.00")
    assert amounts.total_amount == Decimal("112.99")


def test_base_is_rounded_first():
    amounts = compute_amounts(100.456)
    assert amounts.base_amount == Decimal("100.46")
    assert amounts.tax_amount == Decimal("13.06")
    assert amounts.total_amount == Decimal("113.52")


def test_rounding_follows_binary_value():
    """1.005 is stored just below 1.005, so it rounds down."""

    assert round2(1.005) == Decimal("1.00")
    assert round2(2.5) == Decimal("2.50")
    assert round2(0.125) == Decimal("0.13")


@pytest.mark.parametrize("amount", [1, 7.77, 49.5, 250, 1234.56, 99999.99])
def test_total_matches_two_stage_rounding(amount):
    """total == round2(round2(a) + round2(round2(a) * 0.13))."""

    base = round2(amount)
    expected = round2(float(base) + float(round2(float(base) * 0.13)))
    assert compute_amounts(amount).total_amount == expected


@pytest.mark.parametrize("amount", [0.99, 0, -5, float("nan"), float("inf")])
def test_amount_below_minimum_or_not_finite_is_rejected(amount):
    with pytest.raises(ValidationError):
        compute_amounts(amount)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(100, 100.0), (12.5, 12.5), ("100", 100.0), (" 42.10 ", 42.1), ("1e3", 1000.0)],
)
def test_parse_amount_accepts_numbers_and_numeric_strings(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "1_000", "0x10", "NaN", "Infinity", "", True, [], {}, None, 10**400])
def test_parse_amount_rejects_non_numeric(raw):
    with pytest.raises(ValidationError):
        parse_amount(raw)


def test_format_amount_pads_two_places():
    assert format_amount(Decimal("5.1").quantize(Decimal("0.01"))) == "5.10"


@pytest.mark.parametrize("amount", [1e26, 1e30, 1e300])
def test_very_large_amounts_round_without_precision_loss(amount):
    """Amounts past the default 28-digit decimal precision still compute."""

    amounts = compute_amounts(amount)
    assert amounts.base_amount == Decimal(amount)
    assert format_amount(amounts.base_amount).endswith(".00")
    assert amounts.total_amount > amounts.base_amount


def test_total_overflowing_float_range_is_rejected():
    """1.7e308 * 1.13 does not fit in a float."""

    with pytest.raises(ValidationError):
        compute_amounts(1.7e308)
