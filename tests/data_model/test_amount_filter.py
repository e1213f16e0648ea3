# tests/data_model/test_amount_filter.py
from __future__ import annotations

from decimal import Decimal

import pytest

from expense_history.data_model.amount_filter import (
    INVALID_RANGE_MESSAGE,
    INVALID_VALUE_MESSAGE,
    Exact,
    Invalid,
    NoConstraint,
    Range,
    parse_amount_filter,
)


@pytest.mark.parametrize("text", ["", "   ", None, "\t"])
def test_blank_text_means_no_constraint(text):
    assert parse_amount_filter(text) == NoConstraint()


@pytest.mark.parametrize(
    "text,expected",
    [
        ("500", Decimal("500")),
        (" 500.50 ", Decimal("500.50")),
        ("1,200", Decimal("1200")),
        ("+75", Decimal("75")),
    ],
)
def test_single_number_is_exact(text, expected):
    f = parse_amount_filter(text)
    assert isinstance(f, Exact)
    assert f.value == expected


def test_range_keeps_typed_order_and_trims_parts():
    assert parse_amount_filter("100-500") == Range(Decimal("100"), Decimal("500"))
    assert parse_amount_filter(" 100 - 500 ") == Range(Decimal("100"), Decimal("500"))
    # no swap when min > max
    assert parse_amount_filter("500-100") == Range(Decimal("500"), Decimal("100"))


@pytest.mark.parametrize("text", ["100-", "-100", "100-200-300", "abc-100", "1-2-", "-"])
def test_malformed_ranges_are_invalid(text):
    f = parse_amount_filter(text)
    assert isinstance(f, Invalid)
    assert f.message == INVALID_RANGE_MESSAGE


@pytest.mark.parametrize("text", ["abc", "12abc", "NaN", "Infinity", "₱500", "1.2.3"])
def test_non_numbers_are_invalid_values(text):
    f = parse_amount_filter(text)
    assert isinstance(f, Invalid)
    assert f.message == INVALID_VALUE_MESSAGE
    assert f.text == text.strip()


def test_matches_semantics():
    amt = Decimal("500.00")
    assert NoConstraint().matches(amt)
    assert Invalid("x", "msg").matches(amt), "Invalid filters are skipped, not applied"
    assert Exact(Decimal("500")).matches(amt), "500 == 500.00 as decimals"
    assert not Exact(Decimal("499.99")).matches(amt)
    assert Range(Decimal("100"), Decimal("500")).matches(amt), "upper bound inclusive"
    assert Range(Decimal("500"), Decimal("900")).matches(amt), "lower bound inclusive"
    assert not Range(Decimal("500"), Decimal("100")).matches(amt)
