"""
Amount filter mini-grammar.

The text typed into the amount box is parsed once per query into one of four
variants:

• ``NoConstraint`` – blank text, every amount passes.
• ``Exact(value)`` – a single number, ``amount == value``.
• ``Range(minimum, maximum)`` – ``"min-max"``, inclusive on both ends. The
  bounds are kept in the order typed; ``min > max`` simply matches nothing.
• ``Invalid(text, message)`` – anything else. The constraint is skipped and
  ``message`` is what the user should be told.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from expense_history.utilities.converters_scalar import parse_decimal_strict
from expense_history.utilities.core_util import is_null_or_whitespace

RANGE_SEPARATOR = "-"
INVALID_RANGE_MESSAGE = "Invalid amount range format. Use min-max, e.g. 100-500."
INVALID_VALUE_MESSAGE = "Invalid amount value."


@dataclass(frozen=True)
class NoConstraint:
    def matches(self, amount: Decimal) -> bool:
        return True


@dataclass(frozen=True)
class Exact:
    value: Decimal

    def matches(self, amount: Decimal) -> bool:
        return amount == self.value


@dataclass(frozen=True)
class Range:
    minimum: Decimal
    maximum: Decimal

    def matches(self, amount: Decimal) -> bool:
        return self.minimum <= amount <= self.maximum


@dataclass(frozen=True)
class Invalid:
    text: str
    message: str

    def matches(self, amount: Decimal) -> bool:
        # skipped constraint
        return True


AmountFilter = Union[NoConstraint, Exact, Range, Invalid]


def parse_amount_filter(text: str | None) -> AmountFilter:
    """Classify the raw amount text into an ``AmountFilter`` variant."""
    if is_null_or_whitespace(text):
        return NoConstraint()
    raw = text.strip()

    if RANGE_SEPARATOR in raw:
        parts = raw.split(RANGE_SEPARATOR)
        if len(parts) == 2:
            low = parse_decimal_strict(parts[0])
            high = parse_decimal_strict(parts[1])
            if low is not None and high is not None:
                return Range(low, high)
        return Invalid(raw, INVALID_RANGE_MESSAGE)

    value = parse_decimal_strict(raw)
    if value is None:
        return Invalid(raw, INVALID_VALUE_MESSAGE)
    return Exact(value)
