from .amount_filter import (
    INVALID_RANGE_MESSAGE,
    INVALID_VALUE_MESSAGE,
    AmountFilter,
    Exact,
    Invalid,
    NoConstraint,
    Range,
    parse_amount_filter,
)
from .filter_spec import FilterSpec
from .interfaces import ALL_CATEGORIES, Category, ITransaction, ITransactionSource
from .transaction import GRID_HEADERS, Transaction

__all__ = [
    "ALL_CATEGORIES", "AmountFilter", "Category", "Exact", "FilterSpec",
    "GRID_HEADERS", "INVALID_RANGE_MESSAGE", "INVALID_VALUE_MESSAGE", "Invalid",
    "ITransaction", "ITransactionSource", "NoConstraint", "Range", "Transaction",
    "parse_amount_filter"]
