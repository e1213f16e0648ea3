"""
Interfaces and Enums for the expense history data model.
"""

from .enum_category import ALL_CATEGORIES, Category
from .i_transaction import ITransaction
from .i_transaction_source import ITransactionSource

__all__ = [
    "ALL_CATEGORIES",
    "Category",
    "ITransaction",
    "ITransactionSource",
]
