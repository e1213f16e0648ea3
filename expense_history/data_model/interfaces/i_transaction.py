# expense_history/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import runtime_checkable

from typing_extensions import Protocol


@runtime_checkable
class ITransaction(Protocol):
    """Structural shape of a spending row, enough to filter and summarize it."""

    amount: Decimal
    date: date
    category: str
    payment_method: str

    def display_values(self) -> list[str]: ...
