from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _date
from decimal import Decimal

GRID_HEADERS = ["Amount", "Date", "Category", "PaymentMethod"]


@dataclass(frozen=True)
class Transaction:
    """
    A single spending row. Immutable; identity is the combination of fields.
    """

    amount: Decimal
    date: _date
    category: str
    payment_method: str = ""

    def display_values(self) -> list[str]:
        """Cells shown in the history grid, in ``GRID_HEADERS`` order."""
        return [
            f"{self.amount:.2f}",
            self.date.isoformat(),
            self.category,
            self.payment_method,
        ]
