"""
Transaction sources for the history view.

A source only has to produce an ordered sequence of ``Transaction`` values each
time it is asked. Nothing is cached; every query gets a fresh list.
"""

# expense_history/controllers/transaction_source.py
from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

import pandas as pd

from expense_history.data_model import Category, Transaction
from expense_history.utilities.converters_scalar import to_date, to_decimal

log = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["Amount", "Date", "Category", "PaymentMethod"]
EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")


class SeedTransactionSource:
    """Five demo rows dated relative to ``today`` (defaults to the current day)."""

    def __init__(self, today: Optional[date] = None):
        self._today = today

    def list_transactions(self) -> List[Transaction]:
        today = self._today or date.today()
        return [
            Transaction(Decimal("500.00"), today, Category.FOOD.value, "Cash"),
            Transaction(Decimal("1200.00"), today - timedelta(days=1), Category.TRANSPORT.value, "Credit Card"),
            Transaction(Decimal("800.00"), today - timedelta(days=3), Category.BILLS.value, "Online"),
            Transaction(Decimal("200.00"), today - timedelta(days=5), Category.SNACKS.value, "GCash"),
            Transaction(Decimal("150.00"), today - timedelta(days=2), Category.FOOD.value, "Cash"),
        ]


class FileTransactionSource:
    """Reads transactions from a CSV or Excel sheet on every call.

    Expected columns: ``Amount``, ``Date``, ``Category``, ``PaymentMethod``.
    Extra columns are ignored. Excel files need an engine such as openpyxl.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read_frame(self) -> pd.DataFrame:
        if self.path.suffix.lower() in EXCEL_SUFFIXES:
            return pd.read_excel(self.path)
        return pd.read_csv(self.path, keep_default_na=False)

    def list_transactions(self) -> List[Transaction]:
        log.info("Loading transactions: %s", self.path)
        df = self._read_frame()
        df.columns = [str(c).strip() for c in df.columns]
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"{self.path.name}: missing required columns {missing}")

        out: List[Transaction] = []
        for idx, rec in enumerate(df[REQUIRED_COLUMNS].to_dict("records"), start=2):
            try:
                out.append(
                    Transaction(
                        amount=to_decimal(rec["Amount"]),
                        date=to_date(rec["Date"]),
                        category=_text(rec["Category"]),
                        payment_method=_text(rec["PaymentMethod"]),
                    )
                )
            except ValueError as e:
                raise ValueError(f"{self.path.name} row {idx}: {e}") from e
        log.debug("Loaded %d transactions from %s", len(out), self.path)
        return out


def _text(value: object) -> str:
    # pandas hands back NaN for blank Excel cells
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value).strip()


def build_source(path: Optional[Path | str] = None):
    """File-backed source when ``path`` is given, otherwise the demo seed."""
    if path:
        return FileTransactionSource(path)
    return SeedTransactionSource()
