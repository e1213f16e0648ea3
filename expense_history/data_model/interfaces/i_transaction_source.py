# expense_history/data_model/interfaces/i_transaction_source.py
from __future__ import annotations

from typing import Sequence, runtime_checkable

from typing_extensions import Protocol

from .i_transaction import ITransaction


@runtime_checkable
class ITransactionSource(Protocol):
    """Anything that can hand over an ordered, freshly built set of transactions."""

    def list_transactions(self) -> Sequence[ITransaction]: ...
