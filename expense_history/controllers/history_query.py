"""
Filter-and-aggregate pipeline behind the transaction history view.

Primary responsibilities:
• Keep the transactions that satisfy a ``FilterSpec`` (date window, category,
  amount constraint), preserving their original order.
• Group the kept rows by category and total them with ``Decimal`` arithmetic.
• Project the grouping into chart points and display strings.

Everything here is a pure function of its inputs; the only side channel is the
``notify`` callback used to report unusable amount text.
"""

# expense_history/controllers/history_query.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from expense_history.data_model import FilterSpec, Invalid, ITransaction, ITransactionSource
from expense_history.utilities.converters_scalar import format_currency

log = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data to summarize."

Notify = Callable[[str], None]
ChartPoint = Tuple[str, Decimal]


@dataclass(frozen=True)
class CategorySummary:
    """Grand total plus per-category subtotals in first-seen order."""

    total: Decimal = Decimal(0)
    per_category: Dict[str, Decimal] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.per_category


@dataclass(frozen=True)
class HistoryQueryResult:
    spec: FilterSpec
    rows: List[ITransaction]
    summary: CategorySummary
    series: List[ChartPoint]
    warnings: List[str] = field(default_factory=list)


def filter_transactions(
    transactions: Iterable[ITransaction],
    spec: FilterSpec,
    notify: Optional[Notify] = None,
) -> List[ITransaction]:
    """Return the transactions matching every active constraint in ``spec``.

    An ``Invalid`` amount filter is reported once through ``notify`` and then
    ignored; the date and category constraints still apply.
    """
    amount = spec.amount
    if isinstance(amount, Invalid):
        log.warning("Ignoring amount filter %r: %s", amount.text, amount.message)
        if notify is not None:
            notify(amount.message)

    wanted = None if spec.is_all_categories else spec.category.casefold()

    out: List[ITransaction] = []
    for t in transactions:
        if not (spec.date_from <= t.date <= spec.date_to):
            continue
        if wanted is not None and t.category.casefold() != wanted:
            continue
        if not amount.matches(t.amount):
            continue
        out.append(t)
    return out


def _group_totals(rows: Iterable[ITransaction]) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = {}
    for t in rows:
        totals[t.category] = totals.get(t.category, Decimal(0)) + t.amount
    return totals


def summarize(rows: Iterable[ITransaction]) -> CategorySummary:
    """Total ``rows`` per exact category string and overall."""
    per_category = _group_totals(rows)
    total = sum(per_category.values(), Decimal(0))
    return CategorySummary(total=total, per_category=per_category)


def chart_series(rows: Iterable[ITransaction]) -> List[ChartPoint]:
    """(category, subtotal) pairs in the same order as ``summarize``."""
    return list(_group_totals(rows).items())


def run_query(source: ITransactionSource, spec: FilterSpec) -> HistoryQueryResult:
    """Fetch a fresh transaction set from ``source`` and run the whole pipeline."""
    warnings: List[str] = []
    transactions: Sequence[ITransaction] = source.list_transactions()
    rows = filter_transactions(transactions, spec, notify=warnings.append)
    summary = summarize(rows)
    log.debug(
        "History query %s..%s category=%s kept %d of %d rows (total %s)",
        spec.date_from,
        spec.date_to,
        spec.category,
        len(rows),
        len(transactions),
        summary.total,
    )
    return HistoryQueryResult(
        spec=spec,
        rows=rows,
        summary=summary,
        series=chart_series(rows),
        warnings=warnings,
    )


# --- Display text -------------------------------------------------------------


def format_total_line(summary: CategorySummary, symbol: str = "₱") -> str:
    return f"Total Spending: {format_currency(summary.total, symbol)}"


def format_category_summary(summary: CategorySummary, symbol: str = "₱") -> str:
    if summary.is_empty:
        return NO_DATA_MESSAGE
    return "\n".join(
        f"{name}: {format_currency(value, symbol)}"
        for name, value in summary.per_category.items()
    )
