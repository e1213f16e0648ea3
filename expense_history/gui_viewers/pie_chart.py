# expense_history/gui_viewers/pie_chart.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence, Tuple

from matplotlib.figure import Figure

from expense_history.controllers.history_query import NO_DATA_MESSAGE
from expense_history.utilities.converters_scalar import format_currency


def pie_labels(series: Sequence[Tuple[str, Decimal]], currency_symbol: str = "₱") -> list[str]:
    """Slice labels: category name over its subtotal in currency format."""
    return [f"{name}\n{format_currency(value, currency_symbol)}" for name, value in series]


def build_pie_figure(
    series: Sequence[Tuple[str, Decimal]],
    currency_symbol: str = "₱",
    figure: Optional[Figure] = None,
) -> Figure:
    """Draw the spending-by-category pie on ``figure`` (a new one if omitted).

    Only positive subtotals get a wedge. When none is left the "no data"
    placeholder is drawn instead of an empty pie.
    """
    fig = figure if figure is not None else Figure(figsize=(4.5, 4), dpi=100)
    fig.clear()
    ax = fig.add_subplot(111)

    # matplotlib rejects negative wedges and an all-zero pie
    series = [(name, value) for name, value in series if value > 0]
    if not series:
        ax.axis("off")
        ax.text(0.5, 0.5, NO_DATA_MESSAGE, ha="center", va="center", fontsize=11)
        return fig

    ax.pie(
        [float(value) for _, value in series],
        labels=pie_labels(series, currency_symbol),
        startangle=90,
        counterclock=False,
        wedgeprops={"linewidth": 1, "edgecolor": "white"},
    )
    ax.set_title("Spending by Category")
    ax.axis("equal")
    return fig
