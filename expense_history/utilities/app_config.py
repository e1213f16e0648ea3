# expense_history/utilities/app_config.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

from expense_history.data_model.interfaces.enum_category import Category


@dataclass(frozen=True)
class AppConfig:
    """
    Settings shared by the history form, the chart and the PDF export.

    The launcher builds one from ``DEFAULT_CONFIG`` plus command-line overrides.
    """

    currency_symbol: str = "₱"
    categories: Tuple[str, ...] = field(
        default_factory=lambda: tuple(c.value for c in Category)
    )
    lookback_days: int = 30
    export_title: str = "Transaction History"
    export_filename: str = "TransactionReport.pdf"
    geometry: str = "1100x720"
    min_size: Tuple[int, int] = (960, 620)

    def with_overrides(self, **changes) -> "AppConfig":
        """Return a copy with the non-``None`` values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_CONFIG = AppConfig()
