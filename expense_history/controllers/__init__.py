from .history_query import (
    NO_DATA_MESSAGE,
    CategorySummary,
    HistoryQueryResult,
    chart_series,
    filter_transactions,
    format_category_summary,
    format_total_line,
    run_query,
    summarize,
)
from .transaction_source import FileTransactionSource, SeedTransactionSource, build_source

__all__ = [
    "NO_DATA_MESSAGE",
    "CategorySummary",
    "HistoryQueryResult",
    "FileTransactionSource",
    "SeedTransactionSource",
    "build_source",
    "chart_series",
    "filter_transactions",
    "format_category_summary",
    "format_total_line",
    "run_query",
    "summarize",
]
