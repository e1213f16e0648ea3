# Tests import/monkeypatch these off `expense_history.gui_viewers`
from .pie_chart import build_pie_figure, pie_labels

__all__ = [
    # "ExpenseTrackerApp",
    # "TransactionHistoryForm",
    "build_pie_figure",
    "pie_labels",
]


# Lazily expose the windows to avoid building Tk widgets classes during package import
def __getattr__(name):
    if name == "ExpenseTrackerApp":
        from .app import ExpenseTrackerApp  # imported only when actually accessed
        return ExpenseTrackerApp
    if name == "TransactionHistoryForm":
        from .history_form import TransactionHistoryForm
        return TransactionHistoryForm
    raise AttributeError(name)
