# expense_history/gui_viewers/app.py
from __future__ import annotations

import argparse
import logging
import tkinter as tk
from pathlib import Path
from tkinter import ttk
from typing import Optional, Sequence

from expense_history.controllers.transaction_source import build_source
from expense_history.data_model import ITransactionSource
from expense_history.gui_viewers.history_form import TransactionHistoryForm, default_messagebox
from expense_history.utilities.app_config import DEFAULT_CONFIG, AppConfig
from expense_history.utilities.config_logging import configure_logging

log = logging.getLogger(__name__)


class ExpenseTrackerApp(tk.Tk):
    """
    Entry-point window. Opens the transaction history form and comes back
    when that form's Back button is pressed.
    """

    def __init__(
        self,
        source: Optional[ITransactionSource] = None,
        messagebox_api=None,
        config: AppConfig = DEFAULT_CONFIG,
    ):
        super().__init__()
        self.source = source or build_source()
        self.mb = messagebox_api or default_messagebox()
        self.app_config = config
        self.history_form: Optional[TransactionHistoryForm] = None

        self.title("Personal Expense Tracker")
        self.geometry("420x220")
        self.minsize(360, 180)

        body = ttk.Frame(self)
        body.pack(fill="both", expand=True, padx=16, pady=16)
        ttk.Label(body, text="Personal Expense Tracker", font=("TkDefaultFont", 14, "bold")).pack(pady=(0, 12))
        ttk.Button(body, text="Transaction History", command=self.open_history).pack(fill="x")
        ttk.Button(body, text="Exit", command=self.destroy).pack(fill="x", pady=(8, 0))

    def open_history(self) -> TransactionHistoryForm:
        log.debug("Opening transaction history")
        form = TransactionHistoryForm(
            self,
            self.source,
            self.mb,
            config=self.app_config,
            on_back=self.show_entry,
        )
        # hide the entry window only once the form exists
        self.withdraw()
        self.history_form = form
        return form

    def show_entry(self) -> None:
        self.history_form = None
        self.deiconify()


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="expense-history",
        description="Browse, filter and export spending transactions.",
    )
    ap.add_argument("--data", type=Path,
                    help="CSV or Excel file with Amount, Date, Category, PaymentMethod columns "
                         "(default: built-in demo rows)")
    ap.add_argument("--currency", help="Currency symbol for totals and chart labels (default: ₱)")
    ap.add_argument("--lookback-days", type=int,
                    help="How many days before today the From date starts at (default: 30)")
    ap.add_argument("--log-level", default=None,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Console log level (default: INFO)")
    ap.add_argument("--log-dir", type=Path, help="Folder for app.log (default: ./logs)")
    ap.add_argument("--history", action="store_true",
                    help="Open the transaction history form immediately")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_dir)

    if args.data is not None and not args.data.is_file():
        raise SystemExit(f"Data file not found: {args.data}")
    if args.lookback_days is not None and args.lookback_days < 0:
        raise SystemExit("--lookback-days must be zero or positive")

    config = DEFAULT_CONFIG.with_overrides(
        currency_symbol=args.currency, lookback_days=args.lookback_days
    )
    source = build_source(args.data)
    try:
        # fail fast on an unreadable data file instead of inside the form
        source.list_transactions()
    except ValueError as e:
        raise SystemExit(f"Cannot load transactions: {e}") from e

    app = ExpenseTrackerApp(source, config=config)
    if args.history:
        app.open_history()
    app.mainloop()


if __name__ == "__main__":
    main()
