# expense_history/gui_viewers/history_form.py
from __future__ import annotations

import logging
import tkinter as tk
from datetime import date, timedelta
from tkinter import filedialog, messagebox, ttk
from types import SimpleNamespace
from typing import Callable, List, Optional

from expense_history.controllers.history_query import (
    HistoryQueryResult,
    format_category_summary,
    format_total_line,
    run_query,
)
from expense_history.data_model import (
    ALL_CATEGORIES,
    GRID_HEADERS,
    FilterSpec,
    ITransactionSource,
)
from expense_history.gui_viewers.chart_panel import ChartPanel
from expense_history.utilities.app_config import DEFAULT_CONFIG, AppConfig
from expense_history.utilities.converters_scalar import parse_date_maybe

log = logging.getLogger(__name__)

INPUT_ERROR_TITLE = "Input Error"
INVALID_DATE_MESSAGE = "Invalid date. Use YYYY-MM-DD (or MM/DD/YYYY)."


def default_messagebox() -> SimpleNamespace:
    """Message box wrapper resolved at call time so tests can patch tkinter.messagebox."""
    return SimpleNamespace(
        showinfo=lambda *a, **k: messagebox.showinfo(*a, **k),
        showerror=lambda *a, **k: messagebox.showerror(*a, **k),
        showwarning=lambda *a, **k: messagebox.showwarning(*a, **k),
    )


class TransactionHistoryForm(tk.Toplevel):
    """Primary function: filter the transaction list, show totals, chart and export."""

    def __init__(
        self,
        master,
        source: ITransactionSource,
        mb=None,
        *,
        config: AppConfig = DEFAULT_CONFIG,
        on_back: Optional[Callable[[], None]] = None,
        today: Optional[date] = None,
    ):
        super().__init__(master)
        self.source = source
        self.mb = mb or default_messagebox()
        self.app_config = config
        self.on_back = on_back
        self._today = today or date.today()

        self.columns: List[str] = list(GRID_HEADERS)
        self.displayed_rows: List[List[str]] = []
        self.last_result: Optional[HistoryQueryResult] = None

        self.title(config.export_title)
        self.geometry(config.geometry)
        self.minsize(*config.min_size)

        self._build()
        self.load_transactions()

    # ---------- layout ----------
    def _build(self) -> None:
        self._init_state_vars()
        self._build_filters_section()
        self._build_results_section()
        self._build_summary_section()

    def _init_state_vars(self) -> None:
        start = self._today - timedelta(days=self.app_config.lookback_days)
        self.date_from = tk.StringVar(value=start.isoformat())
        self.date_to = tk.StringVar(value=self._today.isoformat())
        self.category_var = tk.StringVar(value=ALL_CATEGORIES)
        self.amount_var = tk.StringVar(value="")
        self.total_var = tk.StringVar(value="")
        self.summary_var = tk.StringVar(value="")

    def _build_filters_section(self) -> None:
        pad = {"padx": 8, "pady": 6}
        flt = ttk.LabelFrame(self, text="Filters")
        flt.pack(fill="x", **pad)

        ttk.Label(flt, text="From:").grid(row=0, column=0, sticky="w")
        ttk.Entry(flt, textvariable=self.date_from, width=14).grid(row=0, column=1, sticky="w", padx=5)
        ttk.Label(flt, text="To:").grid(row=0, column=2, sticky="w")
        ttk.Entry(flt, textvariable=self.date_to, width=14).grid(row=0, column=3, sticky="w", padx=5)

        ttk.Label(flt, text="Category:").grid(row=0, column=4, sticky="w")
        self.category_box = ttk.Combobox(
            flt,
            textvariable=self.category_var,
            values=[ALL_CATEGORIES, *self.app_config.categories],
            state="readonly",
            width=14,
        )
        self.category_box.grid(row=0, column=5, sticky="w", padx=5)
        self.category_box.current(0)
        self.category_box.bind("<<ComboboxSelected>>", lambda e: self.load_transactions())

        ttk.Label(flt, text="Amount (e.g. 500 or 100-500):").grid(row=1, column=0, columnspan=2, sticky="w")
        ttk.Entry(flt, textvariable=self.amount_var, width=18).grid(row=1, column=2, columnspan=2, sticky="w", padx=5)

        actions = ttk.Frame(flt)
        actions.grid(row=1, column=4, columnspan=2, sticky="e")
        ttk.Button(actions, text="Search", command=self.load_transactions).pack(side="left")
        ttk.Button(actions, text="Export PDF", command=self.export_pdf).pack(side="left", padx=6)
        ttk.Button(actions, text="Back", command=self.go_back).pack(side="left")

    def _build_results_section(self) -> None:
        res = ttk.Frame(self)
        res.pack(fill="both", expand=True, padx=8, pady=6)

        grid = ttk.LabelFrame(res, text="Transactions")
        grid.pack(side="left", fill="both", expand=True, padx=4, pady=4)
        self.tree = ttk.Treeview(grid, columns=self.columns, show="headings", height=14)
        for col in self.columns:
            self.tree.heading(col, text=col)
            self.tree.column(col, width=120, anchor="e" if col == "Amount" else "w")
        vsb = ttk.Scrollbar(grid, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)
        self.tree.pack(side="left", fill="both", expand=True, padx=(4, 0), pady=4)
        vsb.pack(side="left", fill="y", pady=4)

        chart = ttk.LabelFrame(res, text="Spending by Category")
        chart.pack(side="left", fill="both", expand=True, padx=4, pady=4)
        self.chart = ChartPanel(chart, currency_symbol=self.app_config.currency_symbol)
        self.chart.pack(fill="both", expand=True)

    def _build_summary_section(self) -> None:
        summ = ttk.LabelFrame(self, text="Summary")
        summ.pack(fill="x", padx=8, pady=6)
        ttk.Label(summ, textvariable=self.total_var, font=("TkDefaultFont", 11, "bold")).pack(anchor="w", padx=4)
        ttk.Label(summ, textvariable=self.summary_var, justify="left").pack(anchor="w", padx=4, pady=(0, 4))

    # ---------- querying ----------
    def _read_spec(self) -> Optional[FilterSpec]:
        """Turn the form values into a ``FilterSpec``; warn and return None on bad dates."""
        start = parse_date_maybe(self.date_from.get())
        end = parse_date_maybe(self.date_to.get())
        if start is None or end is None:
            self.mb.showwarning(INPUT_ERROR_TITLE, INVALID_DATE_MESSAGE)
            return None
        return FilterSpec.from_inputs(start, end, self.category_var.get(), self.amount_var.get())

    def load_transactions(self) -> Optional[HistoryQueryResult]:
        spec = self._read_spec()
        if spec is None:
            return None
        try:
            result = run_query(self.source, spec)
        except (ValueError, OSError) as e:
            log.exception("Loading transactions failed")
            self.mb.showerror("Error", f"Could not load transactions:\n{e}")
            return None
        for message in result.warnings:
            self.mb.showwarning(INPUT_ERROR_TITLE, message)
        self._show_result(result)
        return result

    def _show_result(self, result: HistoryQueryResult) -> None:
        self.last_result = result
        self.tree.delete(*self.tree.get_children())
        self.displayed_rows = [t.display_values() for t in result.rows]
        for values in self.displayed_rows:
            self.tree.insert("", "end", values=values)

        symbol = self.app_config.currency_symbol
        self.total_var.set(format_total_line(result.summary, symbol))
        self.summary_var.set(format_category_summary(result.summary, symbol))
        self.chart.show(result.series)

    # ---------- actions ----------
    def export_pdf(self) -> None:
        path = filedialog.asksaveasfilename(
            parent=self,
            title="Save transaction report",
            defaultextension=".pdf",
            initialfile=self.app_config.export_filename,
            filetypes=[("PDF files", "*.pdf")],
        )
        if not path:
            return
        try:
            # reportlab is only needed once the user actually exports
            from expense_history.controllers.pdf_export import export_table_pdf

            export_table_pdf(path, self.columns, self.displayed_rows, title=self.app_config.export_title)
        except Exception as e:
            log.exception("PDF export to %s failed", path)
            self.mb.showerror("Error", f"Error exporting PDF: {e}")
            return
        self.mb.showinfo("Success", "PDF Exported Successfully!")

    def go_back(self) -> None:
        self.destroy()
        if self.on_back is not None:
            self.on_back()
