# expense_history/gui_viewers/chart_panel.py
from __future__ import annotations

from decimal import Decimal
from tkinter import ttk
from typing import Sequence, Tuple

from matplotlib.figure import Figure

from expense_history.gui_viewers.pie_chart import build_pie_figure


class ChartPanel(ttk.Frame):
    """Primary function: host the pie chart inside the history form."""

    def __init__(self, master, currency_symbol: str = "₱"):
        super().__init__(master)
        # Tk backend import stays local; nothing else in the package needs a display
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

        self.currency_symbol = currency_symbol
        self.figure = Figure(figsize=(4.5, 4), dpi=100)
        self.canvas = FigureCanvasTkAgg(self.figure, master=self)
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def show(self, series: Sequence[Tuple[str, Decimal]]) -> None:
        build_pie_figure(series, self.currency_symbol, figure=self.figure)
        self.canvas.draw_idle()
