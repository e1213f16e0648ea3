# tests/gui_viewers/test_app.py
"""
Entry window and launcher tests.

Same headless approach as the history form tests: tkinter and the chart
panel are stubbed so ExpenseTrackerApp can be built without a display.
"""

from __future__ import annotations

import importlib
import sys
import types

import pytest

from expense_history.controllers.transaction_source import (
    FileTransactionSource,
    SeedTransactionSource,
)


# --------------------------
# Minimal tkinter stubs (headless)
# --------------------------

def _install_tk_stubs(monkeypatch):
    tk = types.ModuleType("tkinter")

    class _VarBase:
        def __init__(self, value=None): self._v = value
        def get(self): return self._v
        def set(self, v): self._v = v

    class StringVar(_VarBase):
        def __init__(self, value=""): super().__init__(value)

    class _Window:
        def __init__(self, *a, **k):
            self.master = a[0] if a else None
            self.destroyed = False
            self.withdrawn = False
        def title(self, *a, **k): pass
        def geometry(self, *a, **k): pass
        def minsize(self, *a, **k): pass
        def mainloop(self, *a, **k): pass
        def withdraw(self): self.withdrawn = True
        def deiconify(self): self.withdrawn = False
        def destroy(self): self.destroyed = True

    class Tk(_Window): pass
    class Toplevel(_Window): pass

    tk.Tk = Tk
    tk.Toplevel = Toplevel
    tk.StringVar = StringVar
    tk.END = "end"

    ttk = types.ModuleType("tkinter.ttk")

    class _Widget:
        def __init__(self, *a, **k):
            self.master = a[0] if a else None
            self.kwargs = k
        def pack(self, *a, **k): pass
        def grid(self, *a, **k): pass
        def configure(self, *a, **k): pass
        def bind(self, *a, **k): pass

    class Frame(_Widget): pass
    class LabelFrame(Frame): pass
    class Label(_Widget): pass
    class Button(_Widget): pass
    class Entry(_Widget): pass

    class Scrollbar(_Widget):
        def set(self, *a): pass

    class Combobox(_Widget):
        def __init__(self, *a, values=None, textvariable=None, **k):
            super().__init__(*a, **k)
            self.values = list(values or [])
            self._tv = textvariable
            self.bindings = {}
        def current(self, idx):
            self._tv.set(self.values[idx])
        def bind(self, event, func=None, *a):
            self.bindings[event] = func

    class Treeview(_Widget):
        def __init__(self, *a, columns=(), **k):
            super().__init__(*a, **k)
            self.columns = list(columns)
            self.headings = {}
            self._items = {}
            self._n = 0
        def heading(self, col, text=""): self.headings[col] = text
        def column(self, *a, **k): pass
        def yview(self, *a): pass
        def get_children(self, item=""): return tuple(self._items)
        def delete(self, *items):
            for i in items:
                self._items.pop(i, None)
        def insert(self, parent, index, values=()):
            self._n += 1
            iid = f"I{self._n:03d}"
            self._items[iid] = tuple(values)
            return iid
        def item_values(self, iid): return self._items[iid]

    ttk.Frame = Frame
    ttk.LabelFrame = LabelFrame
    ttk.Label = Label
    ttk.Button = Button
    ttk.Entry = Entry
    ttk.Scrollbar = Scrollbar
    ttk.Combobox = Combobox
    ttk.Treeview = Treeview

    filedialog = types.ModuleType("tkinter.filedialog")
    filedialog.asksaveasfilename = lambda **k: ""

    messagebox = types.ModuleType("tkinter.messagebox")
    messagebox.showinfo = lambda *a, **k: None
    messagebox.showerror = lambda *a, **k: None
    messagebox.showwarning = lambda *a, **k: None

    tk.ttk = ttk
    tk.filedialog = filedialog
    tk.messagebox = messagebox

    monkeypatch.setitem(sys.modules, "tkinter", tk)
    monkeypatch.setitem(sys.modules, "tkinter.ttk", ttk)
    monkeypatch.setitem(sys.modules, "tkinter.filedialog", filedialog)
    monkeypatch.setitem(sys.modules, "tkinter.messagebox", messagebox)


def _install_chart_stub(monkeypatch):
    chart_panel = types.ModuleType("expense_history.gui_viewers.chart_panel")

    class ChartPanel:
        def __init__(self, *a, **k): pass
        def pack(self, *a, **k): pass
        def show(self, series): pass

    chart_panel.ChartPanel = ChartPanel
    monkeypatch.setitem(sys.modules, "expense_history.gui_viewers.chart_panel", chart_panel)


@pytest.fixture
def app_mod(monkeypatch):
    """Import expense_history.gui_viewers.app with tkinter & the chart stubbed."""
    _install_tk_stubs(monkeypatch)
    _install_chart_stub(monkeypatch)
    for key in ("expense_history.gui_viewers.app", "expense_history.gui_viewers.history_form"):
        monkeypatch.delitem(sys.modules, key, raising=False)
    return importlib.import_module("expense_history.gui_viewers.app")


# --------------------------
# Entry window
# --------------------------

def test_app_defaults_to_seed_source(app_mod):
    app = app_mod.ExpenseTrackerApp()
    assert isinstance(app.source, SeedTransactionSource)
    assert app.history_form is None


def test_open_history_hides_entry_and_back_restores_it(app_mod):
    app = app_mod.ExpenseTrackerApp(SeedTransactionSource())

    form = app.open_history()
    assert app.withdrawn is True
    assert app.history_form is form
    assert form.master is app
    assert len(form.displayed_rows) == 5

    form.go_back()
    assert form.destroyed is True
    assert app.withdrawn is False
    assert app.history_form is None


def test_history_form_uses_app_config(app_mod):
    from expense_history.utilities.app_config import DEFAULT_CONFIG

    cfg = DEFAULT_CONFIG.with_overrides(currency_symbol="$")
    app = app_mod.ExpenseTrackerApp(SeedTransactionSource(), config=cfg)
    form = app.open_history()
    assert form.total_var.get().startswith("Total Spending: $")


def test_open_history_reports_source_error_in_form(app_mod):
    class BrokenSource:
        def list_transactions(self):
            raise ValueError("Row 2: bad date")

    errors = []
    mb = types.SimpleNamespace(
        showerror=lambda *a, **k: errors.append(a),
        showwarning=lambda *a, **k: None,
        showinfo=lambda *a, **k: None,
    )
    app = app_mod.ExpenseTrackerApp(BrokenSource(), messagebox_api=mb)

    form = app.open_history()
    assert errors == [("Error", "Could not load transactions:\nRow 2: bad date")]
    assert form.destroyed is False

    form.go_back()
    assert app.withdrawn is False


def test_open_history_keeps_entry_visible_when_form_fails(app_mod):
    class CrashingSource:
        def list_transactions(self):
            raise RuntimeError("boom")

    app = app_mod.ExpenseTrackerApp(CrashingSource(), messagebox_api=types.SimpleNamespace())

    with pytest.raises(RuntimeError):
        app.open_history()
    assert app.withdrawn is False
    assert app.history_form is None


# --------------------------
# Launcher
# --------------------------

@pytest.fixture
def launched(app_mod, monkeypatch):
    """Replace the window and logging setup with recorders; return what main() built."""
    record = {}

    class FakeApp:
        def __init__(self, source, config=None):
            record["source"] = source
            record["config"] = config
            record["opened"] = False
        def open_history(self): record["opened"] = True
        def mainloop(self): record["ran"] = True

    monkeypatch.setattr(app_mod, "ExpenseTrackerApp", FakeApp)
    monkeypatch.setattr(app_mod, "configure_logging", lambda *a, **k: record.setdefault("logging", a))
    return record


def test_main_defaults(app_mod, launched):
    app_mod.main([])
    assert isinstance(launched["source"], SeedTransactionSource)
    assert launched["config"].currency_symbol == "₱"
    assert launched["ran"] is True
    assert launched["opened"] is False


def test_main_with_data_file_and_overrides(app_mod, launched, tmp_path):
    p = tmp_path / "t.csv"
    p.write_text("Amount,Date,Category,PaymentMethod\n5,2026-10-01,Food,Cash\n", encoding="utf-8")

    app_mod.main(["--data", str(p), "--currency", "$", "--lookback-days", "7", "--history",
                  "--log-level", "DEBUG"])

    assert isinstance(launched["source"], FileTransactionSource)
    assert launched["config"].currency_symbol == "$"
    assert launched["config"].lookback_days == 7
    assert launched["opened"] is True
    assert launched["logging"][0] == "DEBUG"


def test_main_missing_data_file_exits(app_mod, launched, tmp_path):
    with pytest.raises(SystemExit, match="Data file not found"):
        app_mod.main(["--data", str(tmp_path / "missing.csv")])
    assert "ran" not in launched


def test_main_unreadable_data_file_exits(app_mod, launched, tmp_path):
    p = tmp_path / "bad.csv"
    p.write_text("Amount,Date\n1,2026-01-01\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Cannot load transactions"):
        app_mod.main(["--data", str(p)])


def test_main_rejects_negative_lookback(app_mod, launched):
    with pytest.raises(SystemExit):
        app_mod.main(["--lookback-days", "-1"])
