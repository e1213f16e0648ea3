# tests/controllers/test_pdf_export.py
from __future__ import annotations

from pathlib import Path

import pytest

from expense_history.controllers import pdf_export
from expense_history.controllers.pdf_export import (
    build_table_rows,
    export_table_pdf,
    render_table_pdf,
)
from expense_history.data_model import GRID_HEADERS

ROWS = [
    ["500.00", "2026-10-18", "Food", "Cash"],
    ["150.00", "2026-10-16", "Food", None],
]


def test_build_table_rows_header_first_and_none_as_empty():
    data = build_table_rows(GRID_HEADERS, ROWS)
    assert data[0] == ["Amount", "Date", "Category", "PaymentMethod"]
    assert data[2] == ["150.00", "2026-10-16", "Food", ""]
    assert all(isinstance(c, str) for row in data for c in row)


def test_render_produces_pdf_bytes():
    payload = render_table_pdf(GRID_HEADERS, ROWS)
    assert payload.startswith(b"%PDF")
    assert payload.rstrip().endswith(b"%%EOF")


def test_render_handles_header_only_table():
    assert render_table_pdf(GRID_HEADERS, []).startswith(b"%PDF")


def test_export_writes_file(tmp_path):
    out = export_table_pdf(tmp_path / "report.pdf", GRID_HEADERS, ROWS)
    assert out == tmp_path / "report.pdf"
    assert out.read_bytes().startswith(b"%PDF")


def test_export_logs_row_count(tmp_path, caplog):
    caplog.set_level("INFO", logger="expense_history.controllers.pdf_export")
    export_table_pdf(tmp_path / "report.pdf", GRID_HEADERS, ROWS)
    assert any("Exported 2 rows" in r.getMessage() for r in caplog.records)


def test_render_failure_leaves_destination_untouched(monkeypatch, tmp_path):
    target = tmp_path / "report.pdf"
    target.write_bytes(b"previous")

    def boom(*a, **k):
        raise RuntimeError("layout failed")

    monkeypatch.setattr(pdf_export, "render_table_pdf", boom)
    with pytest.raises(RuntimeError):
        export_table_pdf(target, GRID_HEADERS, ROWS)
    assert target.read_bytes() == b"previous"


def test_write_error_propagates(tmp_path):
    missing_dir = tmp_path / "nope" / "report.pdf"
    with pytest.raises(OSError):
        export_table_pdf(missing_dir, GRID_HEADERS, ROWS)
    assert not Path(missing_dir).exists()
