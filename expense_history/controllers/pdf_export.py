"""
PDF export of the rows currently shown in the history grid.

The layout is a centered bold title followed by one full-width table: the
column headers first, then every displayed row rendered as plain text.
"""

# expense_history/controllers/pdf_export.py
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable, List, Sequence

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from expense_history.utilities.core_util import cell_text, write_bytes_scoped

log = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "TransactionReport.pdf"
DEFAULT_TITLE = "Transaction History"
PAGE_MARGIN = 10  # points

TITLE_STYLE = ParagraphStyle(
    "HistoryTitle",
    fontName="Helvetica-Bold",
    fontSize=16,
    leading=20,
    alignment=TA_CENTER,
)


def build_table_rows(
    headers: Sequence[object], rows: Iterable[Sequence[object]]
) -> List[List[str]]:
    """Header row plus data rows as text; ``None`` cells become ``""``."""
    out = [[cell_text(h) for h in headers]]
    out.extend([cell_text(v) for v in row] for row in rows)
    return out


def render_table_pdf(
    headers: Sequence[object],
    rows: Iterable[Sequence[object]],
    title: str = DEFAULT_TITLE,
) -> bytes:
    """Lay out the report in memory and return the PDF bytes."""
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=title,
    )
    story = [Paragraph(title, TITLE_STYLE), Spacer(1, 12)]

    data = build_table_rows(headers, rows)
    if data[0]:
        ncols = len(data[0])
        table = Table(data, colWidths=[doc.width / ncols] * ncols, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("FONT", (0, 0), (-1, 0), "Helvetica", 12),
                    ("FONT", (0, 1), (-1, -1), "Helvetica", 11),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )
        story.append(table)

    doc.build(story)
    return buf.getvalue()


def export_table_pdf(
    path: Path | str,
    headers: Sequence[object],
    rows: Iterable[Sequence[object]],
    title: str = DEFAULT_TITLE,
) -> Path:
    """Write the report to ``path``.

    The PDF is fully rendered before the destination is opened, so a layout
    error leaves the target untouched; write errors propagate to the caller.
    """
    row_list = [list(r) for r in rows]
    payload = render_table_pdf(headers, row_list, title=title)
    out = write_bytes_scoped(Path(path), payload)
    log.info("Exported %d rows to %s", len(row_list), out)
    return out
