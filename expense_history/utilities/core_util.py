#!/usr/bin/env python3
"""
Core Utilities

Features:
- String utilities
- Scoped file output
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def cell_text(value: object) -> str:
    """Text for a grid or report cell; ``None`` becomes an empty string."""
    return "" if value is None else str(value)


def write_bytes_scoped(path: Path, payload: bytes) -> Path:
    """Write ``payload`` to ``path`` inside a ``with`` block and return the path."""
    path = Path(path)
    with open(path, "wb") as fh:
        fh.write(payload)
    return path
