# expense_history/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Final, Optional, overload


@overload
def to_date(value: datetime, /) -> date: ...
@overload
def to_date(value: date, /) -> date: ...
@overload
def to_date(value: str, /) -> date: ...


def to_date(value: object, /) -> date:
    """
    Coerce a date-like value into a calendar ``date`` (time of day dropped).

    Supported examples:
      - date / datetime / pandas.Timestamp (a datetime subclass)
      - 2024-12-31            (ISO, also 2024/12/31)
      - 12/31/2024            (US, also 12-31-2024)
      - 2024-12-31T23:59:59Z  (ISO datetime; time/offset ignored)
      - 45567 or 45567.75     (Excel serial date; fractional part ignored)

    Raises:
        ValueError: if nothing matches.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _from_excel_serial(float(value))

    txt = "" if value is None else str(value).strip()
    if not txt:
        raise ValueError("Empty value cannot be converted to date")

    if "T" in txt or " " in txt:
        try:
            return datetime.fromisoformat(_TRAILING_Z.sub("", txt)).date()
        except ValueError:
            pass

    for fmt in _DATE_PATTERNS:
        try:
            return datetime.strptime(txt, fmt).date()
        except ValueError:
            continue

    if _EXCEL_SERIAL.fullmatch(txt):
        return _from_excel_serial(float(txt))

    raise ValueError(f"Unrecognized date format: {value!r}")


def parse_date_maybe(value: object) -> Optional[date]:
    """``to_date`` that returns ``None`` instead of raising."""
    try:
        return to_date(value)
    except ValueError:
        return None


def _from_excel_serial(n: float) -> date:
    # 1900 date system, skipping Excel's fictitious 1900-02-29
    days = int(n)
    if days < 0:
        raise ValueError(f"Negative Excel serial date: {n!r}")
    if days >= 60:
        days -= 1
    return date(1899, 12, 31) + timedelta(days=days)


def to_decimal(value: Any) -> Decimal:
    """
    Convert amounts read from data files to ``Decimal``.

    Lenient on purpose: currency glyphs, thousands separators, parentheses
    for negatives and floats coming out of pandas are accepted.

    Examples:
        to_decimal("₱1,234.50")   -> Decimal('1234.50')
        to_decimal("(12.00)")     -> Decimal('-12.00')
        to_decimal(1200.0)        -> Decimal('1200.0')

    Raises:
        ValueError: if no usable number is present.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError("Booleans are not amounts")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if value != value:  # NaN from an empty spreadsheet cell
            raise ValueError("Missing amount")
        # Avoid binary float artifacts
        return Decimal(str(value))
    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    s = value.strip().replace("\xa0", "").replace(_UNICODE_MINUS, "-")
    neg = s.startswith("(") and s.endswith(")")
    if neg:
        s = s[1:-1]
    s = _NON_NUMERIC.sub("", s).replace(",", "")
    if not re.search(r"\d", s):
        raise ValueError(f"No digits found in input: {value!r}")
    try:
        result = Decimal(s)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse Decimal from {value!r}") from e
    return -result if neg else result


def parse_decimal_strict(text: str) -> Optional[Decimal]:
    """
    Parse user-typed numeric text, returning ``None`` when it is not a number.

    Accepts surrounding whitespace, an optional sign and ``,`` thousands
    separators. Anything else (currency glyphs, NaN, Infinity, empty text)
    is rejected.
    """
    s = (text or "").strip()
    if not _STRICT_NUMBER.fullmatch(s):
        return None
    try:
        result = Decimal(s.replace(",", ""))
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


def format_currency(value: Decimal | int | float, symbol: str = "₱") -> str:
    """Render an amount as ``<symbol>1,234.50`` (two decimals, grouped)."""
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


_DATE_PATTERNS: Final[tuple[str, ...]] = (
    "%Y-%m-%d",  # 2025-01-02
    "%m/%d/%Y",  # 01/02/2025
    "%Y/%m/%d",  # 2025/01/02
    "%m-%d-%Y",  # 01-02-2025
    "%Y%m%d",  # 20250102
)
_CENT: Final = Decimal("0.01")
_TRAILING_Z: Final[re.Pattern[str]] = re.compile(r"Z$")
_EXCEL_SERIAL: Final[re.Pattern[str]] = re.compile(r"\d+(\.\d+)?")
_STRICT_NUMBER: Final[re.Pattern[str]] = re.compile(
    r"[+-]?((\d{1,3}(,\d{3})+|\d+)(\.\d*)?|\.\d+)"
)
_NON_NUMERIC: Final[re.Pattern[str]] = re.compile(r"[^\d,.\-]+")
_UNICODE_MINUS = "\u2212"  # '−'
