from __future__ import annotations

import numbers
import re
from datetime import date, datetime, time
from typing import Optional

import pandas as pd


EXCEL_ORIGIN = "1899-12-30"
MAX_EXCEL_SERIAL = 2958465  # 9999-12-31

_MDY_RE = re.compile(r"^(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{2,4})\b")
_YEAR_RE = re.compile(r"\b\d{4}\b")
MIN_YEAR = 1900


def pivot_year(year: int) -> int:
    """Two-digit years: < 50 -> 20xx, >= 50 -> 19xx."""
    if year >= 100:
        return year
    return 2000 + year if year < 50 else 1900 + year


def parse_excel_date(value: object) -> Optional[date]:
    """Normalize a spreadsheet date cell into a ``date``.

    Accepts serial numbers (1900 date system), native date/datetime cells
    and ``M/D/Y``-like strings. Other strings that carry a four-digit year
    (ISO dates, "February 1, 2025") go through pandas. Anything else,
    year-less strings included, returns None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, pd.Timestamp):
        return None if pd.isna(value) else value.date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, numbers.Real):
        if pd.isna(value) or value < 1 or value > MAX_EXCEL_SERIAL:
            return None
        parsed = pd.to_datetime(float(value), unit="D", origin=EXCEL_ORIGIN, errors="coerce")
        return None if pd.isna(parsed) else parsed.date()
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        match = _MDY_RE.match(raw)
        if match:
            month, day, year = (int(g) for g in match.groups())
            try:
                return date(pivot_year(year), month, day)
            except ValueError:
                return None
        # without a full year pandas fills one in, so "2/1" would not be rejected
        if not _YEAR_RE.search(raw):
            return None
        parsed = pd.to_datetime(raw, errors="coerce")
        if pd.isna(parsed) or parsed.year < MIN_YEAR:
            return None
        return parsed.date()
    return None


def format_date_standard(value: Optional[date]) -> str:
    """MM/DD/YYYY, used in hour ledgers."""
    if value is None:
        return ""
    return f"{value.month:02d}/{value.day:02d}/{value.year}"


def format_date_long(value: Optional[date]) -> Optional[str]:
    """'DD Month YYYY', used on the home and meeting pages."""
    if value is None:
        return None
    return f"{value.day:02d} {value.strftime('%B')} {value.year}"


def _format_clock(hour: int, minute: int) -> str:
    suffix = "pm" if hour >= 12 else "am"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d}{suffix}"


def format_excel_time(value: object) -> str:
    """Render a time cell as ``h:mmam``.

    Handles day fractions, ``time``/``datetime`` cells and parsable strings.
    Unparsable strings are returned as typed; empty cells give "N/A".
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return "N/A"
    if isinstance(value, bool):
        return "N/A"
    if isinstance(value, numbers.Real):
        if pd.isna(value) or not 0 <= value < 1:
            return "N/A"
        minutes = int(round(float(value) * 24 * 60)) % (24 * 60)
        return _format_clock(minutes // 60, minutes % 60)
    if isinstance(value, (datetime, pd.Timestamp)):
        return _format_clock(value.hour, value.minute)
    if isinstance(value, time):
        return _format_clock(value.hour, value.minute)
    if isinstance(value, str):
        raw = value.strip()
        for fmt in ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M%p", "%I %p", "%I%p"):
            try:
                parsed = datetime.strptime(raw.upper(), fmt)
            except ValueError:
                continue
            return _format_clock(parsed.hour, parsed.minute)
        return raw
    return "N/A"
