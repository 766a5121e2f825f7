from __future__ import annotations

import numbers
import re
from typing import List, Optional

import pandas as pd


_HEX_RE = re.compile(r"^#(?:[0-9A-F]{3}|[0-9A-F]{6})$", re.IGNORECASE)


def slugify(name: str) -> str:
    """'Social Studies' -> 'social-studies'."""
    s = re.sub(r"\s+", "-", str(name).strip().lower())
    return re.sub(r"[^a-z0-9-]", "", s)


def normalize_hex(value: object) -> Optional[str]:
    """Return '#RRGGBB'/'#RGB' upper-cased, or None when not a hex code."""
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    if not s.startswith("#"):
        s = "#" + s
    if not _HEX_RE.match(s):
        return None
    return s.upper()


def parse_hours(value: object) -> Optional[float]:
    """Numeric hour cell -> float. Empty -> 0.0, unparsable -> None."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return 0.0
        match = re.match(r"^[+-]?(\d+(\.\d*)?|\.\d+)", s)
        if not match:
            return None
        return float(match.group(0))
    if isinstance(value, numbers.Real):
        return None if pd.isna(value) else float(value)
    return None


def split_list(value: object) -> List[str]:
    """Comma-separated cell -> trimmed non-empty names."""
    if value is None:
        return []
    return [part.strip() for part in str(value).split(",") if part.strip()]
