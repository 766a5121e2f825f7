from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pandas as pd
from openpyxl.utils.cell import column_index_from_string, coordinate_from_string, get_column_letter
from openpyxl.utils.exceptions import CellCoordinatesException


def decode_col(letters: str) -> int:
    """'A' -> 0, 'Z' -> 25, 'AA' -> 26."""
    return column_index_from_string(letters) - 1


def encode_col(col: int) -> str:
    if col < 0:
        raise ValueError(f"Invalid column index: {col}")
    return get_column_letter(col + 1)


def decode_cell(ref: str) -> Tuple[int, int]:
    """Decode an A1 reference into zero-based (row, col)."""
    try:
        letters, row = coordinate_from_string(str(ref).strip())
        return row - 1, decode_col(letters)
    except (CellCoordinatesException, ValueError) as exc:
        raise ValueError(f"Invalid cell reference: {ref!r}") from exc


def encode_cell(row: int, col: int) -> str:
    return f"{encode_col(col)}{row + 1}"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


class SheetGrid:
    """A sheet materialized as (row, col) -> value, zero-based.

    Blank strings and NaN become None so callers only test for one kind of
    empty. Out-of-range reads return None.
    """

    def __init__(self, name: str, rows: List[List[Any]]):
        self.name = name
        self._rows = [[None if _is_blank(v) else v for v in row] for row in rows]

    @classmethod
    def from_frame(cls, name: str, df: pd.DataFrame) -> "SheetGrid":
        return cls(name, df.values.tolist() if not df.empty else [])

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        return max((len(r) for r in self._rows), default=0)

    def row_len(self, row: int) -> int:
        if 0 <= row < len(self._rows):
            return len(self._rows[row])
        return 0

    def value(self, row: int, col: int) -> Any:
        if row < 0 or col < 0 or row >= len(self._rows):
            return None
        cells = self._rows[row]
        if col >= len(cells):
            return None
        return cells[col]

    def text(self, row: int, col: int) -> str:
        value = self.value(row, col)
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            # whole numbers typed into text columns come back as floats
            return str(int(value))
        return str(value).strip()

    def optional_text(self, row: int, col: int) -> Optional[str]:
        return self.text(row, col) or None

    def row_values(self, row: int) -> List[Any]:
        if 0 <= row < len(self._rows):
            return list(self._rows[row])
        return []

    def __repr__(self) -> str:
        return f"SheetGrid({self.name!r}, rows={self.n_rows}, cols={self.n_cols})"
