from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from core.grid import encode_cell


logger = logging.getLogger(__name__)

WARNING = "warning"
ERROR = "error"


class WorkbookError(Exception):
    """The workbook cannot produce a snapshot; the message is shown to end users."""


@dataclass(frozen=True)
class Diagnostic:
    level: str
    sheet: Optional[str]
    cell: Optional[str]
    message: str

    def __str__(self) -> str:
        where = self.sheet or "workbook"
        if self.cell:
            where = f"{where}!{self.cell}"
        return f"[{where}] {self.message}"


class Diagnostics:
    """Collects parse diagnostics; each one is also sent to the logger."""

    def __init__(self) -> None:
        self._items: List[Diagnostic] = []

    def _add(self, level: str, message: str, sheet: Optional[str], row: Optional[int], col: Optional[int]) -> None:
        cell = encode_cell(row, col) if row is not None and col is not None else None
        item = Diagnostic(level=level, sheet=sheet, cell=cell, message=message)
        self._items.append(item)
        logger.log(logging.ERROR if level == ERROR else logging.WARNING, "%s", item)

    def warn(self, message: str, *, sheet: Optional[str] = None, row: Optional[int] = None, col: Optional[int] = None) -> None:
        self._add(WARNING, message, sheet, row, col)

    def error(self, message: str, *, sheet: Optional[str] = None, row: Optional[int] = None, col: Optional[int] = None) -> None:
        self._add(ERROR, message, sheet, row, col)

    def freeze(self) -> Tuple[Diagnostic, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)
