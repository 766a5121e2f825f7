from __future__ import annotations

from typing import List, Optional, Tuple

from core.diagnostics import Diagnostics
from core.grid import SheetGrid
from core.models import Officer


TRANSPARENT_PIXEL = "data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"

OFFICER_START_ROW = 2  # Excel row 3
IMAGE_START_COL = 4  # E
SECONDARY_IMAGE_OFFSET = 23


def read_image(grid: SheetGrid, row: int) -> Optional[str]:
    """Join base64 chunks from column E rightwards until the first empty cell."""
    chunks: List[str] = []
    col = IMAGE_START_COL
    while True:
        chunk = grid.text(row, col)
        if not chunk:
            break
        chunks.append(chunk)
        col += 1
    data = "".join(chunks)
    if not data:
        return None
    if data.startswith("data:image"):
        return data
    return f"data:image/png;base64,{data}"


def parse_officers(grid: Optional[SheetGrid], diags: Diagnostics) -> Tuple[Officer, ...]:
    if grid is None:
        diags.warn("Officers sheet not found; officer details are unavailable.")
        return ()

    officers: List[Officer] = []
    for row in range(OFFICER_START_ROW, grid.n_rows):
        name = grid.text(row, 0)
        if not name:
            continue
        secondary_row = row + SECONDARY_IMAGE_OFFSET
        officers.append(
            Officer(
                id=f"officer-{row}",
                name=name,
                role=grid.text(row, 1) or "NHS Officer",
                email=grid.text(row, 2),
                description=grid.text(row, 3) or "No description provided.",
                image=read_image(grid, row) or TRANSPARENT_PIXEL,
                secondary_image=read_image(grid, secondary_row) if secondary_row < grid.n_rows else None,
            )
        )
    return tuple(officers)
