from __future__ import annotations

from typing import List, Optional, Tuple

from core.dates import format_date_long, format_excel_time, parse_excel_date
from core.diagnostics import Diagnostics
from core.grid import SheetGrid
from core.models import MeetingInfo


MEETING_START_ROW = 3  # Excel row 4


def parse_meetings(grid: Optional[SheetGrid], diags: Diagnostics) -> Tuple[MeetingInfo, ...]:
    if grid is None:
        diags.warn("MeetingInfo sheet not found; the meeting information page will be empty.")
        return ()
    if grid.n_rows <= MEETING_START_ROW:
        diags.warn("MeetingInfo sheet has too few rows (meetings start at row 4).", sheet=grid.name)
        return ()

    meetings: List[MeetingInfo] = []
    for row in range(MEETING_START_ROW, grid.n_rows):
        title = grid.text(row, 1)
        if not title:
            continue
        raw_date = parse_excel_date(grid.value(row, 2))
        if raw_date is None and grid.value(row, 2) is not None:
            diags.warn(f"Meeting {title!r}: date {grid.value(row, 2)!r} could not be parsed.", sheet=grid.name, row=row, col=2)
        meetings.append(
            MeetingInfo(
                id=f"meeting-{row}",
                title=title,
                date=format_date_long(raw_date) or "Invalid Date",
                raw_date=raw_date,
                start_time=format_excel_time(grid.value(row, 3)),
                end_time=format_excel_time(grid.value(row, 4)),
                length=grid.text(row, 5) or "N/A",
                notes=grid.text(row, 6) or "No notes for this meeting.",
            )
        )
    return tuple(meetings)
