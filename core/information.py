from __future__ import annotations

from typing import List, Optional

from core.dates import format_date_long, parse_excel_date
from core.diagnostics import Diagnostics
from core.grid import SheetGrid
from core.models import ListItem, SemesterCalendar, SiteInfo


# Fixed metadata cells in column B (zero-based rows).
WEBSITE_UPDATED_ROW = 0
HOURS_UPDATED_ROW = 1
SEM1_START_ROW = 2
SEM2_START_ROW = 3
SEM2_END_ROW = 4
META_COL = 1

LIST_START_ROW = 7  # Excel row 8
SPLASH_COL = 17  # column R
SUGGESTIONS_TEXT_COL = 14  # O8
SUGGESTIONS_URL_COL = 15  # P8


def _display_date(value: object) -> str:
    parsed = parse_excel_date(value)
    if parsed is not None:
        return format_date_long(parsed) or ""
    return value.strip() if isinstance(value, str) else ""


def parse_calendar(grid: SheetGrid, diags: Diagnostics) -> SemesterCalendar:
    calendar = SemesterCalendar(
        sem1_start=parse_excel_date(grid.value(SEM1_START_ROW, META_COL)),
        sem2_start=parse_excel_date(grid.value(SEM2_START_ROW, META_COL)),
        sem2_end=parse_excel_date(grid.value(SEM2_END_ROW, META_COL)),
    )
    if calendar.sem1_start is None:
        diags.error(
            "Semester 1 start date is missing or invalid; hour totals cannot be bucketed and will be zero.",
            sheet=grid.name,
            row=SEM1_START_ROW,
            col=META_COL,
        )
    for row, label, value in (
        (SEM2_START_ROW, "Semester 2 start", calendar.sem2_start),
        (SEM2_END_ROW, "Semester 2 end", calendar.sem2_end),
    ):
        if value is None and grid.value(row, META_COL) is not None:
            diags.warn(f"{label} date could not be parsed; ignoring it.", sheet=grid.name, row=row, col=META_COL)
    return calendar


def parse_information(grid: Optional[SheetGrid], diags: Diagnostics) -> SiteInfo:
    if grid is None:
        diags.warn("Information sheet not found; metadata and home page lists are unavailable.")
        diags.error("Semester 1 start date is unavailable; hour totals will be zero.")
        return SiteInfo()

    if grid.n_rows < 5:
        diags.warn("Information sheet has too few rows for the metadata cells B1-B5.", sheet=grid.name)

    calendar = parse_calendar(grid, diags)
    website_updated = format_date_long(parse_excel_date(grid.value(WEBSITE_UPDATED_ROW, META_COL)))
    hours_updated = format_date_long(parse_excel_date(grid.value(HOURS_UPDATED_ROW, META_COL)))

    splash: List[str] = []
    for row in range(1, grid.n_rows):
        text = grid.text(row, SPLASH_COL)
        if text:
            splash.append(text)

    suggestions_text: Optional[str] = None
    suggestions_url: Optional[str] = None
    if grid.n_rows > LIST_START_ROW:
        suggestions_text = grid.optional_text(LIST_START_ROW, SUGGESTIONS_TEXT_COL)
        suggestions_url = grid.optional_text(LIST_START_ROW, SUGGESTIONS_URL_COL)
    else:
        diags.warn("Information sheet has no row 8; suggestions text and link are unavailable.", sheet=grid.name)

    events: List[ListItem] = []
    links: List[ListItem] = []
    updates: List[ListItem] = []
    changelog: List[ListItem] = []
    for row in range(LIST_START_ROW, grid.n_rows):
        if any(grid.value(row, c) is not None for c in (0, 1, 2)):
            events.append(
                ListItem(
                    id=f"event-{row}",
                    date=_display_date(grid.value(row, 0)),
                    title=grid.text(row, 1),
                    text=grid.text(row, 2),
                )
            )
        if any(grid.value(row, c) is not None for c in (4, 5)):
            links.append(ListItem(id=f"link-{row}", title=grid.text(row, 4), url=grid.text(row, 5)))
        if any(grid.value(row, c) is not None for c in (7, 8, 9)):
            updates.append(
                ListItem(
                    id=f"update-{row}",
                    date=_display_date(grid.value(row, 7)),
                    title=grid.text(row, 8),
                    text=grid.text(row, 9),
                )
            )
        if any(grid.value(row, c) is not None for c in (11, 12)):
            changelog.append(
                ListItem(id=f"changelog-{row}", date=_display_date(grid.value(row, 11)), text=grid.text(row, 12))
            )

    return SiteInfo(
        website_last_updated=website_updated or "N/A",
        hours_last_updated=hours_updated or "N/A",
        calendar=calendar,
        events=tuple(events),
        links=tuple(links),
        info_updates=tuple(updates),
        changelog=tuple(changelog),
        suggestions_text=suggestions_text,
        suggestions_url=suggestions_url,
        splash_texts=tuple(splash),
    )
