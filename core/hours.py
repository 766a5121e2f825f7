"""Hour ledgers from the HourTracker and AdditionalHours sheets.

HourTracker layout (zero-based rows):
- row 1: a date every second column starting at column B; the date column
  is the AM slot and the next column the PM slot
- row 2: AM/PM labels
- row 4+: one member per row, name in column A

AdditionalHours layout: members from row 4, then (date, hours, notes)
triples starting at column B. The first empty date ends the row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from core.dates import parse_excel_date
from core.diagnostics import Diagnostics, WorkbookError
from core.grid import SheetGrid
from core.models import AdditionalHourEntry, DailyHourEntry, Member, SemesterCalendar
from core.normalize import parse_hours


DATE_ROW = 1
MEMBER_START_ROW = 4
FIRST_SLOT_COL = 1


@dataclass(frozen=True)
class DateSlot:
    day: date
    am_col: int
    pm_col: int


@dataclass
class MemberLedger:
    """Mutable accumulator for one member while sheets are being read."""

    name: str
    semester1_hours: float = 0.0
    semester2_hours: float = 0.0
    daily: List[DailyHourEntry] = field(default_factory=list)
    additional: List[AdditionalHourEntry] = field(default_factory=list)

    def add(self, semester: int, hours: float) -> None:
        if semester == 2:
            self.semester2_hours += hours
        else:
            self.semester1_hours += hours

    def freeze(self) -> Member:
        return Member(
            name=self.name,
            semester1_hours=self.semester1_hours,
            semester2_hours=self.semester2_hours,
            daily_details=tuple(self.daily),
            additional_details=tuple(self.additional),
        )


def read_date_slots(grid: SheetGrid, diags: Diagnostics) -> List[DateSlot]:
    slots: List[DateSlot] = []
    for col in range(FIRST_SLOT_COL, grid.row_len(DATE_ROW), 2):
        raw = grid.value(DATE_ROW, col)
        day = parse_excel_date(raw)
        if day is not None:
            slots.append(DateSlot(day=day, am_col=col, pm_col=col + 1))
        elif raw is not None:
            diags.warn(f"Header date {raw!r} could not be parsed; column skipped.", sheet=grid.name, row=DATE_ROW, col=col)
    return slots


def _hour_cell(grid: SheetGrid, row: int, col: int, who: str, diags: Diagnostics) -> float:
    hours = parse_hours(grid.value(row, col))
    if hours is None or hours < 0:
        diags.warn(
            f"Invalid hour value {grid.value(row, col)!r} for member {who!r}; treating as 0.",
            sheet=grid.name,
            row=row,
            col=col,
        )
        return 0.0
    return hours


def parse_hour_tracker(grid: Optional[SheetGrid], calendar: SemesterCalendar, diags: Diagnostics) -> Dict[str, MemberLedger]:
    """Build one ledger per member row; raises WorkbookError on a broken layout."""
    if grid is None:
        raise WorkbookError("The first sheet 'HourTracker' was not found in the workbook.")
    if grid.n_rows <= MEMBER_START_ROW:
        raise WorkbookError(
            "'HourTracker' sheet (sheet 1) has too few rows. Expected dates in row 2, AM/PM labels in row 3 "
            "and members from row 5."
        )
    slots = read_date_slots(grid, diags)
    if not slots:
        diags.warn("No dates found in row 2 of the HourTracker sheet.", sheet=grid.name)

    # a missing semester 1 start is reported once, by parse_information
    ledgers: Dict[str, MemberLedger] = {}
    for row in range(MEMBER_START_ROW, grid.n_rows):
        name = grid.text(row, 0)
        if not name:
            continue
        if name in ledgers:
            diags.warn(f"Duplicate member {name!r}; merging rows.", sheet=grid.name, row=row, col=0)
        ledger = ledgers.setdefault(name, MemberLedger(name=name))
        if calendar.sem1_start is None:
            continue

        for slot in slots:
            semester = calendar.semester_for(slot.day)
            if semester is None:
                continue
            am = _hour_cell(grid, row, slot.am_col, name, diags)
            pm = _hour_cell(grid, row, slot.pm_col, name, diags)
            ledger.add(semester, am + pm)
            if am > 0:
                ledger.daily.append(DailyHourEntry(date=slot.day, session="AM", hours=am, semester=semester))
            if pm > 0:
                ledger.daily.append(DailyHourEntry(date=slot.day, session="PM", hours=pm, semester=semester))

    if not ledgers and slots:
        diags.warn("No members found from row 5 of the HourTracker sheet.", sheet=grid.name)
    return ledgers


def merge_additional_hours(
    grid: Optional[SheetGrid],
    ledgers: Dict[str, MemberLedger],
    calendar: SemesterCalendar,
    diags: Diagnostics,
) -> None:
    """Fold out-of-band hour entries into ``ledgers`` in place.

    Names with no HourTracker row get a new ledger. That hides typos in the
    sheet, so each one is reported.
    """
    if grid is None:
        diags.warn("AdditionalHours sheet not found; additional hours are not included.")
        return
    if calendar.sem1_start is None:
        return

    for row in range(MEMBER_START_ROW, grid.n_rows):
        name = grid.text(row, 0)
        if not name:
            continue
        ledger = ledgers.get(name)
        if ledger is None:
            diags.warn(
                f"Member {name!r} is not on the HourTracker sheet; creating a new entry.",
                sheet=grid.name,
                row=row,
                col=0,
            )
            ledger = ledgers[name] = MemberLedger(name=name)

        for date_col in range(1, grid.row_len(row), 3):
            raw_date = grid.value(row, date_col)
            if raw_date is None:
                break
            hours = parse_hours(grid.value(row, date_col + 1))
            if hours is None:
                diags.warn(
                    f"Invalid hour value {grid.value(row, date_col + 1)!r} for member {name!r}; treating as 0.",
                    sheet=grid.name,
                    row=row,
                    col=date_col + 1,
                )
                continue
            if hours <= 0:
                continue

            day = parse_excel_date(raw_date)
            if day is None:
                diags.warn(
                    f"Invalid date {raw_date!r} for member {name!r}; entry skipped.",
                    sheet=grid.name,
                    row=row,
                    col=date_col,
                )
                continue
            semester = calendar.semester_for(day)
            if semester is None:
                continue
            ledger.add(semester, hours)
            ledger.additional.append(
                AdditionalHourEntry(date=day, hours=hours, semester=semester, notes=grid.text(row, date_col + 2))
            )

