"""Fixture workbooks built in memory with openpyxl."""

from __future__ import annotations

from datetime import date, time
from io import BytesIO
from typing import Dict, List, Optional, Tuple

import pytest
from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from core.parser import SHEET_ORDER, parse_workbook


Cells = Dict[str, object]


def make_workbook(sheets: List[Tuple[str, Cells]]) -> bytes:
    wb = Workbook()
    wb.remove(wb.active)
    for name, cells in sheets:
        ws = wb.create_sheet(name)
        for ref, value in cells.items():
            ws[ref] = value
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def hour_tracker_cells(dates: List[object], members: Dict[str, List[object]]) -> Cells:
    """Dates go in row 2 every second column from B; member hours from row 5."""
    cells: Cells = {"A1": "Tutoring Hours", "A3": "Member"}
    for i, day in enumerate(dates):
        col = 2 + 2 * i
        cells[f"{get_column_letter(col)}2"] = day
        cells[f"{get_column_letter(col)}3"] = "AM"
        cells[f"{get_column_letter(col + 1)}3"] = "PM"
    for r, (name, hours) in enumerate(members.items(), start=5):
        cells[f"A{r}"] = name
        for c, value in enumerate(hours, start=2):
            if value is not None:
                cells[f"{get_column_letter(c)}{r}"] = value
    return cells


HOUR_TRACKER: Cells = hour_tracker_cells(
    [date(2024, 9, 3), date(2025, 1, 21), date(2024, 8, 1), date(2025, 6, 1)],
    {
        "A. Smith": [2, 1, 1.5, None, 3, None, 4, None],
        "B. Jones": ["abc", 2, 0, 1],
    },
)

ADDITIONAL_HOURS: Cells = {
    "A1": "Additional Hours",
    "A5": "A. Smith",
    "B5": date(2024, 10, 1),
    "C5": 2,
    "D5": "Bake sale",
    "A6": "C. Lee",
    "B6": date(2025, 2, 1),
    "C6": 1.5,
    "D6": "Library",
}

INFORMATION: Cells = {
    "A1": "Website last updated",
    "B1": date(2025, 3, 1),
    "B2": date(2025, 3, 2),
    "B3": date(2024, 8, 15),
    "B4": date(2025, 1, 15),
    "B5": date(2025, 6, 1),
    "A8": date(2025, 4, 1),
    "B8": "Spring Social",
    "C8": "Cafeteria after school",
    "E8": "Tutoring form",
    "F8": "https://example.org/form",
    "H8": "3/5/25",
    "I8": "Reminder",
    "J8": "Log your hours",
    "L8": date(2025, 2, 20),
    "M8": "Added the study resources page",
    "O8": "Tell us what to improve",
    "P8": "https://example.org/suggest",
    "B9": "Field Trip",
    "R2": "Welcome back!",
    "R3": "Study hard",
}

OFFICERS: Cells = {
    "A1": "Officers",
    "A3": "Dana Park",
    "B3": "President",
    "C3": "dana@example.org",
    "D3": "Runs the meetings",
    "E3": "iVBORw0",
    "F3": "KGgo",
    "E26": "data:image/png;base64,AAAA",
    "A4": "Eli Ortiz",
}

MEMBER_DETAILS: Cells = {
    "A1": "Member Details",
    "A6": "A. Smith",
    "B6": "algebra 1",
    "C6": "Biology",
    "D6": "Underwater Basketweaving",
    "E6": "ALGEBRA 1",
    "A7": "B. Jones",
}

SUBJECTS: Cells = {
    "Q1": "Subject",
    "R1": "Start",
    "S1": "End",
    "T1": "Color",
    "Q2": "Math",
    "R2": "A2",
    "S2": "A4",
    "T2": "1d4ed8",
    "A2": "Algebra 1",
    "B2": "#ff0000",
    "A3": "Geometry",
    "B3": "zzz",
    "A4": "Calculus",
    "Q3": "Science",
    "R3": "C2",
    "S3": "C3",
    "T3": "#0f0",
    "C2": "Biology",
    "D2": "00ff00",
    "C3": "Chemistry",
    "Q4": "Broken",
    "R4": "E2",
    "S4": "F5",
    "T4": "not-a-color",
    "E2": "Orphan Course",
}

STUDY_RESOURCES: Cells = {
    "B1": "Worksheet",
    "C1": "Video Lecture",
    "D1": "worksheet",
    "B4": "Algebra Review",
    "C4": "Practice set",
    "D4": "Math, History",
    "E4": "geometry, Physics",
    "F4": "https://example.org/algebra.pdf",
    "G4": "worksheet, Podcast",
    "B5": "Cell Biology",
    "E5": "biology",
}

MEETING_INFO: Cells = {
    "B1": "Meetings",
    "B4": "General Meeting",
    "C4": date(2025, 2, 10),
    "D4": time(15, 30),
    "E4": 0.6875,
    "F4": "1 hour",
    "G4": "Room 101",
    "B5": "Officer Meeting",
    "C5": "not a date",
    "D5": "3:00 PM",
    "B6": "General Meeting",
    "C6": date(2025, 3, 10),
}

FULL_SHEETS: List[Tuple[str, Cells]] = list(
    zip(
        SHEET_ORDER,
        [HOUR_TRACKER, ADDITIONAL_HOURS, INFORMATION, OFFICERS, MEMBER_DETAILS, SUBJECTS, STUDY_RESOURCES, MEETING_INFO],
    )
)


def calendar_cells(sem1: object = None, sem2: object = None, sem2_end: object = None) -> Cells:
    cells: Cells = {"A3": "Semester 1 start", "A4": "Semester 2 start", "A5": "Semester 2 end"}
    for ref, value in (("B3", sem1), ("B4", sem2), ("B5", sem2_end)):
        if value is not None:
            cells[ref] = value
    return cells


def hours_workbook(
    tracker: Cells,
    additional: Optional[Cells] = None,
    *,
    sem1: object = None,
    sem2: object = None,
    sem2_end: object = None,
) -> bytes:
    """HourTracker, AdditionalHours and Information only."""
    return make_workbook(
        [
            ("HourTracker", tracker),
            ("AdditionalHours", additional or {"A1": "Additional Hours"}),
            ("Information", calendar_cells(sem1, sem2, sem2_end)),
        ]
    )


@pytest.fixture
def build_workbook():
    return make_workbook


@pytest.fixture
def build_hours_workbook():
    return hours_workbook


@pytest.fixture
def build_tracker():
    return hour_tracker_cells


@pytest.fixture
def full_workbook() -> bytes:
    return make_workbook(FULL_SHEETS)


@pytest.fixture
def full_result(full_workbook):
    return parse_workbook(full_workbook)


@pytest.fixture
def snapshot(full_result):
    return full_result.snapshot
