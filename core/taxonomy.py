from __future__ import annotations

from typing import Dict, List, Optional

from core.diagnostics import Diagnostics
from core.grid import SheetGrid, decode_cell, encode_cell
from core.models import DEFAULT_COURSE_COLOR, DEFAULT_SUBJECT_COLOR, Course, Subject, Taxonomy
from core.normalize import normalize_hex, slugify


SUBJECT_START_ROW = 1
SUBJECT_NAME_COL = 16  # Q
RANGE_START_COL = 17  # R
RANGE_END_COL = 18  # S
SUBJECT_COLOR_COL = 19  # T


def validate_color(raw: object, default: str, context: str, diags: Diagnostics, *, sheet: str, row: int, col: int) -> str:
    if raw is None or not str(raw).strip():
        return default
    color = normalize_hex(raw)
    if color is None:
        diags.warn(f"Invalid hex color {raw!r} for {context}; using {default}.", sheet=sheet, row=row, col=col)
        return default
    return color


def read_courses(
    grid: SheetGrid,
    subject_id: str,
    subject_name: str,
    start_ref: str,
    end_ref: str,
    diags: Diagnostics,
    *,
    row: int,
) -> List[Course]:
    """Courses in the single-column range ``start_ref:end_ref``.

    Colors sit in the column to the right of the names. Bad or multi-column
    ranges give no courses.
    """
    try:
        start_row, start_col = decode_cell(start_ref)
        end_row, end_col = decode_cell(end_ref)
    except ValueError as exc:
        diags.warn(f"Subject {subject_name!r}: {exc}; its courses are skipped.", sheet=grid.name, row=row, col=RANGE_START_COL)
        return []

    if start_col != end_col:
        diags.warn(
            f"Subject {subject_name!r}: courses must sit in one column, got {start_ref}:{end_ref}; its courses are skipped.",
            sheet=grid.name,
            row=row,
            col=RANGE_START_COL,
        )
        return []
    if start_row > end_row:
        diags.warn(
            f"Subject {subject_name!r}: range {start_ref}:{end_ref} ends before it starts; no courses read.",
            sheet=grid.name,
            row=row,
            col=RANGE_START_COL,
        )
        return []

    courses: List[Course] = []
    seen: Dict[str, str] = {}
    color_col = start_col + 1
    for r in range(start_row, end_row + 1):
        name = grid.text(r, start_col)
        if not name:
            continue
        key = name.lower()
        if key in seen:
            diags.warn(
                f"Course {name!r} repeats {seen[key]!r} in subject {subject_name!r}; keeping the first.",
                sheet=grid.name,
                row=r,
                col=start_col,
            )
            continue
        seen[key] = encode_cell(r, start_col)
        color = validate_color(
            grid.value(r, color_col),
            DEFAULT_COURSE_COLOR,
            f"course {name!r} of subject {subject_name!r}",
            diags,
            sheet=grid.name,
            row=r,
            col=color_col,
        )
        courses.append(Course(name=name, color=color, subject_id=subject_id))
    return courses


def parse_subjects(grid: Optional[SheetGrid], diags: Diagnostics) -> Taxonomy:
    if grid is None:
        diags.warn("Subjects sheet not found; subject and course data are unavailable.")
        return Taxonomy()

    subjects: List[Subject] = []
    for row in range(SUBJECT_START_ROW, grid.n_rows):
        name = grid.text(row, SUBJECT_NAME_COL)
        start_ref = grid.text(row, RANGE_START_COL)
        end_ref = grid.text(row, RANGE_END_COL)
        if not name and not start_ref and not end_ref:
            continue
        if not name or not start_ref or not end_ref:
            diags.warn(
                "Subject row skipped: missing subject name or course cell references.",
                sheet=grid.name,
                row=row,
                col=SUBJECT_NAME_COL,
            )
            continue

        subject_id = slugify(name)
        color = validate_color(
            grid.value(row, SUBJECT_COLOR_COL),
            DEFAULT_SUBJECT_COLOR,
            f"subject {name!r}",
            diags,
            sheet=grid.name,
            row=row,
            col=SUBJECT_COLOR_COL,
        )
        courses = read_courses(grid, subject_id, name, start_ref, end_ref, diags, row=row)
        subjects.append(Subject(id=subject_id, name=name, color=color, courses=tuple(courses)))

    return Taxonomy(subjects=tuple(subjects))
