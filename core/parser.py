"""Workbook normalizer: workbook bytes -> ParseResult.

Sheets are identified by position, not by name. Only a missing or
malformed HourTracker sheet, or a file that is not a workbook at all,
raises; every other problem becomes a diagnostic and an empty section.
"""

from __future__ import annotations

import io
import logging
from typing import List, Optional

import pandas as pd

from core.diagnostics import Diagnostics, WorkbookError
from core.grid import SheetGrid
from core.hours import merge_additional_hours, parse_hour_tracker
from core.information import parse_information
from core.meetings import parse_meetings
from core.models import ParseResult, Snapshot
from core.officers import parse_officers
from core.resolution import parse_member_proficiencies, parse_study_resources
from core.taxonomy import parse_subjects


logger = logging.getLogger(__name__)

SHEET_ORDER = [
    "HourTracker",
    "AdditionalHours",
    "Information",
    "Officers",
    "MemberDetails",
    "Subjects",
    "StudyResources",
    "MeetingInfo",
]
HOUR_TRACKER, ADDITIONAL_HOURS, INFORMATION, OFFICERS, MEMBER_DETAILS, SUBJECTS, STUDY_RESOURCES, MEETING_INFO = range(8)


def decode_workbook(data: bytes) -> List[SheetGrid]:
    """Decode ``.xlsx`` bytes into one grid per sheet, in workbook order."""
    if not data:
        raise WorkbookError("The workbook file is empty.")
    try:
        frames = pd.read_excel(
            io.BytesIO(data),
            sheet_name=None,
            header=None,
            dtype=object,
            engine="openpyxl",
            keep_default_na=False,
        )
    except Exception as exc:
        logger.exception("decode_workbook failed")
        raise WorkbookError(f"The workbook could not be read as an .xlsx file: {exc}") from exc
    return [SheetGrid.from_frame(name, df) for name, df in frames.items()]


def _sheet(grids: List[SheetGrid], index: int) -> Optional[SheetGrid]:
    return grids[index] if index < len(grids) else None


def parse_grids(grids: List[SheetGrid]) -> ParseResult:
    diags = Diagnostics()
    if not grids:
        raise WorkbookError("The workbook has no sheets; expected 'HourTracker' first.")
    if len(grids) < len(SHEET_ORDER):
        missing = ", ".join(SHEET_ORDER[len(grids):])
        diags.warn(f"Workbook has {len(grids)} of {len(SHEET_ORDER)} sheets; missing sections: {missing}.")

    site = parse_information(_sheet(grids, INFORMATION), diags)
    ledgers = parse_hour_tracker(_sheet(grids, HOUR_TRACKER), site.calendar, diags)
    merge_additional_hours(_sheet(grids, ADDITIONAL_HOURS), ledgers, site.calendar, diags)

    taxonomy = parse_subjects(_sheet(grids, SUBJECTS), diags)
    proficiencies = parse_member_proficiencies(_sheet(grids, MEMBER_DETAILS), taxonomy, diags)
    general_tags, resources = parse_study_resources(_sheet(grids, STUDY_RESOURCES), taxonomy, diags)

    snapshot = Snapshot(
        site=site,
        members=tuple(ledger.freeze() for ledger in ledgers.values()),
        officers=parse_officers(_sheet(grids, OFFICERS), diags),
        taxonomy=taxonomy,
        member_proficiencies=proficiencies,
        general_tags=general_tags,
        study_resources=resources,
        meetings=parse_meetings(_sheet(grids, MEETING_INFO), diags),
        sheet_names=tuple(g.name for g in grids),
    )
    return ParseResult(snapshot=snapshot, diagnostics=diags.freeze())


def parse_workbook(data: bytes) -> ParseResult:
    return parse_grids(decode_workbook(data))
