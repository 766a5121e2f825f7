"""Tests for workbook decoding, fatal conditions and degraded parses."""

import logging

import pytest

from core.diagnostics import ERROR, WARNING, WorkbookError
from core.parser import SHEET_ORDER, decode_workbook, parse_workbook


class TestFatal:
    def test_empty_bytes(self):
        with pytest.raises(WorkbookError, match="empty"):
            parse_workbook(b"")

    def test_not_a_workbook(self):
        with pytest.raises(WorkbookError, match="could not be read"):
            parse_workbook(b"this is not a zip archive")

    def test_hour_tracker_too_short(self, build_workbook):
        data = build_workbook([("HourTracker", {"A1": "Tutoring Hours", "B2": "2/1/2025"})])
        with pytest.raises(WorkbookError, match="too few rows"):
            parse_workbook(data)

    def test_first_sheet_is_positional(self, build_workbook, build_tracker):
        """A renamed first sheet still parses as the hour tracker."""
        tracker = build_tracker(["2/1/2025"], {"A. Smith": [1, 1]})
        data = build_workbook([("Sheet1", tracker)])
        result = parse_workbook(data)
        assert result.snapshot.sheet_names == ("Sheet1",)
        assert [m.name for m in result.snapshot.members] == ["A. Smith"]


class TestDegraded:
    def test_missing_optional_sheets(self, build_hours_workbook, build_tracker):
        tracker = build_tracker(["2/1/2025"], {"A. Smith": [2, 1]})
        result = parse_workbook(build_hours_workbook(tracker, sem1="1/1/2025"))
        snapshot = result.snapshot

        assert snapshot.find_member("A. Smith").total_hours == 3
        assert snapshot.officers == ()
        assert snapshot.taxonomy.subjects == ()
        assert snapshot.member_proficiencies == ()
        assert snapshot.study_resources == ()
        assert snapshot.meetings == ()
        messages = [d.message for d in result.diagnostics if d.level == WARNING]
        assert any("3 of 8 sheets" in m for m in messages)
        assert any("Officers sheet not found" in m for m in messages)
        assert not [d for d in result.diagnostics if d.level == ERROR]

    def test_tracker_only(self, build_workbook, build_tracker):
        tracker = build_tracker(["2/1/2025"], {"A. Smith": [2, 1]})
        result = parse_workbook(build_workbook([("HourTracker", tracker)]))
        assert result.snapshot.find_member("A. Smith").total_hours == 0
        assert result.snapshot.site.website_last_updated == "N/A"
        assert [d for d in result.diagnostics if d.level == ERROR]

    def test_unparsable_header_date_skipped(self, build_hours_workbook, build_tracker):
        tracker = build_tracker(["someday", "2/1/2025"], {"A. Smith": [5, 5, 1, 1]})
        result = parse_workbook(build_hours_workbook(tracker, sem1="1/1/2025"))
        assert result.snapshot.members[0].total_hours == 2
        assert any(d.cell == "B2" for d in result.diagnostics)


class TestDecode:
    def test_grids_in_workbook_order(self, full_workbook):
        grids = decode_workbook(full_workbook)
        assert [g.name for g in grids] == SHEET_ORDER
        assert grids[0].text(4, 0) == "A. Smith"

    def test_full_workbook_has_no_errors(self, full_result):
        assert [d for d in full_result.diagnostics if d.level == ERROR] == []

    def test_diagnostics_are_logged(self, full_workbook, caplog):
        with caplog.at_level(logging.WARNING, logger="core.diagnostics"):
            result = parse_workbook(full_workbook)
        records = [r for r in caplog.records if r.name == "core.diagnostics"]
        assert len(records) == len(result.diagnostics)
