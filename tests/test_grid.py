"""Tests for A1 references, the sheet grid and cell normalizers."""

import math

import pytest

from core.grid import SheetGrid, decode_cell, decode_col, encode_cell, encode_col
from core.normalize import normalize_hex, parse_hours, slugify, split_list


class TestCellReferences:
    def test_decode_simple(self):
        assert decode_cell("A1") == (0, 0)
        assert decode_cell("q5") == (4, 16)

    def test_decode_absolute_and_multi_letter(self):
        assert decode_cell("$AB$12") == (11, 27)
        assert decode_col("AA") == 26

    @pytest.mark.parametrize("ref", ["Q", "12", "A0", "A1:B2", "", "1A"])
    def test_decode_rejects_bad_refs(self, ref):
        with pytest.raises(ValueError):
            decode_cell(ref)

    def test_encode_matches_decode(self):
        assert encode_cell(4, 16) == "Q5"
        assert encode_col(27) == "AB"
        assert decode_cell(encode_cell(99, 701)) == (99, 701)


class TestSheetGrid:
    def test_blanks_become_none(self):
        grid = SheetGrid("s", [["", math.nan, "  ", "x"]])
        assert grid.value(0, 0) is None
        assert grid.value(0, 1) is None
        assert grid.value(0, 2) is None
        assert grid.value(0, 3) == "x"

    def test_out_of_range_reads(self):
        grid = SheetGrid("s", [[1], [2, 3]])
        assert grid.value(5, 0) is None
        assert grid.value(0, 4) is None
        assert grid.value(-1, 0) is None
        assert grid.row_len(1) == 2
        assert grid.row_len(9) == 0
        assert grid.n_rows == 2
        assert grid.n_cols == 2

    def test_text_of_whole_float(self):
        grid = SheetGrid("s", [[3.0, 2.5, "  Algebra 1 "]])
        assert grid.text(0, 0) == "3"
        assert grid.text(0, 1) == "2.5"
        assert grid.text(0, 2) == "Algebra 1"
        assert grid.optional_text(0, 5) is None


class TestNormalizers:
    def test_slugify(self):
        assert slugify("Social Studies") == "social-studies"
        assert slugify("  AP Calc (BC) ") == "ap-calc-bc"

    @pytest.mark.parametrize(
        "raw,expected",
        [("1d4ed8", "#1D4ED8"), ("#abc", "#ABC"), (" #FF0000 ", "#FF0000"), ("zzz", None), ("#12345", None), ("", None)],
    )
    def test_normalize_hex(self, raw, expected):
        assert normalize_hex(raw) == expected

    def test_parse_hours(self):
        assert parse_hours(None) == 0.0
        assert parse_hours("") == 0.0
        assert parse_hours(3) == 3.0
        assert parse_hours("2.5 hrs") == 2.5
        assert parse_hours("abc") is None
        assert parse_hours(True) is None
        assert parse_hours(math.nan) is None

    def test_split_list(self):
        assert split_list("Math, , History ,") == ["Math", "History"]
        assert split_list(None) == []
