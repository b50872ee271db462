import pytest

from timesheet_summary.errors import AmbiguousMatch, MissingSearchName
from timesheet_summary.row_matcher import (
    collapse_ws, find_row, full_name, name_column,
)

HEADER = ["No", "Full Name", "1", "2"]


def test_name_column_by_header():
    assert name_column(HEADER) == 1
    assert name_column(["ลำดับ", "ชื่อ-สกุล", "1"]) == 1
    assert name_column(["id", "NAME"]) == 1


def test_name_column_defaults_to_first():
    assert name_column(["a", "b", "1"]) == 0


def test_collapsed_whitespace_matches():
    rows = [["1", "สมหญิง รักดี"], ["2", "สมชาย   ใจดี"]]
    assert find_row(HEADER, rows, "สมชาย ใจดี") == 2


def test_target_is_normalized_too():
    rows = [["1", "Jane Doe"]]
    assert find_row(HEADER, rows, "  Jane    Doe ") == 1


def test_substring_match():
    rows = [["1", "นาย สมชาย ใจดี"], ["2", "Other"]]
    assert find_row(HEADER, rows, "สมชาย ใจดี") == 1


def test_exact_wins_over_earlier_substring():
    rows = [["1", "สมชาย ใจดีมาก"], ["2", "สมชาย ใจดี"]]
    assert find_row(HEADER, rows, "สมชาย ใจดี") == 2


def test_ambiguous_substring_raises():
    rows = [["1", "Jane Doe A"], ["2", "Other"], ["3", "Jane Doe B"]]
    with pytest.raises(AmbiguousMatch) as exc:
        find_row(HEADER, rows, "Jane Doe")
    assert exc.value.rows == [1, 3]


def test_not_found():
    assert find_row(HEADER, [["1", "Someone"]], "Jane Doe") is None


def test_short_rows_are_skipped():
    rows = [["1"], ["2", "Jane Doe"]]
    assert find_row(HEADER, rows, "Jane Doe") == 2


def test_empty_target_raises():
    with pytest.raises(MissingSearchName):
        find_row(HEADER, [["1", "x"]], "   ")


def test_repeatable():
    rows = [["1", "A B"], ["2", "C D"]]
    assert {find_row(HEADER, rows, "C D") for _ in range(5)} == {2}


def test_helpers():
    assert collapse_ws(" a \t b\n c ") == "a b c"
    assert full_name(" สมชาย ", " ใจดี ") == "สมชาย ใจดี"
    assert full_name("", "") == ""
