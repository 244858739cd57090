from autoeye.processing.intervals import parse_intervals
from autoeye.processing.tabular import parse_number

from conftest import ias_row


def test_header_and_short_rows_are_dropped(ias_text):
    intervals = parse_intervals(ias_text)

    assert [iv.label for iv in intervals] == [
        "autolabel_1a",
        "autolabel_1b",
        "autolabel_1b_2",
        "question_1",
        "autolabel_2",
    ]
    # order counts valid rows only
    assert [iv.order for iv in intervals] == [0, 1, 2, 3, 4]


def test_signs_are_discarded(ias_text):
    first = parse_intervals(ias_text)[0]
    assert first.start == 100.0
    assert first.end == 500.0
    assert first.duration == 400.0


def test_first_line_without_comment_is_data():
    text = "\n".join([ias_row(1, 2, "a"), ias_row(3, 4, "b")])
    assert [iv.label for iv in parse_intervals(text)] == ["a", "b"]


def test_label_is_trimmed_and_case_preserved():
    text = ias_row(1, 2, "  Autolabel_3A \r")
    assert parse_intervals(text)[0].label == "Autolabel_3A"


def test_non_numeric_bounds_skip_row():
    text = "\n".join([ias_row("abc", 2, "a"), ias_row(3, 4, "b")])
    intervals = parse_intervals(text)
    assert [iv.label for iv in intervals] == ["b"]
    assert intervals[0].order == 0


def test_empty_input():
    assert parse_intervals("") == []
    assert parse_intervals("\n  \n") == []


def test_parse_number_reads_leading_number():
    assert parse_number("12.5") == 12.5
    assert parse_number(" -3 ") == -3.0
    assert parse_number("12.5 ms") == 12.5
    assert parse_number(".") is None
    assert parse_number("NaN") is None
    assert parse_number("") is None
    assert parse_number(None) is None
