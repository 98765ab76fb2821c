# Unit tests for stampsort.fields.
# These tests pin the exact accept/reject boundaries of each digit field.

from __future__ import annotations

from stampsort.fields import (
    SEPARATORS,
    is_digit,
    is_separator,
    match_day,
    match_hour,
    match_minute,
    match_month,
    match_second,
    match_year,
)


def _two(n: int) -> str:
    return f"{n:02d}"


def test_match_year_accepts_2000_to_2199() -> None:
    for year in range(2000, 2200):
        assert match_year(str(year), 0) == (4, year)


def test_match_year_rejects_out_of_range() -> None:
    for text in ("1990", "1999", "2200", "2500", "3000", "0200"):
        assert match_year(text, 0) is None


def test_match_year_rejects_short_input() -> None:
    assert match_year("202", 0) is None
    assert match_year("", 0) is None
    assert match_year("20x1", 0) is None


def test_match_year_reads_from_offset() -> None:
    assert match_year("ab2019cd", 2) == (6, 2019)


def test_match_month_accepts_00_to_12() -> None:
    for month in range(0, 13):
        assert match_month(_two(month), 0) == (2, month)


def test_match_month_rejects_13_and_above() -> None:
    for month in range(13, 100):
        assert match_month(_two(month), 0) is None


def test_match_day_accepted_values() -> None:
    accepted = [d for d in range(1, 32) if d not in (10, 20)]
    for day in accepted:
        assert match_day(_two(day), 0) == (2, day)


def test_match_day_rejects_00_10_20_and_above_31() -> None:
    for day in [0, 10, 20] + list(range(32, 100)):
        assert match_day(_two(day), 0) is None


def test_match_hour_accepts_exactly_00_to_23() -> None:
    for hour in range(0, 24):
        assert match_hour(_two(hour), 0) == (2, hour)
    for hour in range(24, 100):
        assert match_hour(_two(hour), 0) is None


def test_match_minute_and_second_accept_00_to_59() -> None:
    for value in range(0, 60):
        assert match_minute(_two(value), 0) == (2, value)
        assert match_second(_two(value), 0) == (2, value)
    for value in range(60, 100):
        assert match_minute(_two(value), 0) is None
        assert match_second(_two(value), 0) is None


def test_fields_ignore_non_ascii_digits() -> None:
    # Arabic-Indic digits are digits to str.isdigit but not to the parser.
    assert match_hour("١٢", 0) is None
    assert is_digit("١") is False
    assert is_digit("7") is True


def test_separator_set() -> None:
    for ch in "T-_:., \t":
        assert is_separator(ch)
    for ch in ("t", "/", "x", "0", ""):
        assert not is_separator(ch)
    assert len(SEPARATORS) == 8


def test_fields_reject_non_digit_characters() -> None:
    assert match_day("3a", 0) is None
    assert match_month("1 ", 0) is None
    assert match_hour("-1", 0) is None
    assert match_year("2 19", 0) is None
