# Tolerant date/time scanner for filenames.
# This module is pure logic and must remain side-effect free.
#
# A name is scanned once, left to right. At each position a calendar
# date is tried, then a clock time, then a single filler character is
# skipped. The last date and the last time found win.

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from stampsort.fields import (
    FieldMatch,
    is_separator,
    match_day,
    match_hour,
    match_minute,
    match_month,
    match_second,
    match_year,
)
from stampsort.models import DEFAULT_DATE, DEFAULT_TIME, CalendarDate, ClockTime, Timestamp

FieldMatcher = Callable[[str, int], Optional[FieldMatch]]


@dataclass
class ScanState:
    # Single slots, overwritten on every successful match.
    last_date: Optional[CalendarDate] = None
    last_time: Optional[ClockTime] = None


def _skip_separators(text: str, pos: int) -> int:
    # Greedy; a separator run is never given back.
    while pos < len(text) and is_separator(text[pos]):
        pos += 1
    return pos


def _match_fields(
    text: str, pos: int, fields: Sequence[FieldMatcher]
) -> Optional[Tuple[int, Tuple[int, ...]]]:
    values = []
    for field in fields:
        pos = _skip_separators(text, pos)
        found = field(text, pos)
        if found is None:
            return None
        pos, value = found
        values.append(value)
    return pos, tuple(values)


def match_calendar_date(text: str, pos: int) -> Optional[Tuple[int, CalendarDate]]:
    """Match year, month and day, each optionally preceded by separators.

    Returns (end, date) or None. Nothing is returned for a partial match.
    """
    found = _match_fields(text, pos, (match_year, match_month, match_day))
    if found is None:
        return None
    end, (year, month, day) = found
    return end, CalendarDate(year, month, day)


def match_clock_time(text: str, pos: int) -> Optional[Tuple[int, ClockTime]]:
    """Match hour, minute and second, each optionally preceded by separators."""
    found = _match_fields(text, pos, (match_hour, match_minute, match_second))
    if found is None:
        return None
    end, (hour, minute, second) = found
    return end, ClockTime(hour, minute, second)


def scan(text: str) -> ScanState:
    """Scan a whole name and return the last date and time seen in it.

    Raises ValueError for an empty name. Any other input completes,
    since one character can always be skipped as filler.
    """
    if not text:
        raise ValueError("cannot scan an empty name")

    state = ScanState()
    pos = 0
    while pos < len(text):
        # A date is tried before a time; otherwise skip one character.
        date_found = match_calendar_date(text, pos)
        if date_found is not None:
            pos, state.last_date = date_found
            continue

        time_found = match_clock_time(text, pos)
        if time_found is not None:
            pos, state.last_time = time_found
            continue

        pos += 1

    return state


def synthesize(state: ScanState) -> Timestamp:
    return Timestamp(
        date=state.last_date if state.last_date is not None else DEFAULT_DATE,
        time=state.last_time if state.last_time is not None else DEFAULT_TIME,
    )


def parse_file_name(name: str) -> Timestamp:
    """Return the timestamp embedded in a filename.

    Missing parts default to 2000-01-01 and 00:00:00. There is no
    "no match" result; only an empty name is an error (ValueError).
    """
    return synthesize(scan(name))
