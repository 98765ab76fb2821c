# Fixed-width digit recognizers for the fields of a date or time.
# This module is pure logic and must remain side-effect free.
#
# Every validator takes the full text and a start index and returns
# (end, value) on success or None on failure. A failed validator has
# consumed nothing; the caller keeps its own index.

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Only ASCII digits are recognized; other Unicode digits are plain text.
DIGITS = "0123456789"

# Characters that may surround or separate the fields of a date or time.
SEPARATORS = frozenset("T-_:., \t")

# (end index, parsed value)
FieldMatch = Tuple[int, int]


def is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in DIGITS


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def _table(tails: Mapping[str, str]) -> Mapping[str, str]:
    # Map each accepted leading digit to the digits allowed after it.
    return MappingProxyType(dict(tails))


_ANY = _table({d: DIGITS for d in DIGITS})
_CENTURY = _table({"2": "01"})
_MONTH = _table({"0": DIGITS, "1": "012"})
# 10 and 20 are not accepted; 00 is not accepted either.
_DAY = _table({"0": DIGITS[1:], "1": DIGITS[1:], "2": DIGITS[1:], "3": "01"})
_HOUR = _table({"0": DIGITS, "1": DIGITS, "2": "0123"})
_SIXTY = _table({d: DIGITS for d in "012345"})


def _two_digits(text: str, pos: int, tails: Mapping[str, str]) -> Optional[FieldMatch]:
    first = text[pos:pos + 1]
    second = text[pos + 1:pos + 2]
    if not (is_digit(first) and is_digit(second)):
        return None

    allowed = tails.get(first)
    if allowed is None or second not in allowed:
        return None

    return pos + 2, int(first) * 10 + int(second)


def match_year(text: str, pos: int) -> Optional[FieldMatch]:
    """Match a four digit year in the range 2000-2199."""
    century = _two_digits(text, pos, _CENTURY)
    if century is None:
        return None

    found = _two_digits(text, century[0], _ANY)
    if found is None:
        return None

    end, rest = found
    return end, century[1] * 100 + rest


def match_month(text: str, pos: int) -> Optional[FieldMatch]:
    """Match a two digit month, 00-12. 00 is accepted."""
    return _two_digits(text, pos, _MONTH)


def match_day(text: str, pos: int) -> Optional[FieldMatch]:
    """Match a two digit day: 01-09, 11-19, 21-29, 30 or 31."""
    return _two_digits(text, pos, _DAY)


def match_hour(text: str, pos: int) -> Optional[FieldMatch]:
    return _two_digits(text, pos, _HOUR)


def match_minute(text: str, pos: int) -> Optional[FieldMatch]:
    return _two_digits(text, pos, _SIXTY)


# Seconds follow the same rule as minutes (no leap seconds).
match_second = match_minute
