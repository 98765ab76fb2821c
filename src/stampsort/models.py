# Shared data models for stampsort.
# Lives in its own module to avoid circular imports between cli, core and parser.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path as FSPath
from typing import List


class Command(str, Enum):
    latest = "latest"
    debug = "debug"


# Dates are plain integers rather than datetime.date: month 00 and
# impossible days such as 02-31 are representable and still sortable.
@dataclass(frozen=True, order=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, order=True)
class ClockTime:
    hour: int
    minute: int
    second: int

    def isoformat(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


DEFAULT_DATE = CalendarDate(2000, 1, 1)
DEFAULT_TIME = ClockTime(0, 0, 0)


# Field order defines the ordering: date first, then time.
@dataclass(frozen=True, order=True)
class Timestamp:
    date: CalendarDate = DEFAULT_DATE
    time: ClockTime = DEFAULT_TIME

    def isoformat(self) -> str:
        return f"{self.date.isoformat()}T{self.time.isoformat()}"

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.time.isoformat()}"


# Field order defines the ranking: timestamp first, then name.
@dataclass(frozen=True, order=True)
class Entry:
    timestamp: Timestamp
    name: str


@dataclass(frozen=True)
class Options:
    command: Command
    directory: FSPath

    include: List[str]
    exclude: List[str]
    files_only: bool

    verbose: bool
