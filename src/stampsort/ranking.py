# Ranking of directory entries by the timestamp found in their names.
# Entries order by timestamp, then by name; see models.Entry.

from __future__ import annotations

from typing import Iterable, List, Optional

from stampsort.models import Entry
from stampsort.parser import parse_file_name


def build_entries(names: Iterable[str]) -> List[Entry]:
    # Empty names cannot be scanned and are dropped here.
    return [Entry(timestamp=parse_file_name(name), name=name) for name in names if name]


def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    return sorted(entries)


def select_latest(entries: Iterable[Entry]) -> Optional[Entry]:
    """Return the highest ranked entry, or None when there are none.

    Among equal timestamps the greatest name wins.
    """
    return max(entries, default=None)
