# Directory listing and glob filtering for stampsort.
# This module centralizes all path discovery logic so behavior is
# consistent across platforms.
#
# Only a single directory is listed; there is no recursion.

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Iterator, List


def _matches_any(path: Path, patterns: List[str]) -> bool:
    # Check whether a path matches any of the provided glob patterns.
    # We test both the basename and the full path string to give users
    # flexible matching without platform-specific surprises.
    name = path.name
    full = str(path)

    for pat in patterns:
        if fnmatch.fnmatch(name, pat) or fnmatch.fnmatch(full, pat):
            return True

    return False


def is_decodable(name: str) -> bool:
    # Undecodable bytes in a filename arrive as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def iter_entry_names(
    directory: Path,
    include: List[str],
    exclude: List[str],
    files_only: bool,
) -> Iterator[str]:
    # Yield the names of the entries in one directory.
    # Subdirectories are listed like files unless files_only is set.
    # OSError from an unreadable directory propagates to the caller.
    for p in directory.iterdir():
        if not p.name or not is_decodable(p.name):
            continue
        if files_only and not p.is_file():
            continue
        if exclude and _matches_any(p, exclude):
            continue
        if include and not _matches_any(p, include):
            continue
        yield p.name
