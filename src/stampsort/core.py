# Core orchestration logic for stampsort.
# This file coordinates directory listing, ranking and output.
#
# It intentionally contains no CLI parsing and no parsing of names.

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from stampsort.models import Entry, Options
from stampsort.ranking import build_entries, select_latest, sort_entries
from stampsort.traverse import iter_entry_names

EXIT_OK = 0
EXIT_NO_MATCH = 1

# Diagnostics only. Names on stdout go through typer.echo so they are
# printed exactly as they are on disk.
_err = Console(stderr=True)


def _diagnose(message: str) -> None:
    _err.print(message, emoji=False, highlight=False, soft_wrap=True)


def collect_entries(opts: Options) -> List[Entry]:
    names = list(
        iter_entry_names(
            directory=opts.directory,
            include=opts.include,
            exclude=opts.exclude,
            files_only=opts.files_only,
        )
    )

    entries = build_entries(names)

    if opts.verbose:
        for entry in entries:
            _diagnose(
                f"[dim]stampsort: {escape(entry.name)} -> {entry.timestamp.isoformat()}[/dim]"
            )

    return entries


def _list_or_report(opts: Options) -> Optional[List[Entry]]:
    # Listing failures are fatal for the run and are not retried.
    try:
        return collect_entries(opts)
    except OSError as exc:
        _diagnose(
            f"[red]Cannot read directory[/red] {escape(str(opts.directory))}: {escape(str(exc))}"
        )
        return None


def run_latest(opts: Options) -> int:
    # Print the single highest ranked name with no trailing newline.
    entries = _list_or_report(opts)
    if entries is None:
        return EXIT_NO_MATCH

    latest = select_latest(entries)
    if latest is None:
        _diagnose("No files matched.")
        return EXIT_NO_MATCH

    typer.echo(latest.name, nl=False)
    return EXIT_OK


def run_debug(opts: Options) -> int:
    # Print every entry with its timestamp, lowest rank first.
    entries = _list_or_report(opts)
    if entries is None:
        return EXIT_NO_MATCH

    for entry in sort_entries(entries):
        typer.echo(f"date: {entry.timestamp}, name: {entry.name}")

    return EXIT_OK
