# Command-line interface definition for stampsort.
# This file is responsible only for argument parsing, validation,
# and dispatch into core application logic.
#
# No directory listing or ranking logic should live here.

from __future__ import annotations

from pathlib import Path as FSPath
from typing import List

import typer
from rich.console import Console
from rich.markup import escape

from stampsort import __version__
from stampsort.core import run_debug, run_latest
from stampsort.models import Command, Options

app = typer.Typer(
    add_completion=False,
    help="Pick the most recently dated file in a directory by the date and time in its name.",
)
console = Console()
_err = Console(stderr=True)


def _resolve_command(command: str) -> Command | None:
    try:
        return Command(command)
    except ValueError:
        return None


@app.command(help="Print the latest dated entry (latest) or every entry with its timestamp (debug).")
def main(
    command: str = typer.Argument(
        Command.latest.value,
        help="latest (default) or debug.",
    ),

    # Listing.
    directory: FSPath = typer.Option(
        FSPath("."), "--dir", "-C",
        help="Directory to list. Defaults to the current directory.",
        rich_help_panel="Listing",
    ),
    include: List[str] = typer.Option(
        [], "--include",
        help="Only consider entries matching these patterns.",
        rich_help_panel="Listing",
    ),
    exclude: List[str] = typer.Option(
        [], "--exclude",
        help="Skip entries matching these patterns.",
        rich_help_panel="Listing",
    ),
    files_only: bool = typer.Option(
        False, "--files-only",
        help="Ignore subdirectories and other non-file entries.",
        rich_help_panel="Listing",
    ),

    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Report the timestamp parsed from every name on stderr.",
    ),
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit.",
    ),
):
    # Handle version early and exit cleanly.
    if version:
        console.print(__version__)
        raise typer.Exit(code=0)

    resolved = _resolve_command(command)

    # Unknown commands only print usage; the exit status stays 0.
    if resolved is None:
        _err.print(f'Unknown command "{escape(command)}".', highlight=False)
        _err.print('Try "latest" (default)', highlight=False)
        raise typer.Exit(code=0)

    opts = Options(
        command=resolved,
        directory=directory,

        include=include,
        exclude=exclude,
        files_only=files_only,

        verbose=verbose,
    )

    if opts.command is Command.debug:
        code = run_debug(opts)
    else:
        code = run_latest(opts)

    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
