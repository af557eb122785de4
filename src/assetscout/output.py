"""Output formatting for assetscout operations."""

import json
from typing import Protocol

import typer

from assetscout.models import Entries


class Reporter(Protocol):
    """Sink for non-fatal messages raised during discovery."""

    def warn(self, message: str) -> None: ...


class ConsoleReporter:
    """Reporter that prints warnings to stderr."""

    def warn(self, message: str) -> None:
        typer.secho(f"⚠ {message}", fg=typer.colors.YELLOW, err=True)


def print_entries(entries: Entries, compact: bool = False) -> None:
    """Print an entry mapping as JSON to stdout.

    Args:
        entries: Entry mapping to print
        compact: If True, print on a single line
    """
    indent = None if compact else 2
    typer.echo(json.dumps(entries, indent=indent, sort_keys=True))


def print_summary(entries: Entries) -> None:
    """Print a one-line summary of an entry mapping to stderr."""
    num_chunks = len(entries)
    num_files = sum(len(paths) for paths in entries.values())
    typer.secho(
        f"✓ Found {num_files} file{'s' if num_files != 1 else ''} "
        f"in {num_chunks} chunk{'s' if num_chunks != 1 else ''}",
        fg=typer.colors.GREEN,
        bold=True,
        err=True,
    )
