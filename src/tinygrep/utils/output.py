"""Output helpers: raw result lines on stdout, rich error messages on stderr."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

console = Console()
error_console = Console(stderr=True)


def is_piped() -> bool:
    """True when either stdin or stdout is not attached to a terminal."""
    return not (sys.stdin.isatty() and sys.stdout.isatty())


def print_lines(lines: list[str]) -> None:
    """Write result lines as-is, one per line.

    Lines may already carry ANSI escapes, so they bypass rich rendering.
    """
    for line in lines:
        print(line)


def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {escape(msg)}")
