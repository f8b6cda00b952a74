"""Shared CLI setup: debug logging routed to the stderr console."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from tinygrep.utils.output import error_console


def setup_logging(verbose: bool) -> None:
    """Send core debug logs to stderr through rich when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
    )
