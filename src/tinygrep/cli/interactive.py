"""Interactive prompt flow for tinygrep search --interactive."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from tinygrep.core.schema import SearchRequest, Theme
from tinygrep.utils.output import console as default_console
from tinygrep.utils.output import is_piped


def prompt_request(
    theme: Theme = Theme.blue,
    case_sensitive: bool = False,
    console: Console | None = None,
    prompt_fn: Callable[..., str] | None = None,
    confirm_fn: Callable[..., bool] | None = None,
) -> SearchRequest | None:
    """Ask the user for every search setting and build a request.

    Args:
        theme: Color theme to use; not asked for.
        case_sensitive: Default answer for the case-sensitivity question.
        console: Rich console for output (injectable for tests).
        prompt_fn: Callable matching Prompt.ask signature (injectable for tests).
        confirm_fn: Callable matching Confirm.ask signature (injectable for tests).

    Returns:
        The SearchRequest, or None when stdout is not a terminal.
    """
    console = console or default_console
    prompt_fn = prompt_fn or Prompt.ask
    confirm_fn = confirm_fn or Confirm.ask

    if is_piped():
        console.print("[dim]Non-interactive mode detected, cannot prompt[/dim]")
        return None

    query = prompt_fn("String to search for?", default="Hello world", console=console)

    while True:
        raw_path = prompt_fn("File to search in?", default="text.txt", console=console)
        path = Path(raw_path)
        if path.exists():
            break
        console.print(f"[red]File path {escape(raw_path)} does not exist[/red]", soft_wrap=True)

    case_sensitive = confirm_fn("Case sensitive search?", default=case_sensitive, console=console)
    line_numbered = confirm_fn("Show line number?", default=True, console=console)
    colored = confirm_fn("Use colored output?", default=True, console=console)

    return SearchRequest(
        query=query,
        path=path,
        case_sensitive=case_sensitive,
        line_numbered=line_numbered,
        colored=colored,
        theme=theme,
    )
