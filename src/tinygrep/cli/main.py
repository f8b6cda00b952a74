"""Typer app: the search command."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer

import tinygrep
from tinygrep.cli._shared import setup_logging
from tinygrep.cli.interactive import prompt_request
from tinygrep.core.schema import SearchRequest, Theme
from tinygrep.core.search import SearchError, run_search
from tinygrep.utils.config import case_sensitive_from_env
from tinygrep.utils.output import error, print_lines

app = typer.Typer(
    name="tinygrep",
    help="tinygrep: find lines containing a string in a file or directory tree.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tinygrep {tinygrep.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    pass


@app.command()
def search(
    query: Optional[str] = typer.Argument(None, help="The query string to search for"),
    path: Optional[Path] = typer.Argument(None, help="The file or directory to search in"),
    interactive: bool = typer.Option(False, "--interactive", "-i", help="Interactive mode"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", "-s", help="Case sensitive search"),
    line_number: bool = typer.Option(False, "--line-number", "-n", help="Display line numbers"),
    color: bool = typer.Option(False, "--color", "-c", help="Use colored output"),
    theme: Theme = typer.Option(Theme.blue, "--theme", "-t", help="Color theme"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log search progress to stderr"),
) -> None:
    """Print every line containing QUERY in PATH, recursing into directories."""
    setup_logging(verbose)
    case_sensitive = case_sensitive or case_sensitive_from_env(os.environ)

    if interactive:
        request = prompt_request(theme=theme, case_sensitive=case_sensitive)
        if request is None:
            error("Interactive mode needs a terminal on stdin and stdout")
            raise typer.Exit(1)
    else:
        if query is None or path is None:
            error("Both QUERY and PATH are required unless --interactive is given")
            raise typer.Exit(1)
        if not path.exists():
            error(f"File path {path} does not exist")
            raise typer.Exit(1)
        request = SearchRequest(
            query=query,
            path=path,
            case_sensitive=case_sensitive,
            line_numbered=line_number,
            colored=color,
            theme=theme,
        )

    try:
        lines = run_search(request)
    except SearchError as e:
        error(str(e))
        raise typer.Exit(1)

    print_lines(lines)
