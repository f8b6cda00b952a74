"""Recursive search over a file or directory tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tinygrep.core.matcher import match_lines
from tinygrep.core.schema import SearchOptions, SearchRequest
from tinygrep.core.theme import heading

logger = logging.getLogger(__name__)


class SearchError(Exception):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(SearchError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path {path} does not exist")


class FileReadError(SearchError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"Cannot read {path}: {reason}")


class InvalidPathKindError(SearchError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path {path} is neither a regular file nor a directory")


def search(query: str, path: Path, options: SearchOptions) -> list[str]:
    """Search path for query and return formatted result lines.

    Directories are walked in the order the filesystem lists them. Each child
    with at least one match contributes a blank separator, a heading naming
    the child, then its own lines. The first error aborts the whole walk.
    """
    # lexists so a dangling symlink reports as the wrong kind, not as missing
    if not os.path.lexists(path):
        raise PathNotFoundError(path)

    if path.is_dir():
        return _search_dir(query, path, options)
    if path.is_file():
        return _search_file(query, path, options)
    raise InvalidPathKindError(path)


def _search_dir(query: str, path: Path, options: SearchOptions) -> list[str]:
    logger.debug("Searching directory %s", path)
    try:
        children = list(path.iterdir())
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e

    results: list[str] = []
    for child in children:
        child_results = search(query, child, options)
        if not child_results:
            logger.debug("%s: no matches, skipped", child)
            continue
        title = str(child)
        if options.colored:
            title = heading(title, options.theme)
        results.append("")
        results.append(title)
        results.extend(child_results)
    return results


def _search_file(query: str, path: Path, options: SearchOptions) -> list[str]:
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError(path, "not valid UTF-8 text") from e
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e

    results = match_lines(query, content, options)
    logger.debug("%s: %d matching line(s)", path, len(results))
    return results


def run_search(request: SearchRequest) -> list[str]:
    """Run a search described by a request."""
    return search(request.query, request.path, request.options)
