"""Line matching and result formatting."""

from __future__ import annotations

from tinygrep.core.schema import SearchOptions
from tinygrep.core.theme import highlight, tint


def match_lines(query: str, content: str, options: SearchOptions) -> list[str]:
    """Return the formatted lines of content that contain query.

    Lines keep their top-to-bottom order. In case-insensitive mode both sides
    are lowercased before comparing, but highlighting still replaces the
    query in its original casing, so a line matched only through a casing
    difference is emitted without highlight.
    """
    results: list[str] = []

    if options.case_sensitive:
        for i, line in enumerate(split_lines(content)):
            if query in line:
                results.append(format_line(i, line, query, options))
    else:
        query_lower = query.lower()
        for i, line in enumerate(split_lines(content)):
            if query_lower in line.lower():
                results.append(format_line(i, line, query, options))

    return results


def format_line(index: int, line: str, query: str, options: SearchOptions) -> str:
    """Format one matched line; index is 0-based, the printed number is 1-based."""
    text = line
    if options.colored:
        text = line.replace(query, highlight(query, options.theme))

    if not options.line_numbered:
        return text

    number = str(index + 1)
    if options.colored:
        number = tint(number, options.theme)
    return f"{number}: {text}"


def split_lines(content: str) -> list[str]:
    """Split on \\n, \\r\\n and \\r only; a final terminator adds no empty line."""
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
