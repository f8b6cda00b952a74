"""Theme to ANSI color mapping."""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

from tinygrep.core.schema import Theme

_THEME_COLORS = {
    Theme.blue: "blue",
    Theme.green: "green",
    Theme.purple: "magenta",
}


def theme_color(theme: Theme) -> str:
    """Return the standard-palette color name for a theme."""
    return _THEME_COLORS[theme]


def _render(text: str, theme: Theme, bold: bool) -> str:
    style = Style(color=theme_color(theme), bold=bold)
    return style.render(text, color_system=ColorSystem.STANDARD)


def highlight(text: str, theme: Theme) -> str:
    """Bold + theme color, used for matched query text."""
    return _render(text, theme, bold=True)


def tint(text: str, theme: Theme) -> str:
    """Theme color only, used for line-number prefixes."""
    return _render(text, theme, bold=False)


def heading(text: str, theme: Theme) -> str:
    return _render(text, theme, bold=True)
