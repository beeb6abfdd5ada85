"""Rich styles for the log table, search highlights and level badges."""

from __future__ import annotations

from rich.style import Style

from logpager.models import LogLevel

HEADER_STYLE = Style(bold=True, color="white", bgcolor="grey37")
SELECTED_ROW_STYLE = Style(reverse=True)
QUICK_SEARCH_STYLE = Style(color="yellow", bold=True)
SEARCH_MATCH_STYLE = Style(color="yellow", bgcolor="blue")

# (background) per level, black text on top.
_LEVEL_COLORS: dict[LogLevel, str] = {
    LogLevel.ERROR: "#f44336",
    LogLevel.INFO: "#4caf50",
    LogLevel.WARNING: "#ffc107",
    LogLevel.DEBUG: "#2196f3",
    LogLevel.VERBOSE: "#9c27b0",
}


def level_style(level: LogLevel | str) -> Style:
    """Badge style for a log level column cell; unknown levels are unstyled."""
    try:
        color = _LEVEL_COLORS[LogLevel(level)]
    except (KeyError, ValueError):
        return Style()
    return Style(color="black", bgcolor=color)
