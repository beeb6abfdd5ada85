"""Bottom status bar."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

_MILLION = 1_000_000
_TEN_THOUSAND = 10_000
_THOUSAND = 1_000


def _format_count(n: int) -> str:
    """Format a count compactly: 1234 -> '1,234', 1234567 -> '1.2M'."""
    if n >= _MILLION:
        return f"{n / _MILLION:.1f}M"
    if n >= _TEN_THOUSAND:
        return f"{n / _THOUSAND:.0f}K"
    return f"{n:,}"


def _search_summary(row_count: int, occurrence_count: int) -> str:
    """Describe search results, e.g. "3 matching rows (5 matches)"."""
    if row_count == 0:
        return "No matches"
    rows = "row" if row_count == 1 else "rows"
    matches = "match" if occurrence_count == 1 else "matches"
    return f"{_format_count(row_count)} matching {rows} ({_format_count(occurrence_count)} {matches})"


class StatusBar(Widget):
    """Bottom status bar showing the selected row, search results and source."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $primary;
        color: $text;
        padding: 0 1;
    }
    """

    def __init__(self, source: str = "", id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self._source = source
        self._selected: int | None = None
        self._total: int = 0
        self._match_count: int | None = None
        self._occurrence_count: int = 0
        self._elapsed_ms: float = 0.0
        self._message: str = ""

    def update_position(self, selected: int | None, total: int) -> None:
        """Update the selected row (0-based, None if nothing selected) and row count."""
        self._selected = selected
        self._total = total
        self.refresh()

    def set_search_info(self, match_count: int, occurrence_count: int, elapsed: float) -> None:
        """Set the number of matching rows and occurrences, and the index build time in seconds."""
        self._match_count = match_count
        self._occurrence_count = occurrence_count
        self._elapsed_ms = elapsed * 1000
        self.refresh()

    def clear_search_info(self) -> None:
        self._match_count = None
        self.refresh()

    def set_message(self, message: str) -> None:
        """Show a one-off message (cleared by the next command)."""
        self._message = message
        self.refresh()

    def render(self) -> Text:
        text = Text()
        row = 0 if self._selected is None else self._selected + 1
        text.append(f"Row {row:,}/{self._total:,}")

        if self._match_count is not None:
            summary = _search_summary(self._match_count, self._occurrence_count)
            text.append(f"  {summary}", style="bold italic" if self._match_count == 0 else "bold")
            text.append(f" in {self._elapsed_ms:.0f}ms", style="italic")

        if self._message:
            text.append(f"  {self._message}")

        right_part = self._source
        if right_part:
            used = len(text.plain)
            padding = max(1, self.size.width - used - len(right_part))
            text.append(" " * padding)
            text.append(right_part)

        return text
