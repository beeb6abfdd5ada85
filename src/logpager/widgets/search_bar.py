"""One-line quick search bar shown above the status bar."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from logpager.colors import QUICK_SEARCH_STYLE
from logpager.search import SearchMode


class SearchBar(Widget):
    """Shows the query being typed ('/ query') or iterated ('/query')."""

    DEFAULT_CSS = """
    SearchBar {
        height: 1;
        padding: 0 1;
        display: none;
    }
    """

    def __init__(self, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self._mode = SearchMode.OFF
        self._query = ""

    def update_search(self, mode: SearchMode, query: str) -> None:
        self._mode = mode
        self._query = query
        self.display = mode != SearchMode.OFF
        self.refresh()

    def render(self) -> Text:
        if self._mode == SearchMode.INPUT:
            return Text(f"/ {self._query}") + Text("█", style="blink")
        if self._mode == SearchMode.ITERATION:
            return Text(f"/{self._query}", style=QUICK_SEARCH_STYLE)
        return Text()
