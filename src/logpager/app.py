"""Textual application for logpager."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.widgets import Footer

from logpager.config import load_config, save_config
from logpager.widgets.help_screen import HelpScreen
from logpager.widgets.log_table import LogTable
from logpager.widgets.search_bar import SearchBar
from logpager.widgets.status_bar import StatusBar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logpager.models import AppConfig, LogEntry

_DARK_THEME = "textual-dark"
_LIGHT_THEME = "textual-light"


class LogPagerApp(App[None]):
    """Log viewer TUI application."""

    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("h", "show_help", "Help"),
        Binding("t", "toggle_theme", "Theme", show=False),
    ]

    def __init__(
        self,
        entries: Sequence[LogEntry] | None = None,
        source: str = "",
        config: AppConfig | None = None,
    ) -> None:
        super().__init__()
        self._entries = entries or []
        self._source = source
        self._config = config or load_config()
        self.theme = self._config.theme

    def compose(self) -> ComposeResult:
        yield LogTable(self._entries, tag_width=self._config.tag_width, title=self._source, id="log-table")
        yield SearchBar(id="search-bar")
        yield StatusBar(source=self._source, id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#log-table", LogTable).focus()
        self._update_bars()

    def on_log_table_changed(self, event: LogTable.Changed) -> None:
        self._update_bars(event.message)

    def _update_bars(self, message: str = "") -> None:
        log_table = self.query_one("#log-table", LogTable)
        search_bar = self.query_one("#search-bar", SearchBar)
        status_bar = self.query_one("#status-bar", StatusBar)
        pager = log_table.pager

        selected, total = pager.position
        status_bar.update_position(selected, total)
        search_bar.update_search(pager.search.mode, pager.search.query)
        if pager.search.is_iterating:
            status_bar.set_search_info(pager.search.match_count, pager.search.occurrence_count, pager.search.elapsed)
        else:
            status_bar.clear_search_info()
        status_bar.set_message(message)

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())

    def action_toggle_theme(self) -> None:
        """Switch between the dark and light theme and remember the choice."""
        self.theme = _LIGHT_THEME if self.theme == _DARK_THEME else _DARK_THEME
        self._config.theme = self.theme
        save_config(self._config)
