"""Input handling core: turns discrete commands into search and viewport updates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from rich.cells import cell_len

from logpager.models import COLUMN_COUNT, MESSAGE_COLUMN
from logpager.search import QuickSearch
from logpager.text_utils import wrap_text
from logpager.viewport import Viewport

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logpager.models import LogEntry


class Command(StrEnum):
    """Commands accepted by Pager.handle()."""

    NEXT = "next"
    PREVIOUS = "previous"
    PAGE_NEXT = "page_next"
    PAGE_PREVIOUS = "page_previous"
    JUMP_TOP = "jump_top"
    JUMP_BOTTOM = "jump_bottom"
    TOGGLE_WRAP = "toggle_wrap"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"
    START_SEARCH = "start_search"
    APPEND_CHAR = "append_char"
    BACKSPACE = "backspace"
    COMMIT = "commit"
    CANCEL = "cancel"
    JUMP_NEXT_MATCH = "jump_next_match"
    JUMP_PREVIOUS_MATCH = "jump_previous_match"


@dataclass(slots=True)
class DisplayRow:
    """Column texts of one row and their display widths in cells."""

    texts: tuple[str, ...]
    widths: tuple[int, ...]

    @classmethod
    def from_columns(cls, texts: Sequence[str]) -> DisplayRow:
        return cls(tuple(texts), tuple(cell_len(t) for t in texts))

    @property
    def message(self) -> str:
        return self.texts[MESSAGE_COLUMN]

    @property
    def message_width(self) -> int:
        return self.widths[MESSAGE_COLUMN]


def wrapped_height(row: DisplayRow, available_width: int) -> int:
    """Lines a wrapped row occupies: the wrapped message line count if it overflows, else 1."""
    if row.message_width <= available_width:
        return 1
    return len(wrap_text(row.message, available_width))


class Pager:
    """Owns the corpus rows, the quick search and the viewport for one session."""

    def __init__(self, rows: Sequence[Sequence[str]], height: int = 1, message_width: int = 80) -> None:
        self._rows = [DisplayRow.from_columns(r) for r in rows]
        self._texts = [r.texts for r in self._rows]
        self._message_width = max(1, message_width)
        self.column_offset = 0
        self.search = QuickSearch()
        self.viewport = Viewport(len(self._rows), height, self._wrapped_height)

    @classmethod
    def from_entries(cls, entries: Sequence[LogEntry], height: int = 1, message_width: int = 80) -> Pager:
        return cls([e.columns for e in entries], height, message_width)

    def _wrapped_height(self, index: int) -> int:
        return wrapped_height(self._rows[index], self._message_width)

    # --- Queries for the rendering layer ---

    @property
    def rows(self) -> list[DisplayRow]:
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def selected(self) -> int | None:
        return self.viewport.selected

    @property
    def position(self) -> tuple[int | None, int]:
        """(selected absolute index, total row count) for the status display."""
        return self.viewport.selected, len(self._rows)

    @property
    def message_width(self) -> int:
        return self._message_width

    def column_widths(self, tag_width: int | None = None) -> list[int]:
        """Widest cell of every column over the whole corpus, with an optional fixed tag width."""
        widths = [0] * COLUMN_COUNT
        for row in self._rows:
            widths = [max(a, b) for a, b in zip(widths, row.widths, strict=True)]
        if tag_width is not None:
            widths[MESSAGE_COLUMN - 1] = tag_width
        return widths

    def visible_rows(self) -> list[tuple[int, int]]:
        """Visible rows as (index, height) after recomputing their heights."""
        self.viewport.refresh()
        return self.viewport.rows()

    def highlights(self, index: int) -> list[tuple[int, int, int]]:
        return self.search.highlights(index)

    def is_expanded(self, index: int) -> bool:
        """Whether a row is drawn wrapped over more than one line."""
        return self.viewport.height_of(index) > 1

    def wrapped_message(self, index: int) -> list[str]:
        return wrap_text(self._rows[index].message, self._message_width)

    # --- Layout changes ---

    def resize(self, height: int, message_width: int) -> None:
        message_width = max(1, message_width)
        if message_width != self._message_width:
            self._message_width = message_width
            self.viewport.invalidate()
        self.viewport.resize(height)

    # --- Commands ---

    def handle(self, command: Command, char: str | None = None) -> None:  # noqa: C901, PLR0912
        """Apply one command from the input layer."""
        if command == Command.NEXT:
            self.viewport.select_next()
        elif command == Command.PREVIOUS:
            self.viewport.select_previous()
        elif command == Command.PAGE_NEXT:
            self.viewport.page_down()
        elif command == Command.PAGE_PREVIOUS:
            self.viewport.page_up()
        elif command == Command.JUMP_TOP:
            self.viewport.jump_to_top()
        elif command == Command.JUMP_BOTTOM:
            self.viewport.jump_to_bottom()
        elif command == Command.TOGGLE_WRAP:
            self.toggle_wrap()
        elif command == Command.SCROLL_LEFT:
            self.column_offset = max(0, self.column_offset - 1)
        elif command == Command.SCROLL_RIGHT:
            self.column_offset = min(MESSAGE_COLUMN, self.column_offset + 1)
        elif command == Command.START_SEARCH:
            self.search.start()
        elif command == Command.APPEND_CHAR:
            if char:
                self.search.append_char(char)
        elif command == Command.BACKSPACE:
            self.search.backspace()
        elif command == Command.COMMIT:
            self.commit_search()
        elif command == Command.CANCEL:
            self.search.cancel()
        elif command == Command.JUMP_NEXT_MATCH:
            self.jump_next_match()
        elif command == Command.JUMP_PREVIOUS_MATCH:
            self.jump_previous_match()

    def toggle_wrap(self, index: int | None = None) -> bool:
        """Toggle wrapping of a row (the selected one by default)."""
        target = self.viewport.selected if index is None else index
        if target is None:
            return False
        return self.viewport.toggle_wrap(target)

    def commit_search(self) -> None:
        """Commit the typed query and place the selection on the nearest match."""
        results = self.search.commit(self._texts)
        selected = self.viewport.selected
        if results is None or selected is None:
            return
        line = results.nearest(selected)
        if line is not None:
            self.viewport.select(line.index)

    def jump_next_match(self) -> None:
        selected = self.viewport.selected
        if not self.search.is_iterating or selected is None:
            return
        line = self.search.results.next(selected)
        if line is not None:
            self.viewport.select(line.index)

    def jump_previous_match(self) -> None:
        selected = self.viewport.selected
        if not self.search.is_iterating or selected is None:
            return
        line = self.search.results.previous(selected)
        if line is not None:
            self.viewport.select(line.index)
