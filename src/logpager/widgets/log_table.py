"""Log table widget: draws the pager's visible rows and forwards keys as commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from textual.binding import Binding, BindingType
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from logpager.colors import HEADER_STYLE, SELECTED_ROW_STYLE
from logpager.models import MESSAGE_COLUMN
from logpager.pager import Command, Pager
from logpager.widgets.log_row import COLUMN_SPACING, render_header, render_row, render_wrapped_row

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.style import Style
    from textual import events

    from logpager.models import LogEntry


class LogTable(Widget, can_focus=True):
    """Virtualized log table using the Line API; only visible rows are rendered."""

    DEFAULT_CSS = """
    LogTable {
        height: 1fr;
        border: round $primary;
        background: $surface;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("up", "command('previous')", "Up", show=False),
        Binding("down", "command('next')", "Down", show=False),
        Binding("pageup", "command('page_previous')", "Page Up", show=False),
        Binding("pagedown", "command('page_next')", "Page Down", show=False),
        Binding("home", "command('jump_top')", "Top", show=False),
        Binding("end", "command('jump_bottom')", "Bottom", show=False),
        Binding("left", "command('scroll_left')", "Left", show=False),
        Binding("right", "command('scroll_right')", "Right", show=False),
        Binding("enter", "command('toggle_wrap')", "Wrap"),
        Binding("slash", "command('start_search')", "Search"),
        Binding("n", "command('jump_next_match')", "Next", show=False),
        Binding("N", "command('jump_previous_match')", "Prev", show=False),
        Binding("escape", "command('cancel')", "Close search", show=False),
        Binding("y", "copy_line", "Copy line", show=False),
        Binding("Y", "copy_message", "Copy message", show=False),
    ]

    class Changed(Message):
        """Posted after every command so the app can update its bars."""

        def __init__(self, message: str = "") -> None:
            super().__init__()
            self.message = message

    def __init__(
        self,
        entries: Sequence[LogEntry] | None = None,
        *,
        tag_width: int | None = 18,
        title: str = "",
        **kwargs: Any,  # noqa: ANN401
    ) -> None:
        super().__init__(**kwargs)
        self._entries: Sequence[LogEntry] = entries or []
        self.pager = Pager.from_entries(self._entries)
        self._widths = self.pager.column_widths(tag_width)
        # (row index, line within row) for every table line below the header
        self._frame: list[tuple[int, int]] = []
        self._wrapped_strips: dict[int, list[Strip]] = {}
        self.border_title = title

    @property
    def entries(self) -> Sequence[LogEntry]:
        return self._entries

    def _available_message_width(self) -> int:
        leading = sum(w + COLUMN_SPACING for w in self._widths[self.pager.column_offset : MESSAGE_COLUMN])
        return max(1, self.content_size.width - leading)

    def _sync_layout(self) -> None:
        # One line of the content region is taken by the header.
        self.pager.resize(max(1, self.content_size.height - 1), self._available_message_width())
        self._rebuild_frame()

    def _rebuild_frame(self) -> None:
        """Recompute visible row heights and the table line to row mapping."""
        self._wrapped_strips = {}
        self._frame = [(index, sub) for index, height in self.pager.visible_rows() for sub in range(height)]

    def on_mount(self) -> None:
        self._sync_layout()

    def on_resize(self, _event: events.Resize) -> None:
        self._sync_layout()
        self.refresh()

    # --- Input ---

    def on_key(self, event: events.Key) -> None:
        """While a query is typed, keys edit it instead of triggering bindings."""
        if not self.pager.search.is_typing:
            return
        event.prevent_default()
        event.stop()
        if event.key == "escape":
            self.run_command(Command.CANCEL)
        elif event.key == "enter":
            self.run_command(Command.COMMIT)
        elif event.key == "backspace":
            self.run_command(Command.BACKSPACE)
        elif event.is_printable and event.character:
            self.run_command(Command.APPEND_CHAR, event.character)

    def run_command(self, command: Command, char: str | None = None, *, message: str = "") -> None:
        """Apply a command to the pager and redraw."""
        self.pager.handle(command, char)
        if command in {Command.SCROLL_LEFT, Command.SCROLL_RIGHT}:
            self._sync_layout()
        else:
            self._rebuild_frame()
        self.refresh()
        self.post_message(self.Changed(message))

    def action_command(self, name: str) -> None:
        self.run_command(Command(name))

    def action_copy_line(self) -> None:
        selected = self.pager.selected
        if selected is None:
            return
        self.app.copy_to_clipboard(str(self._entries[selected]))
        self.post_message(self.Changed(f"Copied the line {selected + 1} to clipboard"))

    def action_copy_message(self) -> None:
        selected = self.pager.selected
        if selected is None:
            return
        self.app.copy_to_clipboard(self._entries[selected].message)
        self.post_message(self.Changed(f"Copied the message from the line {selected + 1} to clipboard"))

    # --- Rendering ---

    def _row_strips(self, index: int) -> list[Strip]:
        """Strips of a wrapped row, cached for the current frame."""
        if index not in self._wrapped_strips:
            self._wrapped_strips[index] = render_wrapped_row(
                self.pager.rows[index],
                self.pager.wrapped_message(index),
                self._widths,
                self.pager.column_offset,
                self.pager.message_width,
                self.pager.highlights(index),
                self._row_style(index),
            )
        return self._wrapped_strips[index]

    def _row_style(self, index: int) -> Style | None:
        return SELECTED_ROW_STYLE if index == self.pager.selected else None

    def render_line(self, y: int) -> Strip:
        width = self.content_size.width
        if y == 0:
            header = render_header(self._widths, self.pager.column_offset, self.pager.message_width)
            return header.crop(0, width).extend_cell_length(width, HEADER_STYLE)

        line = y - 1
        if line >= len(self._frame):
            return Strip.blank(width, self.rich_style)

        index, sub_row = self._frame[line]
        row_style = self._row_style(index)
        if self.pager.is_expanded(index):
            strips = self._row_strips(index)
            strip = strips[sub_row] if sub_row < len(strips) else Strip.blank(width, self.rich_style)
        else:
            strip = render_row(
                self.pager.rows[index],
                self._widths,
                self.pager.column_offset,
                self.pager.message_width,
                self.pager.highlights(index),
                row_style,
            )
        return strip.crop(0, width).extend_cell_length(width, row_style or self.rich_style)
