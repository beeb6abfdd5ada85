"""Virtual scrolling over rows whose rendered height can change."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


def _single_line(_index: int) -> int:
    return 1


class Viewport:
    """Scroll position, selection and row heights for a fixed-height window.

    Rows are one line tall unless they are wrapped, in which case the height comes
    from the row_height callback. Heights are only measured for rows inside the
    window and for the last window's worth of rows, so the cost of every operation
    is bounded by the window height rather than the number of rows.

    visible_height_budget is the number of rows that fit in the window starting at
    vertical_offset. Every expanded row in the window takes (height - 1) rows away
    from it and a collapsing row gives them back.
    """

    def __init__(self, row_count: int, height: int, row_height: Callable[[int], int] | None = None) -> None:
        self._row_count = max(0, row_count)
        self._height = max(1, height)
        self._row_height = row_height or _single_line
        self._wrapped: set[int] = set()
        self._overrides: dict[int, int] = {}
        # wrapped row -> (offset before, offset after) when expanding it scrolled the window
        self._expand_scroll: dict[int, tuple[int, int]] = {}
        self.vertical_offset: int = 0
        self.selected_relative: int = 0
        self.visible_height_budget: int = 0
        self.refresh()

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def height(self) -> int:
        return self._height

    @property
    def selected(self) -> int | None:
        """Absolute index of the selected row, or None for an empty corpus."""
        if self._row_count == 0:
            return None
        return self.vertical_offset + self.selected_relative

    @property
    def visible_range(self) -> range:
        return range(self.vertical_offset, self.vertical_offset + self.visible_height_budget)

    @property
    def overrides(self) -> Mapping[int, int]:
        """Rows currently taller than one line (index -> height)."""
        return MappingProxyType(self._overrides)

    def rows(self) -> list[tuple[int, int]]:
        """Visible rows as (index, height) pairs."""
        return [(i, self.height_of(i)) for i in self.visible_range]

    def height_of(self, index: int) -> int:
        return self._overrides.get(index, 1)

    def is_wrapped(self, index: int) -> bool:
        return index in self._wrapped

    # --- Height bookkeeping ---

    def _measure(self, index: int) -> int:
        """Recompute a row's height and update its override."""
        if index not in self._wrapped:
            return 1
        height = max(1, self._row_height(index))
        if height > 1:
            self._overrides[index] = height
        else:
            self._overrides.pop(index, None)
        return height

    def _fit(self, offset: int) -> int:
        """Number of rows starting at offset that fit the window (at least one if any exist)."""
        count = 0
        used = 0
        for index in range(offset, self._row_count):
            height = self._measure(index)
            if count and used + height > self._height:
                break
            used += height
            count += 1
            if used >= self._height:
                break
        return count

    def _bottom_offset(self) -> int:
        """Smallest offset whose rows up to the last one still fit the window."""
        offset = self._row_count - 1
        used = self._measure(offset)
        while offset > 0:
            height = self._measure(offset - 1)
            if used + height > self._height:
                break
            used += height
            offset -= 1
        return offset

    def refresh(self) -> None:
        """Recompute heights of the visible rows and the height budget.

        Called once per frame and after every change that can move rows in or out
        of the window. Scrolls down if the selected row no longer fits and back up
        if the window would leave free lines below the last row.
        """
        if self._row_count == 0:
            self.vertical_offset = 0
            self.selected_relative = 0
            self.visible_height_budget = 0
            return
        offset = min(max(0, self.vertical_offset), self._row_count - 1)
        selected = min(offset + max(0, self.selected_relative), self._row_count - 1)
        self.vertical_offset = min(offset, self._bottom_offset())
        self.selected_relative = selected - self.vertical_offset
        self.visible_height_budget = self._fit(self.vertical_offset)
        while self.selected_relative >= self.visible_height_budget:
            self.vertical_offset += 1
            self.selected_relative -= 1
            self.visible_height_budget = self._fit(self.vertical_offset)

    def resize(self, height: int) -> None:
        self._height = max(1, height)
        self.refresh()

    def invalidate(self) -> None:
        """Forget cached heights, e.g. after the available width changed."""
        self._overrides.clear()
        self.refresh()

    # --- Navigation ---

    def select_next(self) -> None:
        selected = self.selected
        if selected is None or selected >= self._row_count - 1:
            return
        if self.selected_relative + 1 < self.visible_height_budget:
            self.selected_relative += 1
        else:
            # The top row scrolls out and frees its lines for the row coming in.
            self.vertical_offset += 1
            self.refresh()

    def select_previous(self) -> None:
        if self.selected is None:
            return
        if self.selected_relative > 0:
            self.selected_relative -= 1
        elif self.vertical_offset > 0:
            self.vertical_offset -= 1
            self.refresh()

    def page_down(self) -> None:
        for _ in range(max(1, self.visible_height_budget)):
            self.select_next()

    def page_up(self) -> None:
        for _ in range(max(1, self.visible_height_budget)):
            self.select_previous()

    def jump_to_top(self) -> None:
        self.vertical_offset = 0
        self.selected_relative = 0
        self.refresh()

    def jump_to_bottom(self) -> None:
        if self._row_count == 0:
            return
        offset = self._bottom_offset()
        self.vertical_offset = offset
        self.selected_relative = self._row_count - 1 - offset
        self.refresh()

    def select(self, index: int) -> None:
        """Select a row by absolute index.

        A row already in the window only moves the selection; any other row becomes
        the new top row of the window, unless that would leave free lines below the
        last row.
        """
        if self._row_count == 0:
            return
        index = min(max(0, index), self._row_count - 1)
        if index in self.visible_range:
            self.selected_relative = index - self.vertical_offset
            return
        self.vertical_offset = index
        self.selected_relative = 0
        self.refresh()

    def toggle_wrap(self, index: int) -> bool:
        """Flip a row between one line and its wrapped height. Returns the new state.

        Collapsing a row right after expanding it scrolls back to where the window
        was before the expansion pushed it down.
        """
        if not 0 <= index < self._row_count:
            return False
        if index in self._wrapped:
            self._wrapped.discard(index)
            self._overrides.pop(index, None)
            scroll = self._expand_scroll.pop(index, None)
            if scroll is not None and scroll[1] == self.vertical_offset:
                selected = self.vertical_offset + self.selected_relative
                self.vertical_offset = scroll[0]
                self.selected_relative = selected - scroll[0]
            self.refresh()
            return False
        self._wrapped.add(index)
        self._measure(index)
        before = self.vertical_offset
        self.refresh()
        if self.vertical_offset != before:
            self._expand_scroll[index] = (before, self.vertical_offset)
        return True
