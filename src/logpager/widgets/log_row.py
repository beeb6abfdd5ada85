"""Rendering of single log table rows (compact and wrapped) into strips."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.segment import Segment
from rich.style import Style
from textual.strip import Strip

from logpager.colors import HEADER_STYLE, SEARCH_MATCH_STYLE, level_style
from logpager.models import COLUMN_HEADERS, MESSAGE_COLUMN

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logpager.pager import DisplayRow

_LEVEL_COLUMN = 3
COLUMN_SPACING = 1


def split_with_highlights(
    text: str,
    positions: Sequence[tuple[int, int]],
    normal_style: Style,
    highlight_style: Style = SEARCH_MATCH_STYLE,
) -> list[Segment]:
    """Split text into segments, highlighting the given [start, end) ranges.

    Ranges are clipped to the text; overlapping or out-of-order ranges are tolerated.
    """
    segments: list[Segment] = []
    pos = 0
    for start, end in sorted(positions):
        start = max(start, pos)
        end = min(end, len(text))
        if start >= end:
            continue
        if start > pos:
            segments.append(Segment(text[pos:start], normal_style))
        segments.append(Segment(text[start:end], normal_style + highlight_style))
        pos = end
    if pos < len(text) or not segments:
        segments.append(Segment(text[pos:], normal_style))
    return segments


def _cell(segments: list[Segment], width: int, style: Style) -> Strip:
    """Crop or pad cell content to exactly width cells."""
    return Strip(segments).crop(0, width).extend_cell_length(width, style)


def _join_cells(cells: list[Strip], style: Style) -> Strip:
    spaced: list[Strip] = []
    for i, cell in enumerate(cells):
        if i:
            spaced.append(Strip([Segment(" " * COLUMN_SPACING, style)]))
        spaced.append(cell)
    return Strip.join(spaced)


def _cell_style(column: int, text: str, row_style: Style) -> Style:
    if column == _LEVEL_COLUMN:
        return row_style + level_style(text)
    return row_style


def _spans_for(column: int, spans: Sequence[tuple[int, int, int]]) -> list[tuple[int, int]]:
    return [(start, end) for col, start, end in spans if col == column]


def render_header(widths: Sequence[int], column_offset: int, message_width: int) -> Strip:
    """Render the column header line."""
    cells: list[Strip] = []
    for column in range(column_offset, len(COLUMN_HEADERS)):
        width = message_width if column == MESSAGE_COLUMN else widths[column]
        cells.append(_cell([Segment(COLUMN_HEADERS[column], HEADER_STYLE)], width, HEADER_STYLE))
    return _join_cells(cells, HEADER_STYLE)


def render_row(  # noqa: PLR0913
    row: DisplayRow,
    widths: Sequence[int],
    column_offset: int,
    message_width: int,
    spans: Sequence[tuple[int, int, int]] = (),
    row_style: Style | None = None,
) -> Strip:
    """Render a row on a single line, highlighting search matches in every cell."""
    base = row_style or Style()
    cells: list[Strip] = []
    for column in range(column_offset, len(row.texts)):
        text = row.texts[column]
        width = message_width if column == MESSAGE_COLUMN else widths[column]
        style = _cell_style(column, text, base)
        cells.append(_cell(split_with_highlights(text, _spans_for(column, spans), style), width, style))
    return _join_cells(cells, base)


def render_wrapped_row(  # noqa: PLR0913
    row: DisplayRow,
    message_lines: Sequence[str],
    widths: Sequence[int],
    column_offset: int,
    message_width: int,
    spans: Sequence[tuple[int, int, int]] = (),
    row_style: Style | None = None,
) -> list[Strip]:
    """Render a row over several lines with its message word-wrapped.

    The leading columns are drawn on the first line only; message highlights are
    mapped onto the wrapped lines they fall in.
    """
    base = row_style or Style()
    leading = [
        _cell(
            [Segment(row.texts[column], _cell_style(column, row.texts[column], base))],
            widths[column],
            _cell_style(column, row.texts[column], base),
        )
        for column in range(column_offset, MESSAGE_COLUMN)
    ]
    leading_width = sum(widths[column] + COLUMN_SPACING for column in range(column_offset, MESSAGE_COLUMN))
    message_spans = _spans_for(MESSAGE_COLUMN, spans)

    strips: list[Strip] = []
    offset = 0
    for i, line in enumerate(message_lines):
        line_spans = [(start - offset, end - offset) for start, end in message_spans]
        message = _cell(split_with_highlights(line, line_spans, base), message_width, base)
        if i == 0:
            strips.append(_join_cells([*leading, message], base))
        else:
            indent = Strip([Segment(" " * leading_width, base)])
            strips.append(Strip.join([indent, message]))
        offset += len(line)
    return strips
