"""Word-boundary text wrapping for expanded log messages."""

from __future__ import annotations

import re
from itertools import pairwise
from typing import TYPE_CHECKING

from rich.cells import cell_len

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

# Word segments: words (dotted names, decimal numbers and digit groups stay whole),
# runs of horizontal whitespace, CRLF, or any other single character.
_WORD_SEGMENT_RE = re.compile(
    r"\w+(?:[.:'’]\w+|(?<=\d)[,;]\d+)*|[^\S\r\n]+|\r\n|.",
    re.DOTALL,
)


def word_bound_indices(text: str) -> Iterator[int]:
    """Yield the start offset of every word-boundary segment in text."""
    for m in _WORD_SEGMENT_RE.finditer(text):
        yield m.start()


def _boundaries(text: str) -> Iterator[tuple[int, int]]:
    """Yield (offset, cell column) for each segment start plus the end of the text."""
    starts = [*word_bound_indices(text), len(text)]
    column = 0
    for start, end in pairwise(starts):
        yield start, column
        column += cell_len(text[start:end])
    yield len(text), column


def wrap_indices(text: str, max_width: int) -> list[int]:
    """Compute the offsets at which text should be split to fit max_width cells.

    Boundaries are scanned in increasing order against a running threshold. When a
    boundary lies beyond the threshold the text is split at the previous boundary and
    the threshold moves max_width cells past that split. A segment wider than
    max_width on its own is never broken.
    """
    max_width = max(1, max_width)
    indices: list[int] = []
    line_start = 0
    threshold = max_width
    previous: tuple[int, int] | None = None

    for offset, column in _boundaries(text):
        if column > threshold and previous is not None and previous[0] > line_start:
            line_start, split_column = previous
            indices.append(line_start)
            threshold = split_column + max_width
        previous = (offset, column)

    return indices


def split_at_indices(text: str, indices: Sequence[int]) -> list[str]:
    """Split text at the given ascending offsets."""
    parts: list[str] = []
    start = 0
    for index in indices:
        parts.append(text[start:index])
        start = index
    parts.append(text[start:])
    return parts


def wrap_text(text: str, max_width: int) -> list[str]:
    """Wrap text into lines no wider than max_width cells, breaking between words."""
    if cell_len(text) <= max_width:
        return [text]
    return split_at_indices(text, wrap_indices(text, max_width))
