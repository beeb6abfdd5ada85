"""Ordered index of literal substring matches over the log corpus."""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)


class _Indexed(Protocol):
    @property
    def index(self) -> int: ...


T = TypeVar("T", bound=_Indexed)


class IndexedMatches(Generic[T]):
    """Immutable collection of match records sorted by their index.

    Lookups use binary search over the sorted keys, so every query is logarithmic
    in the number of records.
    """

    __slots__ = ("_items", "_keys")

    def __init__(self, items: Iterable[T] = ()) -> None:
        by_index = {item.index: item for item in items}
        self._keys: list[int] = sorted(by_index)
        self._items: tuple[T, ...] = tuple(by_index[k] for k in self._keys)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexedMatches):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    @property
    def indices(self) -> list[int]:
        return list(self._keys)

    def exact(self, index: int) -> T | None:
        """The record at exactly index, if any."""
        i = bisect.bisect_left(self._keys, index)
        if i < len(self._keys) and self._keys[i] == index:
            return self._items[i]
        return None

    def next(self, index: int) -> T | None:
        """The first record strictly after index. Does not wrap around."""
        i = bisect.bisect_right(self._keys, index)
        return self._items[i] if i < len(self._items) else None

    def previous(self, index: int) -> T | None:
        """The last record strictly before index. Does not wrap around."""
        i = bisect.bisect_left(self._keys, index)
        return self._items[i - 1] if i > 0 else None

    def nearest(self, index: int) -> T | None:
        """The record closest to index; equal distances resolve to the lower index."""
        i = bisect.bisect_left(self._keys, index)
        if i < len(self._keys) and self._keys[i] == index:
            return self._items[i]
        lower = self._items[i - 1] if i > 0 else None
        upper = self._items[i] if i < len(self._items) else None
        if lower is None:
            return upper
        if upper is None:
            return lower
        if index - lower.index <= upper.index - index:
            return lower
        return upper


@dataclass(frozen=True, slots=True, order=True)
class MatchedPosition:
    """One occurrence of the query: [start, end) offsets into a column text."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class MatchedColumn:
    """All occurrences of the query inside one column of one row."""

    index: int
    positions: tuple[MatchedPosition, ...]


class MatchedColumns(IndexedMatches[MatchedColumn]):
    """Matching columns of a row, keyed by column index."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class MatchedLine:
    """All matching columns of one row. Ordered by line index only."""

    index: int
    columns: MatchedColumns

    def spans(self) -> list[tuple[int, int, int]]:
        """Highlight spans as (column_index, start, end) in column then offset order."""
        return [(column.index, p.start, p.end) for column in self.columns for p in column.positions]


def find_positions(text: str, query: str) -> tuple[MatchedPosition, ...]:
    """Find non-overlapping, case-sensitive occurrences of query in text."""
    if not query:
        return ()
    positions: list[MatchedPosition] = []
    query_len = len(query)
    start = 0
    while True:
        pos = text.find(query, start)
        if pos == -1:
            break
        positions.append(MatchedPosition(pos, pos + query_len))
        start = pos + query_len
    return tuple(positions)


def match_line(line_index: int, columns: Sequence[str], query: str) -> MatchedLine | None:
    """Match query against every column text of one row, or None if nothing matches."""
    matched = [
        MatchedColumn(column_index, positions)
        for column_index, text in enumerate(columns)
        if (positions := find_positions(text, query))
    ]
    if not matched:
        return None
    return MatchedLine(line_index, MatchedColumns(matched))


class MatchIndex(IndexedMatches[MatchedLine]):
    """Search results for one query, sorted by line index."""

    __slots__ = ("query",)

    def __init__(self, lines: Iterable[MatchedLine] = (), query: str = "") -> None:
        super().__init__(lines)
        self.query = query

    @classmethod
    def build(
        cls,
        rows: Sequence[Sequence[str]],
        query: str,
        within: MatchIndex | None = None,
    ) -> MatchIndex:
        """Build the index of rows containing query.

        An empty query gives an empty index. When within holds the results of a
        query contained in this one, only its rows can still match, so only they
        are rescanned.
        """
        if not query:
            return cls()
        if within is not None and within.query and within.query in query:
            candidates: Iterable[int] = within.indices
        else:
            candidates = range(len(rows))
        lines = [line for i in candidates if (line := match_line(i, rows[i], query)) is not None]
        logger.debug("Indexed %r: %d matching lines", query, len(lines))
        return cls(lines, query)

    @property
    def match_count(self) -> int:
        """Total number of occurrences across all rows and columns."""
        return sum(len(column.positions) for line in self for column in line.columns)

    def highlights(self, line_index: int) -> list[tuple[int, int, int]]:
        """Highlight spans (column_index, start, end) for a row, empty if it has none."""
        line = self.exact(line_index)
        return line.spans() if line is not None else []
