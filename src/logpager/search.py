"""Quick search state: query editing, committing and the current match index."""

from __future__ import annotations

import logging
import time
from enum import StrEnum
from typing import TYPE_CHECKING

from logpager.matches import MatchIndex

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class SearchMode(StrEnum):
    """Quick search mode."""

    OFF = "off"
    INPUT = "input"
    ITERATION = "iteration"


class QuickSearch:
    """Incremental literal search over the corpus.

    Typing only edits the query. The index is built once, on commit, and the time it
    took is kept for the status display.
    """

    def __init__(self) -> None:
        self.mode: SearchMode = SearchMode.OFF
        self.query: str = ""
        self.results: MatchIndex = MatchIndex()
        self.elapsed: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.mode != SearchMode.OFF

    @property
    def is_typing(self) -> bool:
        return self.mode == SearchMode.INPUT

    @property
    def is_iterating(self) -> bool:
        return self.mode == SearchMode.ITERATION

    @property
    def match_count(self) -> int:
        """Number of matching rows for the committed query."""
        return len(self.results)

    @property
    def occurrence_count(self) -> int:
        """Number of occurrences of the committed query across all rows."""
        return self.results.match_count

    def start(self) -> None:
        """Enter input mode. Coming from off discards the previous results."""
        if self.mode == SearchMode.OFF:
            self.results = MatchIndex()
            self.query = ""
            self.elapsed = 0.0
        self.mode = SearchMode.INPUT

    def append_char(self, char: str) -> None:
        if self.mode == SearchMode.INPUT:
            self.query += char

    def backspace(self) -> None:
        if self.mode == SearchMode.INPUT:
            self.query = self.query[:-1]

    def commit(self, rows: Sequence[Sequence[str]]) -> MatchIndex | None:
        """Commit the typed query and rebuild the index.

        Committing an empty query turns search off. Returns the new index, or None
        when nothing was built.
        """
        if self.mode != SearchMode.INPUT:
            return None
        if not self.query:
            self.mode = SearchMode.OFF
            self.results = MatchIndex()
            return None

        started = time.perf_counter()
        self.results = MatchIndex.build(rows, self.query, within=self.results)
        self.elapsed = time.perf_counter() - started
        self.mode = SearchMode.ITERATION
        logger.info(
            "Search %r: %d matching rows in %.1f ms", self.query, len(self.results), self.elapsed * 1000
        )
        return self.results

    def cancel(self) -> None:
        """Leave search. Cancelling while typing also clears the query."""
        if self.mode == SearchMode.INPUT:
            self.query = ""
        self.mode = SearchMode.OFF

    def highlights(self, line_index: int) -> list[tuple[int, int, int]]:
        """Highlight spans for a row; only shown while iterating over results."""
        if self.mode != SearchMode.ITERATION:
            return []
        return self.results.highlights(line_index)
