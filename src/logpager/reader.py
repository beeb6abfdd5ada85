"""Log file reading."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from logpager.parser import parse_line

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from logpager.models import LogEntry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReadResult:
    """Parsed entries and the number of lines that could not be parsed."""

    entries: list[LogEntry] = field(default_factory=list)
    skipped: int = 0


def parse_lines(raw_lines: Iterable[str], year: int | None = None) -> ReadResult:
    """Parse raw lines, skipping the ones that are not logcat entries."""
    result = ReadResult()
    for line_number, raw_line in enumerate(raw_lines, start=1):
        entry = parse_line(raw_line.rstrip("\n"), year)
        if entry is None:
            result.skipped += 1
            logger.debug("Skipping unparsable line %d", line_number)
        else:
            result.entries.append(entry)
    logger.info("Parsed %d entries, skipped %d lines", len(result.entries), result.skipped)
    return result


def read_file(path: Path, year: int | None = None) -> ReadResult:
    """Read and parse all lines of a log file."""
    with path.open(encoding="utf-8", errors="replace") as f:
        return parse_lines(f, year)


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def read_stdin(year: int | None = None) -> ReadResult:
    """Read and parse all lines from stdin."""
    return parse_lines(sys.stdin, year)
