"""Parser for Android logcat "threadtime" lines.

Format: "MM-DD HH:MM:SS.mmm  PID  TID LEVEL TAG: message", e.g.

    01-15 10:30:00.123  1234  5678 I ActivityManager: Start proc 4321
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from logpager.models import LogEntry, LogLevel

_DATE_RE = re.compile(r"^(?P<month>\d{1,2})-(?P<day>\d{1,2})$")
_TIME_RE = re.compile(r"^(?P<hour>\d{1,2}):(?P<min>\d{2}):(?P<sec>\d{2})(?:\.(?P<frac>\d{1,6}))?$")

_TAG_TRIM = " :"
_MESSAGE_TRIM = " :"


def _parse_timestamp(date: str, time: str, year: int) -> datetime | None:
    m_date = _DATE_RE.match(date)
    m_time = _TIME_RE.match(time)
    if m_date is None or m_time is None:
        return None
    frac = m_time.group("frac") or "0"
    try:
        return datetime(
            year=year,
            month=int(m_date.group("month")),
            day=int(m_date.group("day")),
            hour=int(m_time.group("hour")),
            minute=int(m_time.group("min")),
            second=int(m_time.group("sec")),
            microsecond=int(frac.ljust(6, "0")),
            tzinfo=UTC,
        )
    except ValueError:
        return None


def parse_line(raw: str, year: int | None = None) -> LogEntry | None:
    """Parse one logcat line, or return None if any field is malformed.

    Logcat omits the year, so it is taken from year (default: the current year).
    Message words are re-joined with single spaces.
    """
    parts = raw.split()
    if len(parts) < 6:  # noqa: PLR2004
        return None
    date, time, pid, tid, level, tag, *words = parts

    timestamp = _parse_timestamp(date, time, year or datetime.now(tz=UTC).year)
    if timestamp is None:
        return None
    if not (pid.isdigit() and tid.isdigit()):
        return None
    log_level = LogLevel.parse(level)
    if log_level is None:
        return None

    return LogEntry(
        timestamp=timestamp,
        process_id=int(pid),
        thread_id=int(tid),
        log_level=log_level,
        tag=tag.rstrip(_TAG_TRIM),
        message=" ".join(words).lstrip(_MESSAGE_TRIM),
    )
