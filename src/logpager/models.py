"""Pydantic models for logpager."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - Pydantic needs this at runtime for model field resolution
from enum import StrEnum

from pydantic import BaseModel

COLUMN_HEADERS: tuple[str, ...] = ("Timestamp", "PID", "TID", "Level", "Tag", "Message")
COLUMN_COUNT = len(COLUMN_HEADERS)
MESSAGE_COLUMN = COLUMN_COUNT - 1


class LogLevel(StrEnum):
    """Logcat priority letter."""

    VERBOSE = "V"
    DEBUG = "D"
    INFO = "I"
    WARNING = "W"
    ERROR = "E"

    @classmethod
    def parse(cls, text: str) -> LogLevel | None:
        """Parse a level from the first character of text (case-insensitive)."""
        if not text:
            return None
        try:
            return cls(text[0].upper())
        except ValueError:
            return None


class LogEntry(BaseModel):
    """A single parsed logcat line."""

    timestamp: datetime
    process_id: int
    thread_id: int
    log_level: LogLevel
    tag: str
    message: str

    @property
    def formatted_timestamp(self) -> str:
        """Timestamp with millisecond precision, e.g. '2024-01-15 10:30:00.123'."""
        return f"{self.timestamp:%Y-%m-%d %H:%M:%S}.{self.timestamp.microsecond // 1000:03d}"

    @property
    def columns(self) -> tuple[str, ...]:
        """Column texts in display order (see COLUMN_HEADERS)."""
        return (
            self.formatted_timestamp,
            str(self.process_id),
            str(self.thread_id),
            self.log_level.value,
            self.tag,
            self.message,
        )

    def __str__(self) -> str:
        return "\t".join(self.columns)


class AppConfig(BaseModel):
    """Application configuration persisted to disk."""

    theme: str = "textual-dark"
    tag_width: int = 18
    year: int | None = None
