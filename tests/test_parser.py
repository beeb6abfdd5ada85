"""Tests for logcat line parsing."""

from __future__ import annotations

from datetime import UTC, datetime

from logpager.models import LogLevel
from logpager.parser import parse_line

LINE = "01-15 10:30:00.123  1234  5678 I ActivityManager: Start proc 4321:com.example/u0a12"


class TestParseLine:
    def test_threadtime_line(self) -> None:
        entry = parse_line(LINE, year=2024)
        assert entry is not None
        assert entry.timestamp == datetime(2024, 1, 15, 10, 30, 0, 123000, tzinfo=UTC)
        assert entry.process_id == 1234
        assert entry.thread_id == 5678
        assert entry.log_level == LogLevel.INFO
        assert entry.tag == "ActivityManager"
        assert entry.message == "Start proc 4321:com.example/u0a12"

    def test_default_year_is_current(self) -> None:
        entry = parse_line(LINE)
        assert entry is not None
        assert entry.timestamp.year == datetime.now(tz=UTC).year

    def test_message_whitespace_collapsed(self) -> None:
        entry = parse_line("01-15 10:30:00.123 1 2 D Tag: spaced    out   message", year=2024)
        assert entry is not None
        assert entry.message == "spaced out message"

    def test_separate_colon_is_trimmed(self) -> None:
        entry = parse_line("01-15 10:30:00.123 1 2 W Tag : hello", year=2024)
        assert entry is not None
        assert entry.tag == "Tag"
        assert entry.message == "hello"

    def test_empty_message(self) -> None:
        entry = parse_line("01-15 10:30:00.123 1 2 E Tag:", year=2024)
        assert entry is not None
        assert entry.tag == "Tag"
        assert entry.message == ""

    def test_lowercase_level(self) -> None:
        entry = parse_line("01-15 10:30:00.123 1 2 e Tag: boom", year=2024)
        assert entry is not None
        assert entry.log_level == LogLevel.ERROR

    def test_time_without_fraction(self) -> None:
        entry = parse_line("01-15 10:30:00 1 2 V Tag: msg", year=2024)
        assert entry is not None
        assert entry.timestamp.microsecond == 0

    def test_too_few_fields(self) -> None:
        assert parse_line("01-15 10:30:00.123 1 2 I") is None
        assert parse_line("") is None

    def test_logcat_banner(self) -> None:
        assert parse_line("--------- beginning of main") is None

    def test_invalid_date(self) -> None:
        assert parse_line("13-45 10:30:00.123 1 2 I Tag: msg", year=2024) is None
        assert parse_line("2024-01-15 10:30:00.123 1 2 I Tag: msg", year=2024) is None

    def test_invalid_time(self) -> None:
        assert parse_line("01-15 25:30:00.123 1 2 I Tag: msg", year=2024) is None
        assert parse_line("01-15 10:30 1 2 I Tag: msg", year=2024) is None

    def test_invalid_ids(self) -> None:
        assert parse_line("01-15 10:30:00.123 abc 2 I Tag: msg", year=2024) is None
        assert parse_line("01-15 10:30:00.123 1 -2 I Tag: msg", year=2024) is None

    def test_unknown_level(self) -> None:
        assert parse_line("01-15 10:30:00.123 1 2 X Tag: msg", year=2024) is None

    def test_leap_day_needs_leap_year(self) -> None:
        assert parse_line("02-29 10:30:00.000 1 2 I Tag: msg", year=2024) is not None
        assert parse_line("02-29 10:30:00.000 1 2 I Tag: msg", year=2023) is None
