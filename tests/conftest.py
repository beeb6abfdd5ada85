"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_LINES = [
    "01-15 10:30:00.123  1234  5678 I ActivityManager: Start proc 4321:com.example/u0a12",
    "01-15 10:30:00.456  1234  5679 D PackageManager: Scanning package com.example.app",
    "--------- beginning of main",
    "01-15 10:30:01.002   987   987 W WindowManager: Window too large, clipping",
    "01-15 10:30:01.250  4321  4330 E AndroidRuntime: FATAL EXCEPTION: main",
    "",
    "01-15 10:30:02.000  4321  4330 V Choreographer: Skipped 31 frames!",
    "not a logcat line at all",
]


@pytest.fixture
def sample_log_file(tmp_path: Path) -> Path:
    """Create a temporary logcat file with sample content."""
    log_file = tmp_path / "logcat.txt"
    log_file.write_text("\n".join(SAMPLE_LINES) + "\n")
    return log_file
