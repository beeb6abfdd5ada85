"""Generate a realistic logcat "threadtime" file for demos and manual testing."""

# ruff: noqa: S311, PLR2004, T201
from __future__ import annotations

import random
import sys
from datetime import UTC, datetime, timedelta

PROCESSES = [(1234, "system_server"), (2810, "com.android.systemui"), (4321, "com.example.app")]
EVENTS = [
    ("I", "ActivityManager", "Start proc {pid}:com.example.app/u0a{uid} for activity {{com.example.app/.MainActivity}}"),
    ("D", "PackageManager", "Scanning package com.example.plugin{uid} in /data/app"),
    ("V", "Choreographer", "Frame time {ms}ms"),
    ("W", "WindowManager", "Window too large, clipping to {ms}x{uid}"),
    (
        "I",
        "art",
        "Explicit concurrent copying GC freed {uid}({ms}KB) AllocSpace objects, 17(724KB) LOS objects, "
        "49% free, 12MB/25MB, paused 339us total 141.468ms",
    ),
]
ERRORS = [
    ("E", "AndroidRuntime", "FATAL EXCEPTION: main Process: com.example.app, PID: {pid}"),
    ("E", "SQLiteLog", "(14) cannot open file at line {ms} of [{uid}]"),
    ("W", "ConnectivityService", "Network error: connection refused to 10.0.{uid}.{ms}"),
]


def format_line(ts: datetime, pid: int, tid: int, level: str, tag: str, message: str) -> str:
    return f"{ts:%m-%d %H:%M:%S}.{ts.microsecond // 1000:03d} {pid:5d} {tid:5d} {level} {tag}: {message}"


def main() -> None:
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 2000
    ts = datetime.now(tz=UTC) - timedelta(hours=1)

    for i in range(count):
        ts += timedelta(milliseconds=random.randint(1, 400))
        pid, _name = random.choice(PROCESSES)
        tid = pid + random.randint(0, 30)
        # errors get more frequent towards the end of the file
        pool = ERRORS if random.random() < 0.02 + 0.1 * i / count else EVENTS
        level, tag, template = random.choice(pool)
        message = template.format(pid=pid, uid=random.randint(10, 250), ms=random.randint(1, 999))
        print(format_line(ts, pid, tid, level, tag, message))


if __name__ == "__main__":
    main()
