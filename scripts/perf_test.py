"""Performance benchmark for logpager core engines.

Usage:
    python scripts/perf_test.py
"""

# ruff: noqa: PLR2004, T201
from __future__ import annotations

import time
from typing import Any

from logpager.matches import MatchIndex
from logpager.parser import parse_line
from logpager.text_utils import wrap_text
from logpager.viewport import Viewport

TEMPLATES = [
    "01-15 10:30:{sec:02d}.123  1234  5678 I ActivityManager: Start proc {n}:com.example/u0a12",
    "01-15 10:30:{sec:02d}.456   987   990 D PackageManager: Scanning package com.example.plugin{n}",
    "01-15 10:30:{sec:02d}.789  4321  4330 E AndroidRuntime: FATAL EXCEPTION: main (attempt {n})",
    "01-15 10:30:{sec:02d}.001  2810  2811 I art: Explicit concurrent copying GC freed {n}(2322KB) "
    "AllocSpace objects, 17(724KB) LOS objects, 49% free, 12MB/25MB, paused 339us total 141.468ms",
]


def generate_lines(count: int) -> list[str]:
    """Generate a mix of logcat lines."""
    return [TEMPLATES[i % len(TEMPLATES)].format(sec=i % 60, n=i) for i in range(count)]


def bench_index(rows: list[tuple[str, ...]], query: str) -> float:
    """Benchmark MatchIndex.build over the whole corpus."""
    start = time.perf_counter()
    MatchIndex.build(rows, query)
    return time.perf_counter() - start


def bench_narrowed_index(rows: list[tuple[str, ...]]) -> float:
    """Benchmark refining a query from the results of a shorter one."""
    previous = MatchIndex.build(rows, "FATAL")
    start = time.perf_counter()
    MatchIndex.build(rows, "FATAL EXCEPTION", within=previous)
    return time.perf_counter() - start


def bench_wrap(rows: list[tuple[str, ...]]) -> float:
    """Benchmark wrapping every message to 60 cells."""
    start = time.perf_counter()
    for row in rows:
        wrap_text(row[-1], 60)
    return time.perf_counter() - start


def bench_scroll(count: int) -> float:
    """Benchmark paging from the top to the bottom of a 50-line window."""
    viewport = Viewport(count, 50, lambda _index: 3)
    for index in range(0, count, 7):
        viewport.toggle_wrap(index)
    start = time.perf_counter()
    while viewport.selected is not None and viewport.selected < count - 1:
        viewport.page_down()
    return time.perf_counter() - start


def run_benchmark(count: int) -> dict[str, Any]:
    """Run all benchmarks for a given line count."""
    raw_lines = generate_lines(count)

    parse_start = time.perf_counter()
    entries = [entry for raw in raw_lines if (entry := parse_line(raw, 2024)) is not None]
    parse_time = time.perf_counter() - parse_start
    rows = [entry.columns for entry in entries]

    return {
        "count": count,
        "parse": parse_time,
        "index": bench_index(rows, "com.example"),
        "narrow": bench_narrowed_index(rows),
        "wrap": bench_wrap(rows),
        "scroll": bench_scroll(count),
    }


def format_rate(count: int, elapsed: float) -> str:
    """Format lines/sec."""
    if elapsed <= 0:
        return "inf"
    rate = count / elapsed
    if rate >= 1_000_000:
        return f"{rate / 1_000_000:.1f}M/s"
    if rate >= 1_000:
        return f"{rate / 1_000:.1f}K/s"
    return f"{rate:.0f}/s"


def main() -> None:
    sizes = [10_000, 100_000, 500_000]
    columns = ("parse", "index", "narrow", "wrap", "scroll")

    print(f"{'Lines':>10}  " + "  ".join(f"{name.capitalize():>16}" for name in columns))
    print("-" * (12 + 18 * len(columns)))

    for size in sizes:
        result = run_benchmark(size)
        count = result["count"]
        cells = [f"{result[name]:>8.3f}s {format_rate(count, result[name]):>7}" for name in columns]
        print(f"{count:>10,}  " + "  ".join(cells))

    print()
    print("Done.")


if __name__ == "__main__":
    main()
