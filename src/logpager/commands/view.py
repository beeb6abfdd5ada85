"""View command - page through a logcat file in a TUI."""

from __future__ import annotations

import logging
import os
import sys
import time
from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import Annotated

import typer

from logpager.config import load_config
from logpager.reader import is_pipe, read_file, read_stdin


def _configure_logging(log_file: Path | None, *, verbose: bool) -> None:
    """Send log records to a file; the terminal belongs to the TUI."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _reattach_tty() -> None:
    """Point fd 0 at the terminal again after stdin was consumed, for Textual keyboard input."""
    tty_fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(tty_fd, sys.stdin.fileno())
    os.close(tty_fd)
    sys.stdin = os.fdopen(0)


def view(
    file: Annotated[Path | None, typer.Argument(help="Logcat file to view (reads stdin if piped)")] = None,
    year: Annotated[int | None, typer.Option("--year", "-y", help="Year of the log timestamps")] = None,
    tag_width: Annotated[int | None, typer.Option("--tag-width", help="Width of the tag column")] = None,
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Write debug logging to this file")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug messages")] = False,  # noqa: FBT002
) -> None:
    """View a logcat file: scroll, wrap long messages and search."""
    _configure_logging(log_file, verbose=verbose)
    config = load_config()
    if year is not None:
        config.year = year
    if tag_width is not None:
        config.tag_width = tag_width

    started = time.perf_counter()
    if file is not None:
        if not file.is_file():
            typer.echo(f"Error: {file} is not a file")
            raise typer.Exit(1)
        try:
            result = read_file(file, config.year)
        except OSError as e:
            typer.echo(f"Error: cannot read {file}: {e}")
            raise typer.Exit(1)  # noqa: B904
        source = str(file)
    elif is_pipe():
        result = read_stdin(config.year)
        _reattach_tty()
        source = "stdin"
    else:
        typer.echo("Error: provide a file or pipe input")
        raise typer.Exit(1)

    elapsed_ms = (time.perf_counter() - started) * 1000
    typer.echo(f"Parsed {len(result.entries)} entries, elapsed {elapsed_ms:.0f}ms")
    if not result.entries:
        typer.echo(f"Error: no logcat entries found ({result.skipped} lines skipped)")
        raise typer.Exit(1)

    from logpager.app import LogPagerApp  # noqa: PLC0415

    LogPagerApp(entries=result.entries, source=source, config=config).run(mouse=False)
