"""CLI entry point for logpager."""

from __future__ import annotations

import typer

from logpager.commands.view import view

app = typer.Typer(add_completion=False)
app.command()(view)


@app.callback()
def _callback() -> None:
    """Terminal pager for Android logcat files."""


def main() -> None:
    """Entry point for the CLI."""
    app()
