"""Tests for the view command's error paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from logpager.cli import app

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()


@pytest.fixture(autouse=True)
def _config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOGPAGER_CONFIG_DIR", str(tmp_path / "config"))


class TestView:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["view", str(tmp_path / "missing.log")])
        assert result.exit_code == 1
        assert "is not a file" in result.output

    def test_file_without_entries(self, tmp_path: Path) -> None:
        log_file = tmp_path / "plain.log"
        log_file.write_text("just some text\nand more text\n")
        result = runner.invoke(app, ["view", str(log_file)])
        assert result.exit_code == 1
        assert "Parsed 0 entries" in result.output
        assert "2 lines skipped" in result.output
