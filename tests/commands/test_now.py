"""Tests for the now command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from berlinclock.cli import cli
from berlinclock.domain.clock_time import ClockTime
from berlinclock.infrastructure.time_source import SystemTimeSource


@pytest.fixture(autouse=True)
def _frozen_clock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        SystemTimeSource, "now", lambda self: ClockTime(hour=13, minute=32, second=1)
    )


@pytest.mark.usefixtures("_isolated_root")
class TestNowCommand:
    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["now"])
        assert result.exit_code == 0
        assert "13:32:01" in result.output
        assert "■" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "now"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "now"
        assert data["data"]["clock"]["fiveHoursRow"] == "RROO"
        assert data["data"]["clock"]["currentTime"] == "13:32:01"

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "now"])
        assert result.output.strip() == "13:32:01"

    def test_count_samples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "now", "--count", "3", "--interval", "0"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["13:32:01"] * 3

    def test_count_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "now", "--count", "2", "--interval", "0"])
        assert result.exit_code == 0
        assert result.output.count('"op": "now"') == 2

    def test_interval_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "berlinclock.toml").write_text(
            "[realtime]\ninterval_seconds = 0\n", encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["-q", "now", "--count", "2"])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 2

    def test_count_must_be_positive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["now", "--count", "0"])
        assert result.exit_code == 2

    def test_no_state_written(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["now"])
        assert not (tmp_path / ".berlinclock").exists()
