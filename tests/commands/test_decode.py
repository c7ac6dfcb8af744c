"""Tests for the decode command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from berlinclock.cli import cli

_AFTERNOON = ["Y", "RROO", "RRRO", "YYRYYROOOOO", "YYOO"]


@pytest.mark.usefixtures("_isolated_root")
class TestDecodeCommand:
    def test_codes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", *_AFTERNOON])
        assert result.exit_code == 0
        assert result.output.strip() == "13:32:01"

    def test_lowercase_codes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "o", "oooo", "oooo", "o" * 11, "oooo"])
        assert result.output.strip() == "00:00:00"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", *_AFTERNOON])
        data = json.loads(result.output)
        assert data["op"] == "decode"
        assert data["data"]["time"] == "13:32:01"

    def test_gap_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "O", "RORO", "OOOO", "O" * 11, "OOOO"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "DECODE_FAILED"
        assert payload["error"]["message"] == "Failed to decode the Berlin Clock configuration"

    def test_wrong_number_of_codes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "Y", "RROO"])
        assert result.exit_code == 2
        assert "Expected 5" in result.output

    def test_from_json_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = dict(
            zip(
                ["secondsLamp", "fiveHoursRow", "singleHoursRow", "fiveMinutesRow", "singleMinutesRow"],
                _AFTERNOON,
                strict=True,
            )
        )
        path = tmp_path / "record.json"
        path.write_text(json.dumps(record), encoding="utf-8")
        result = cli_runner.invoke(cli, ["-q", "decode", "--from-json", str(path)])
        assert result.output.strip() == "13:32:01"

    def test_pipe_from_convert(self, cli_runner: CliRunner) -> None:
        converted = cli_runner.invoke(cli, ["--json", "convert", "07:05:03"])
        clock = json.loads(converted.output)["data"]["clock"]
        result = cli_runner.invoke(
            cli, ["-q", "decode", "--from-json", "-"], input=json.dumps(clock)
        )
        assert result.output.strip() == "07:05:03"

    def test_from_json_not_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--from-json", "-"], input="nope")
        assert result.exit_code == 2
        assert "Not valid JSON" in result.output

    def test_from_json_not_object(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--from-json", "-"], input="[1]")
        assert result.exit_code == 2
        assert "JSON object" in result.output

    def test_codes_and_json_conflict(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--from-json", "-", "Y"], input="{}")
        assert result.exit_code == 2
