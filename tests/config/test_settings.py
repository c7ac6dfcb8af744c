"""Tests for ClockSettings source precedence."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from berlinclock.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from berlinclock.config.settings import ClockSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


def _write_config(directory: Path, body: str) -> Path:
    path = directory / CONFIG_FILENAME
    path.write_text(body, encoding="utf-8")
    return path


class TestClockSettings:
    def test_defaults_without_config(self, tmp_path: Path) -> None:
        settings = ClockSettings.from_cli()
        assert settings.config_path is None
        assert settings.root.resolve() == tmp_path.resolve()
        assert settings.realtime.interval_seconds == 1.0
        assert settings.state_path == settings.root / ".berlinclock" / "state.json"

    def test_toml_overrides_defaults(self, tmp_path: Path) -> None:
        _write_config(
            tmp_path,
            "[realtime]\ninterval_seconds = 0.25\n\n"
            "[convert]\ndefault_hours = 7\n\n"
            "[state]\ndirectory = \"var\"\n",
        )
        settings = ClockSettings.from_cli()
        assert settings.realtime.interval_seconds == 0.25
        assert settings.convert.default_hours == 7
        assert settings.convert.default_minutes == 30
        assert settings.state_path.parent.name == "var"

    def test_root_is_config_parent(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        cfg = _write_config(tmp_path, "")
        nested = tmp_path / "sub"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = ClockSettings.from_cli()
        assert settings.config_path == cfg.resolve()
        assert settings.root == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        other = tmp_path / "custom.toml"
        other.write_text("[edit]\nhistory_limit = 3\n", encoding="utf-8")
        settings = ClockSettings.from_cli(config_path=str(other))
        assert settings.edit.history_limit == 3

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(tmp_path, "[edit]\nhistory_limit = 3\n")
        monkeypatch.setenv("BERLINCLOCK_EDIT__HISTORY_LIMIT", "9")
        assert ClockSettings.from_cli().edit.history_limit == 9

    def test_cli_flags_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BERLINCLOCK_QUIET", "false")
        settings = ClockSettings.from_cli(quiet=True, json_output=True)
        assert settings.quiet is True
        assert settings.json_output is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[realtime\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ClockSettings.from_cli()
