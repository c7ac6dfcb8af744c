"""Shared pytest fixtures for berlinclock tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from berlinclock.domain.clock_time import ClockTime
from berlinclock.infrastructure.store import StateStore
from berlinclock.infrastructure.time_source import FixedTimeSource


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store(tmp_path: Path) -> StateStore:
    """State store backed by a file in a temp directory."""
    return StateStore(tmp_path / ".berlinclock" / "state.json")


@pytest.fixture
def fixed_source() -> FixedTimeSource:
    return FixedTimeSource(ClockTime(hour=13, minute=32, second=1))


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from a temp directory so state files stay isolated.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("BERLINCLOCK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
