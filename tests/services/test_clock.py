"""Tests for ClockService."""

from __future__ import annotations

from typing import Any

import pytest

from berlinclock.config.models import ConvertConfig
from berlinclock.domain.lamps import LampConfiguration
from berlinclock.infrastructure.oracle import DECODE_FAILED_MESSAGE
from berlinclock.infrastructure.store import StateStore
from berlinclock.infrastructure.time_source import FixedTimeSource
from berlinclock.services.clock import ClockService

AFTERNOON = {
    "secondsLamp": "Y",
    "fiveHoursRow": "RROO",
    "singleHoursRow": "RRRO",
    "fiveMinutesRow": "YYRYYROOOOO",
    "singleMinutesRow": "YYOO",
}


@pytest.fixture
def service(store: StateStore, fixed_source: FixedTimeSource) -> ClockService:
    return ClockService(store, time_source=fixed_source)


class TestNow:
    def test_encodes_time_source(self, service: ClockService) -> None:
        result = service.now()
        assert result.ok
        assert result.op == "now"
        assert result.data["time"] == "13:32:01"
        assert result.data["clock"] == {**AFTERNOON, "currentTime": "13:32:01"}

    def test_does_not_touch_state(self, service: ClockService, store: StateStore) -> None:
        service.now()
        assert not store.path.exists()


class TestConvert:
    def test_defaults_when_nothing_saved(self, service: ClockService) -> None:
        result = service.convert()
        assert result.ok
        assert result.data["time"] == "12:30:45"
        assert result.data["clock"]["singleHoursRow"] == "RROO"

    def test_configured_defaults(self, store: StateStore) -> None:
        defaults = ConvertConfig(default_hours=0, default_minutes=0, default_seconds=0)
        result = ClockService(store, defaults=defaults).convert()
        assert result.data["time"] == "00:00:00"

    def test_saves_selection(self, service: ClockService, store: StateStore) -> None:
        service.convert(hour=23, minute=59, second=59)
        assert store.get("convert.hours") == 23
        assert store.get("convert.minutes") == 59
        assert store.get("convert.seconds") == 59

    def test_partial_reuses_saved(self, service: ClockService) -> None:
        service.convert(hour=6, minute=15, second=2)
        result = service.convert(minute=45)
        assert result.data["time"] == "06:45:02"
        assert result.data["clock"]["fiveMinutesRow"] == "YYRYYRYYROO"

    def test_out_of_range(self, service: ClockService, store: StateStore) -> None:
        result = service.convert(hour=24, minute=0, second=0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_TIME"
        assert result.error.detail["hour"] == 24
        assert result.error.detail["errors"]
        assert store.get("convert.hours") is None

    def test_text(self, service: ClockService) -> None:
        result = service.convert_text("13:32:01")
        assert result.ok
        assert result.data["clock"]["currentTime"] == "13:32:01"

    @pytest.mark.parametrize("text", ["1:2:3", "25:00:00", "lunch"])
    def test_text_invalid(self, service: ClockService, text: str) -> None:
        result = service.convert_text(text)
        assert not result.ok
        assert result.op == "convert"
        assert result.error is not None
        assert result.error.code == "INVALID_TIME"
        assert result.error.detail == {"value": text}

    def test_corrupt_selection(self, service: ClockService, store: StateStore) -> None:
        store.set("convert.hours", "noon")
        result = service.convert(minute=0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "STATE_CORRUPT"
        assert result.error.detail["path"] == str(store.path)

    def test_unreadable_state_file(self, service: ClockService, store: StateStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{", encoding="utf-8")
        result = service.convert()
        assert result.error is not None
        assert result.error.code == "STATE_CORRUPT"


class TestDecode:
    def test_decodes_record(self, service: ClockService) -> None:
        result = service.decode(AFTERNOON)
        assert result.ok
        assert result.op == "decode"
        assert result.data["time"] == "13:32:01"
        assert result.data["clock"]["currentTime"] == "13:32:01"

    def test_all_off(self, service: ClockService) -> None:
        record = {
            "secondsLamp": "O",
            "fiveHoursRow": "OOOO",
            "singleHoursRow": "OOOO",
            "fiveMinutesRow": "O" * 11,
            "singleMinutesRow": "OOOO",
        }
        assert service.decode(record).data["time"] == "00:00:00"

    @pytest.mark.parametrize(
        "override",
        [
            {"fiveHoursRow": "RORO"},
            {"fiveHoursRow": "RRRR", "singleHoursRow": "RRRR"},
            {"singleMinutesRow": "YY"},
            {"secondsLamp": "X"},
        ],
    )
    def test_rejected(self, service: ClockService, override: dict[str, Any]) -> None:
        result = service.decode({**AFTERNOON, **override})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DECODE_FAILED"
        assert result.error.message == DECODE_FAILED_MESSAGE
        assert result.error.detail["reason"]

    def test_missing_field(self, service: ClockService) -> None:
        result = service.decode({"secondsLamp": "Y"})
        assert result.error is not None
        assert result.error.code == "DECODE_FAILED"

    def test_uses_injected_oracle(self, store: StateStore) -> None:
        class _Remote:
            def decode(self, config: LampConfiguration) -> str:
                return "remote"

        result = ClockService(store, oracle=_Remote()).decode(AFTERNOON)
        assert result.data["time"] == "remote"
