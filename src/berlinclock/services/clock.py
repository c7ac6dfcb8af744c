"""ClockService — show the current time, convert a chosen time, decode a record.

``convert`` remembers the last selection in the state store, so a later
call that omits a component reuses it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from berlinclock.config.models import ConvertConfig
from berlinclock.domain.clock_time import ClockTime
from berlinclock.domain.encoder import encode_time
from berlinclock.domain.errors import DecodeError
from berlinclock.domain.wire import WireRecord, from_wire
from berlinclock.infrastructure.oracle import DECODE_FAILED_MESSAGE, LocalDecodeOracle
from berlinclock.infrastructure.store import StateStoreError
from berlinclock.infrastructure.time_source import SystemTimeSource
from berlinclock.services.base import BaseService, clock_payload
from berlinclock.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from berlinclock.infrastructure.oracle import DecodeOracle
    from berlinclock.infrastructure.store import StateStore
    from berlinclock.infrastructure.time_source import TimeSource

logger = logging.getLogger(__name__)

CONVERT_KEYS: dict[str, str] = {
    "hour": "convert.hours",
    "minute": "convert.minutes",
    "second": "convert.seconds",
}


class ClockService(BaseService):
    """Encode times for display and decode wire records."""

    def __init__(
        self,
        store: StateStore,
        *,
        time_source: TimeSource | None = None,
        oracle: DecodeOracle | None = None,
        defaults: ConvertConfig | None = None,
    ) -> None:
        super().__init__(store)
        self._time_source = time_source or SystemTimeSource()
        self._oracle = oracle or LocalDecodeOracle()
        self._defaults = defaults or ConvertConfig()

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    def now(self) -> ServiceResult:
        """Encode the time reported by the time source."""
        return self.show(self._time_source.now())

    def show(self, current: ClockTime) -> ServiceResult:
        """Encode one sample of the time source (used when polling)."""
        return ServiceResult(ok=True, op="now", data=clock_payload(encode_time(current), current))

    def convert(
        self,
        *,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> ServiceResult:
        """Encode a chosen time and remember it as the current selection.

        Components left as None come from the saved selection, or from the
        ``[convert]`` defaults when nothing was saved yet.
        """
        op = "convert"
        try:
            saved = self.selection()
        except StateStoreError as exc:
            return self._state_corrupt(op, exc)

        requested = {"hour": hour, "minute": minute, "second": second}
        values = {k: v if v is not None else saved[k] for k, v in requested.items()}
        try:
            chosen = ClockTime(**values)
        except ValidationError as exc:
            return self._fail(
                op,
                ErrorCode.INVALID_TIME,
                "Time out of range. Hours 0-23, minutes and seconds 0-59",
                errors=[err["msg"] for err in exc.errors()],
                **values,
            )

        for key, store_key in CONVERT_KEYS.items():
            self._store.set(store_key, getattr(chosen, key))
        logger.debug("Converted %s", chosen)
        return ServiceResult(ok=True, op=op, data=clock_payload(encode_time(chosen), chosen))

    def convert_text(self, text: str) -> ServiceResult:
        """Like :meth:`convert` for an ``HH:MM:SS`` string."""
        try:
            chosen = ClockTime.parse(text)
        except ValueError:
            return self._fail(
                "convert",
                ErrorCode.INVALID_TIME,
                "Invalid time format. Expected HH:MM:SS",
                value=text,
            )
        return self.convert(hour=chosen.hour, minute=chosen.minute, second=chosen.second)

    def selection(self) -> dict[str, int]:
        """Saved convert selection, falling back to the configured defaults."""
        defaults = {
            "hour": self._defaults.default_hours,
            "minute": self._defaults.default_minutes,
            "second": self._defaults.default_seconds,
        }
        selection: dict[str, int] = {}
        for key, store_key in CONVERT_KEYS.items():
            raw = self._store.get(store_key, defaults[key])
            try:
                selection[key] = int(raw)
            except (TypeError, ValueError) as exc:
                msg = f"Stored {store_key} is not a number: {raw!r}"
                raise StateStoreError(msg) from exc
        return selection

    def decode(self, record: Mapping[str, Any]) -> ServiceResult:
        """Decode a wire record (camelCase or snake_case keys) through the oracle."""
        op = "decode"
        try:
            wire = WireRecord.model_validate(dict(record))
            config = from_wire(wire)
            decoded = self._oracle.decode(config)
        except (ValidationError, DecodeError) as exc:
            logger.info("Decode failed: %s", exc)
            return self._fail(
                op, ErrorCode.DECODE_FAILED, DECODE_FAILED_MESSAGE, reason=str(exc)
            )

        shown = wire.model_copy(update={"current_time": decoded})
        return ServiceResult(ok=True, op=op, data={"time": decoded, "clock": shown.to_dict()})
