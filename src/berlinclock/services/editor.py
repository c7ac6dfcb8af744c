"""EditorService — build a configuration lamp by lamp.

The configuration being edited lives in the state store as a wire record
(``edit.state``). Each request loads it, applies one toggle state machine
transition, saves the new snapshot, and asks the decode oracle for the time
it shows. Previous snapshots go to a bounded ``edit.history`` list for undo.

INVARIANT: a failed decode never blocks an edit. The configuration is
still saved and shown, and the failure is reported as a warning.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from berlinclock.domain.errors import DecodeError
from berlinclock.domain.lamps import LampConfiguration
from berlinclock.domain.rows import ROW_LENGTHS, Row
from berlinclock.domain.toggle import reset, toggle
from berlinclock.domain.wire import WireRecord, from_wire, to_wire
from berlinclock.infrastructure.oracle import DECODE_FAILED_MESSAGE, LocalDecodeOracle
from berlinclock.infrastructure.store import StateStoreError
from berlinclock.services.base import BaseService
from berlinclock.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from berlinclock.infrastructure.oracle import DecodeOracle
    from berlinclock.infrastructure.store import StateStore

logger = logging.getLogger(__name__)

STATE_KEY = "edit.state"
HISTORY_KEY = "edit.history"


class EditorService(BaseService):
    """Interactive editing through the toggle state machine."""

    def __init__(
        self,
        store: StateStore,
        *,
        oracle: DecodeOracle | None = None,
        history_limit: int = 50,
    ) -> None:
        super().__init__(store)
        self._oracle = oracle or LocalDecodeOracle()
        self._history_limit = history_limit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def show(self) -> ServiceResult:
        """Return the configuration being edited and the time it shows."""
        op = "edit_show"
        try:
            current = self.current()
        except StateStoreError as exc:
            return self._state_corrupt(op, exc)
        return self._respond(op, current)

    def toggle(self, row: Row, index: int) -> ServiceResult:
        """Click lamp *index* (0-based) of *row*.

        Requests the state machine rejects leave the configuration unchanged
        and report ``changed: false``.
        """
        op = "toggle"
        length = ROW_LENGTHS[row]
        if not 0 <= index < length:
            return self._fail(
                op,
                ErrorCode.INVALID_LAMP,
                f"Row {row} has lamps 0-{length - 1}, got {index}",
                row=str(row),
                index=index,
            )

        try:
            current = self.current()
            updated = toggle(current, row, index)
            changed = updated != current
            if changed:
                self._commit(current, updated)
        except StateStoreError as exc:
            return self._state_corrupt(op, exc)

        logger.debug("Toggle %s[%d] changed=%s", row, index, changed)
        return self._respond(op, updated, row=str(row), index=index, changed=changed)

    def reset(self) -> ServiceResult:
        """Switch every lamp off."""
        op = "reset"
        try:
            current = self.current()
            updated = reset()
            changed = updated != current
            if changed:
                self._commit(current, updated)
        except StateStoreError as exc:
            return self._state_corrupt(op, exc)
        return self._respond(op, updated, changed=changed)

    def undo(self) -> ServiceResult:
        """Restore the snapshot saved before the last change."""
        op = "undo"
        try:
            history = self._history()
            if not history:
                msg = "No earlier configuration to restore"
                return self._fail(op, ErrorCode.NOTHING_TO_UNDO, msg)
            previous = self._parse(history[-1])
            self._store.set(STATE_KEY, to_wire(previous).to_dict())
            if len(history) > 1:
                self._store.set(HISTORY_KEY, history[:-1])
            else:
                self._store.delete(HISTORY_KEY)
        except StateStoreError as exc:
            return self._state_corrupt(op, exc)
        return self._respond(op, previous, remaining=len(history) - 1)

    def current(self) -> LampConfiguration:
        """Load the configuration being edited (all-off if none was saved).

        Raises:
            StateStoreError: If the stored record is unreadable.
        """
        raw = self._store.get(STATE_KEY)
        if raw is None:
            return LampConfiguration.off()
        return self._parse(raw)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _commit(self, previous: LampConfiguration, updated: LampConfiguration) -> None:
        history = self._history()
        history.append(to_wire(previous).to_dict())
        if self._history_limit == 0:
            history = []
        else:
            history = history[-self._history_limit :]
        self._store.set(HISTORY_KEY, history)
        self._store.set(STATE_KEY, to_wire(updated).to_dict())

    def _history(self) -> list[dict[str, Any]]:
        history = self._store.get(HISTORY_KEY, [])
        if not isinstance(history, list):
            msg = f"Stored {HISTORY_KEY} must be a list"
            raise StateStoreError(msg)
        return list(history)

    @staticmethod
    def _parse(raw: Any) -> LampConfiguration:
        try:
            return from_wire(WireRecord.model_validate(raw))
        except (ValidationError, DecodeError) as exc:
            msg = f"Stored configuration is unreadable: {exc}"
            raise StateStoreError(msg) from exc

    def _respond(self, op: str, config: LampConfiguration, **extra: Any) -> ServiceResult:
        warnings: list[str] = []
        decoded: str | None
        try:
            decoded = self._oracle.decode(config)
        except DecodeError as exc:
            logger.info("Decode failed: %s", exc)
            decoded = None
            warnings.append(DECODE_FAILED_MESSAGE)

        clock = to_wire(config).model_copy(update={"current_time": decoded or ""})
        data: dict[str, Any] = {"time": decoded, "clock": clock.to_dict(), **extra}
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
