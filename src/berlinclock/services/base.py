"""BaseService — shared foundation for berlinclock services.

Every service receives the :class:`StateStore` at construction time and
reads or writes persisted selections through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from berlinclock.domain.clock_time import ClockTime
from berlinclock.domain.lamps import LampConfiguration
from berlinclock.domain.wire import to_wire
from berlinclock.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from berlinclock.infrastructure.store import StateStore, StateStoreError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes.

    Subclasses return :class:`ServiceResult` from every public method and
    build failures with :meth:`_fail`.
    """

    def __init__(self, store: StateStore) -> None:
        self._store = store

    @staticmethod
    def _fail(op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _state_corrupt(self, op: str, exc: StateStoreError) -> ServiceResult:
        logger.warning("State file unusable: %s", exc)
        return self._fail(op, ErrorCode.STATE_CORRUPT, str(exc), path=str(self._store.path))


def clock_payload(config: LampConfiguration, time: ClockTime | None) -> dict[str, Any]:
    """Result data for a displayed configuration: wire record plus time."""
    return {
        "time": time.format() if time else None,
        "clock": to_wire(config, time).to_dict(),
    }
