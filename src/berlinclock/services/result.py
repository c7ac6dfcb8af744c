"""Result types returned by every berlinclock service call.

The CLI only ever sees :class:`ServiceResult`: commands hand it to
``AppContext.emit`` which renders it and picks the exit code. Clock-showing
ops (``now``, ``convert``, ``decode``, ``edit_show``, ``toggle``, ``reset``,
``undo``) put the displayed time under ``data["time"]`` and the wire record
under ``data["clock"]``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Failure categories a service can report."""

    INVALID_TIME = "INVALID_TIME"
    INVALID_LAMP = "INVALID_LAMP"
    DECODE_FAILED = "DECODE_FAILED"
    STATE_CORRUPT = "STATE_CORRUPT"
    NOTHING_TO_UNDO = "NOTHING_TO_UNDO"


class ServiceError(BaseModel):
    """Why an op failed. ``detail`` echoes the offending input."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service op.

    Attributes:
        ok: False exactly when ``error`` is set.
        op: Op name; the renderers dispatch on it.
        data: Op payload (time, wire record, toggle bookkeeping).
        warnings: Non-fatal problems, e.g. an undecodable edited clock.
        error: Failure details when ``ok`` is False.
        meta: Free-form extras; unused by the bundled renderers.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
