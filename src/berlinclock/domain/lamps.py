"""LampConfiguration — immutable snapshot of every lamp on the clock.

Each row is a fixed-length tuple of booleans, leftmost lamp first.
A configuration is never mutated: :meth:`LampConfiguration.with_lamps`
returns a new value, so earlier snapshots stay valid for history and undo.

INVARIANT (valid configurations): lit lamps form a prefix of every row,
hours stay within 0-23 and minutes within 0-59. Free-form configurations
may break this; :meth:`is_contiguous` and :meth:`is_valid` report it.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field

from berlinclock.domain.rows import ROW_LENGTHS, ROW_WEIGHTS, Row

Lamps = tuple[bool, ...]

MAX_HOUR = 23
MAX_MINUTE = 59


def prefix(lit: int, length: int) -> Lamps:
    """Return a row of *length* lamps with the first *lit* switched on."""
    return tuple(i < lit for i in range(length))


def is_prefix(lamps: Lamps) -> bool:
    """True if no unlit lamp sits left of a lit one."""
    return all(lamps[: sum(lamps)])


def _row_field(row: Row) -> Any:
    length = ROW_LENGTHS[row]
    return Field(default=prefix(0, length), min_length=length, max_length=length)


class LampConfiguration(BaseModel):
    """State of all 24 lamps. Every field defaults to off."""

    model_config = {"frozen": True}

    seconds: bool = False
    five_hours: Lamps = _row_field(Row.FIVE_HOURS)
    single_hours: Lamps = _row_field(Row.SINGLE_HOURS)
    five_minutes: Lamps = _row_field(Row.FIVE_MINUTES)
    single_minutes: Lamps = _row_field(Row.SINGLE_MINUTES)

    @classmethod
    def off(cls) -> Self:
        """The all-off configuration (initial state of the editor)."""
        return cls()

    def lamps(self, row: Row) -> Lamps:
        """Lamps of *row*; the seconds lamp is a row of one."""
        if row is Row.SECONDS:
            return (self.seconds,)
        return getattr(self, str(row))

    def with_lamps(self, row: Row, lamps: Lamps) -> Self:
        """Return a copy with *row* replaced by *lamps* (validated)."""
        values = self.model_dump()
        if row is Row.SECONDS:
            values["seconds"] = lamps[0]
        else:
            values[str(row)] = tuple(lamps)
        return type(self).model_validate(values)

    def lit(self, row: Row) -> int:
        """Number of lit lamps in *row*."""
        return sum(self.lamps(row))

    @property
    def hour_total(self) -> int:
        return sum(ROW_WEIGHTS[row] * self.lit(row) for row in (Row.FIVE_HOURS, Row.SINGLE_HOURS))

    @property
    def minute_total(self) -> int:
        return sum(
            ROW_WEIGHTS[row] * self.lit(row) for row in (Row.FIVE_MINUTES, Row.SINGLE_MINUTES)
        )

    def is_contiguous(self) -> bool:
        """Whether every row satisfies the contiguous-prefix rule."""
        return all(is_prefix(self.lamps(row)) for row in Row)

    def is_valid(self) -> bool:
        """Contiguous rows and hour/minute totals inside the day."""
        return (
            self.is_contiguous()
            and self.hour_total <= MAX_HOUR
            and self.minute_total <= MAX_MINUTE
        )
