"""Encoder: time of day -> lamp configuration.

Lighting is always a left-aligned prefix, and ``hour < 24`` / ``minute < 60``
keep every row within its length, so the result is valid by construction.
"""

from __future__ import annotations

from berlinclock.domain.clock_time import ClockTime
from berlinclock.domain.lamps import LampConfiguration, prefix
from berlinclock.domain.rows import ROW_LENGTHS, Row


def encode(hour: int, minute: int, second: int) -> LampConfiguration:
    """Encode a wall-clock time as a Berlin Clock lamp configuration.

    Raises:
        ValueError: If a component is outside its range. This is a caller
            bug, not a recoverable condition.
    """
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        msg = f"Time out of range: {hour}:{minute}:{second}"
        raise ValueError(msg)

    return LampConfiguration(
        seconds=second % 2 == 1,
        five_hours=prefix(hour // 5, ROW_LENGTHS[Row.FIVE_HOURS]),
        single_hours=prefix(hour % 5, ROW_LENGTHS[Row.SINGLE_HOURS]),
        five_minutes=prefix(minute // 5, ROW_LENGTHS[Row.FIVE_MINUTES]),
        single_minutes=prefix(minute % 5, ROW_LENGTHS[Row.SINGLE_MINUTES]),
    )


def encode_time(time: ClockTime) -> LampConfiguration:
    """Encode an already-validated :class:`ClockTime`."""
    return encode(time.hour, time.minute, time.second)
