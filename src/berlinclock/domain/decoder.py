"""Decoder: lamp configuration -> time of day.

The exact inverse of :func:`berlinclock.domain.encoder.encode` for hours
and minutes. The seconds lamp only carries parity, so the decoded second is
a representative value: 1 when the lamp is on, 0 when it is off.
"""

from __future__ import annotations

from berlinclock.domain.clock_time import ClockTime
from berlinclock.domain.errors import DecodeError
from berlinclock.domain.lamps import MAX_HOUR, MAX_MINUTE, LampConfiguration, is_prefix
from berlinclock.domain.rows import Row

SECOND_WHEN_ON = 1
SECOND_WHEN_OFF = 0


def decode(config: LampConfiguration) -> ClockTime:
    """Recover the time a configuration shows.

    Raises:
        DecodeError: If a row has a gap or the totals fall outside the day.
    """
    gaps = [str(row) for row in Row if not is_prefix(config.lamps(row))]
    if gaps:
        msg = f"Lamps are not contiguous in row(s): {', '.join(gaps)}"
        raise DecodeError(msg)

    hour = config.hour_total
    minute = config.minute_total
    if hour > MAX_HOUR or minute > MAX_MINUTE:
        msg = f"Decoded time values are out of range: {hour:02d}:{minute:02d}"
        raise DecodeError(msg)

    second = SECOND_WHEN_ON if config.seconds else SECOND_WHEN_OFF
    return ClockTime(hour=hour, minute=minute, second=second)
