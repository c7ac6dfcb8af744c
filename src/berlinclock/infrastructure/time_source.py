"""Time sources feeding the encoder.

The clock works on local wall-clock time only; there is no timezone logic.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Protocol

from berlinclock.domain.clock_time import ClockTime


class TimeSource(Protocol):
    """Anything that can report the current time of day."""

    def now(self) -> ClockTime: ...


class SystemTimeSource:
    """Local system clock."""

    def now(self) -> ClockTime:
        current = datetime.now()
        return ClockTime(hour=current.hour, minute=current.minute, second=current.second)


class FixedTimeSource:
    """Always reports the same time. Used by tests and scripted runs."""

    def __init__(self, time: ClockTime) -> None:
        self.time = time

    def now(self) -> ClockTime:
        return self.time


def poll(
    source: TimeSource,
    *,
    interval: float,
    count: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[ClockTime]:
    """Sample *source* every *interval* seconds.

    Yields immediately, then after each sleep. Runs forever when *count*
    is None.
    """
    produced = 0
    while count is None or produced < count:
        if produced:
            sleep(interval)
        yield source.now()
        produced += 1
