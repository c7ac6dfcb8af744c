"""Row layout of the Berlin Clock and the lamp codes used on the wire.

From top to bottom the clock shows a round seconds lamp, two rows of four
red hour lamps, a row of eleven five-minute lamps, and a row of four yellow
single-minute lamps. Every third five-minute lamp is red and marks a quarter
hour; the colour carries no numeric weight.
"""

from __future__ import annotations

from enum import StrEnum


class Row(StrEnum):
    """Lamp rows, top to bottom."""

    SECONDS = "seconds"
    FIVE_HOURS = "five_hours"
    SINGLE_HOURS = "single_hours"
    FIVE_MINUTES = "five_minutes"
    SINGLE_MINUTES = "single_minutes"


class LampCode(StrEnum):
    """Single-character lamp codes used by the wire format."""

    YELLOW = "Y"
    RED = "R"
    OFF = "O"


ROW_LENGTHS: dict[Row, int] = {
    Row.SECONDS: 1,
    Row.FIVE_HOURS: 4,
    Row.SINGLE_HOURS: 4,
    Row.FIVE_MINUTES: 11,
    Row.SINGLE_MINUTES: 4,
}

# Units contributed by each lit lamp (hours for hour rows, minutes for minute rows).
ROW_WEIGHTS: dict[Row, int] = {
    Row.FIVE_HOURS: 5,
    Row.SINGLE_HOURS: 1,
    Row.FIVE_MINUTES: 5,
    Row.SINGLE_MINUTES: 1,
}

# 0-based positions of the red quarter-hour lamps in the five-minutes row.
QUARTER_MARKERS: frozenset[int] = frozenset({2, 5, 8})

_ROW_COLORS: dict[Row, LampCode] = {
    Row.SECONDS: LampCode.YELLOW,
    Row.FIVE_HOURS: LampCode.RED,
    Row.SINGLE_HOURS: LampCode.RED,
    Row.FIVE_MINUTES: LampCode.YELLOW,
    Row.SINGLE_MINUTES: LampCode.YELLOW,
}


def is_quarter_marker(row: Row, index: int) -> bool:
    """Whether the lamp at *index* of *row* is a quarter-hour marker."""
    return row is Row.FIVE_MINUTES and index in QUARTER_MARKERS


def lit_color(row: Row, index: int) -> LampCode:
    """Colour code the lamp at *index* of *row* shows when lit."""
    if is_quarter_marker(row, index):
        return LampCode.RED
    return _ROW_COLORS[row]
