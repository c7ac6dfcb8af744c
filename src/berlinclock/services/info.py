"""Reading guide for the clock, with a worked example."""

from __future__ import annotations

from berlinclock.domain.clock_time import ClockTime
from berlinclock.domain.encoder import encode_time
from berlinclock.domain.rows import QUARTER_MARKERS, ROW_LENGTHS, Row
from berlinclock.services.base import clock_payload
from berlinclock.services.result import ServiceResult

EXAMPLE_TIME = ClockTime(hour=13, minute=32, second=1)

_ROW_GUIDE: dict[Row, tuple[str, str]] = {
    Row.SECONDS: ("yellow", "On for odd seconds, off for even seconds"),
    Row.FIVE_HOURS: ("red", "Each lamp is 5 hours"),
    Row.SINGLE_HOURS: ("red", "Each lamp is 1 hour"),
    Row.FIVE_MINUTES: (
        "yellow, red quarter markers",
        "Each lamp is 5 minutes; lamps 3, 6 and 9 mark the quarter hours",
    ),
    Row.SINGLE_MINUTES: ("yellow", "Each lamp is 1 minute"),
}


def describe_clock() -> ServiceResult:
    """Explain each row and show how 13:32:01 is displayed."""
    rows = [
        {
            "row": str(row),
            "lamps": ROW_LENGTHS[row],
            "color": color,
            "meaning": meaning,
        }
        for row, (color, meaning) in _ROW_GUIDE.items()
    ]
    example = clock_payload(encode_time(EXAMPLE_TIME), EXAMPLE_TIME)
    return ServiceResult(
        ok=True,
        op="info",
        data={
            "rows": rows,
            "quarter_markers": sorted(QUARTER_MARKERS),
            "example": example,
            "reading": "hours = 5 x top red lamps + bottom red lamps; "
            "minutes = 5 x yellow/red lamps + bottom yellow lamps",
        },
    )
