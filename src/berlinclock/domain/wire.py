"""Wire format for lamp configurations.

A fixed record with camelCase keys: one seconds code, four fixed-length row
strings (4, 4, 11, 4) and the ``currentTime`` it shows (``HH:MM:SS``, or
empty when unknown). ``O`` is off; a lit lamp is ``Y`` or ``R`` according to
its colour. Colour is presentation only, so parsing accepts either lit code
at any position.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from berlinclock.domain.clock_time import ClockTime
from berlinclock.domain.errors import WireFormatError
from berlinclock.domain.lamps import LampConfiguration, Lamps
from berlinclock.domain.rows import ROW_LENGTHS, LampCode, Row, lit_color

_LIT_CODES = frozenset({LampCode.YELLOW.value, LampCode.RED.value})


class WireRecord(BaseModel):
    """Serialized lamp configuration as exchanged with clients and storage."""

    model_config = {"frozen": True, "populate_by_name": True}

    seconds_lamp: str = Field(alias="secondsLamp")
    five_hours_row: str = Field(alias="fiveHoursRow")
    single_hours_row: str = Field(alias="singleHoursRow")
    five_minutes_row: str = Field(alias="fiveMinutesRow")
    single_minutes_row: str = Field(alias="singleMinutesRow")
    current_time: str = Field(default="", alias="currentTime")

    def row_code(self, row: Row) -> str:
        """Raw code string for *row*."""
        if row is Row.SECONDS:
            return self.seconds_lamp
        return getattr(self, f"{row}_row")

    def to_dict(self) -> dict[str, Any]:
        """camelCase mapping, as stored and printed."""
        return self.model_dump(by_alias=True)


def encode_row(row: Row, lamps: Lamps) -> str:
    """Render a row of lamps as its code string."""
    return "".join(
        lit_color(row, index).value if lit else LampCode.OFF.value
        for index, lit in enumerate(lamps)
    )


def decode_row(row: Row, codes: str) -> Lamps:
    """Parse a code string into lamps.

    Raises:
        WireFormatError: On a wrong length or an unknown code.
    """
    expected = ROW_LENGTHS[row]
    if len(codes) != expected:
        msg = f"Row {row} must have {expected} lamp(s), got {len(codes)}: {codes!r}"
        raise WireFormatError(msg)

    lamps: list[bool] = []
    for code in codes:
        if code == LampCode.OFF.value:
            lamps.append(False)
        elif code in _LIT_CODES:
            lamps.append(True)
        else:
            msg = f"Unknown lamp code {code!r} in row {row}"
            raise WireFormatError(msg)
    return tuple(lamps)


def to_wire(config: LampConfiguration, current_time: ClockTime | None = None) -> WireRecord:
    """Serialize a configuration (and optionally the time it shows)."""
    return WireRecord(
        seconds_lamp=encode_row(Row.SECONDS, config.lamps(Row.SECONDS)),
        five_hours_row=encode_row(Row.FIVE_HOURS, config.five_hours),
        single_hours_row=encode_row(Row.SINGLE_HOURS, config.single_hours),
        five_minutes_row=encode_row(Row.FIVE_MINUTES, config.five_minutes),
        single_minutes_row=encode_row(Row.SINGLE_MINUTES, config.single_minutes),
        current_time=current_time.format() if current_time else "",
    )


def from_wire(record: WireRecord) -> LampConfiguration:
    """Rebuild a configuration from a record. ``currentTime`` is ignored.

    Raises:
        WireFormatError: If any row is malformed.
    """
    rows = {row: decode_row(row, record.row_code(row)) for row in Row}
    return LampConfiguration(
        seconds=rows[Row.SECONDS][0],
        five_hours=rows[Row.FIVE_HOURS],
        single_hours=rows[Row.SINGLE_HOURS],
        five_minutes=rows[Row.FIVE_MINUTES],
        single_minutes=rows[Row.SINGLE_MINUTES],
    )
