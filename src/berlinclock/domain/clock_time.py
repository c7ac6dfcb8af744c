"""Wall-clock time value (hour, minute, second) with no timezone."""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, Field

_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2}):(\d{2})$")


class ClockTime(BaseModel):
    """A local time of day. Construction rejects out-of-range components."""

    model_config = {"frozen": True}

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``HH:MM:SS`` (two digits per field).

        Raises:
            ValueError: If the text is not a valid time of day.
        """
        match = _TIME_PATTERN.match(text.strip())
        if match is None:
            msg = f"Invalid time format {text!r}. Expected HH:MM:SS"
            raise ValueError(msg)
        hour, minute, second = (int(part) for part in match.groups())
        return cls(hour=hour, minute=minute, second=second)

    def format(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __str__(self) -> str:
        return self.format()
