"""Decode oracle — the boundary that turns lamps into a readable time.

Hosts may plug in any implementation of :class:`DecodeOracle` (for example
a remote service). :class:`LocalDecodeOracle` runs the domain decoder
in-process. Failures surface as :class:`DecodeError`; callers report them as
one generic condition and never retry or partially decode.
"""

from __future__ import annotations

from typing import Protocol

from berlinclock.domain.decoder import decode
from berlinclock.domain.lamps import LampConfiguration

DECODE_FAILED_MESSAGE = "Failed to decode the Berlin Clock configuration"


class DecodeOracle(Protocol):
    """Turns a lamp configuration into ``HH:MM:SS``."""

    def decode(self, config: LampConfiguration) -> str: ...


class LocalDecodeOracle:
    """In-process oracle over :func:`berlinclock.domain.decoder.decode`."""

    def decode(self, config: LampConfiguration) -> str:
        return decode(config).format()
