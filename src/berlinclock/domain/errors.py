"""Domain exceptions.

Contract violations (out-of-range time components, lamp indexes outside a
row) raise plain ``ValueError``. The types here cover input the domain is
asked to interpret but cannot: free-form lamp configurations and wire records.
"""

from __future__ import annotations


class BerlinClockError(Exception):
    """Base class for berlinclock domain errors."""


class DecodeError(BerlinClockError):
    """A lamp configuration does not represent a time of day."""


class WireFormatError(DecodeError):
    """A wire record has a row of the wrong length or an unknown lamp code."""
