"""Toggle state machine for building a configuration lamp by lamp.

The configuration is the whole state; the initial state is all-off.
A transition flips one lamp and always lands on a valid configuration:

- Guard: a lamp whose left neighbour is off cannot be touched (no gaps).
- Turning off: the lamp and everything to its right go dark (cascade).
- Turning on: only the target lamp lights, unless that would push the hour
  total past 23.
- Rows of one lamp (the seconds lamp) flip unconditionally.

Requests the rules forbid return the configuration unchanged. They are
never errors.
"""

from __future__ import annotations

from berlinclock.domain.lamps import MAX_HOUR, LampConfiguration
from berlinclock.domain.rows import Row


def toggle(config: LampConfiguration, row: Row, index: int) -> LampConfiguration:
    """Apply a click on lamp *index* (0-based) of *row*.

    Raises:
        ValueError: If *index* does not address a lamp in *row*.
    """
    lamps = config.lamps(row)
    if not 0 <= index < len(lamps):
        msg = f"Lamp index {index} outside row {row} (0-{len(lamps) - 1})"
        raise ValueError(msg)

    if len(lamps) == 1:
        return config.with_lamps(row, (not lamps[0],))

    if index > 0 and not lamps[index - 1]:
        return config

    if lamps[index]:
        cleared = lamps[:index] + (False,) * (len(lamps) - index)
        return config.with_lamps(row, cleared)

    lit = lamps[:index] + (True,) + lamps[index + 1 :]
    candidate = config.with_lamps(row, lit)
    if candidate.hour_total > MAX_HOUR:
        return config
    return candidate


def reset() -> LampConfiguration:
    """Transition back to the initial all-off state."""
    return LampConfiguration.off()
