"""Rich Console factory and theme for berlinclock output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CLOCK_THEME = Theme(
    {
        "clock.ok": "bold green",
        "clock.error": "bold red",
        "clock.warning": "bold yellow",
        "clock.op": "bold cyan",
        "clock.key": "dim",
        "clock.time": "bold",
        "clock.lamp.red": "bold red",
        "clock.lamp.yellow": "bold yellow",
        "clock.lamp.off": "bright_black",
    }
)

_LAMP_STYLES: dict[str, str] = {
    "R": "clock.lamp.red",
    "Y": "clock.lamp.yellow",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CLOCK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_lamp(code: str) -> str:
    """Rich style for a wire lamp code; unlit lamps get the off style."""
    return _LAMP_STYLES.get(code, "clock.lamp.off")
