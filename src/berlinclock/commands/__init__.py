"""Subcommand modules for berlinclock.

register_commands() uses deferred imports so ``berlinclock --help`` stays
fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``edit`` group and the standalone commands on the root group."""
    from berlinclock.commands.edit import edit

    cli.add_command(edit)

    from berlinclock.commands.convert import convert
    from berlinclock.commands.decode import decode
    from berlinclock.commands.info import info
    from berlinclock.commands.now import now

    cli.add_command(now)
    cli.add_command(convert)
    cli.add_command(decode)
    cli.add_command(info)
