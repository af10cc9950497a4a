"""Subcommand modules for hookwright."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register subcommands on the root CLI group.

    Imports are deferred so ``hookwright --help`` never imports user code
    paths or the plugin core.
    """
    from hookwright.commands.inspect import inspect_cmd
    from hookwright.commands.kinds import kinds

    cli.add_command(inspect_cmd)
    cli.add_command(kinds)
