"""Command: list recognized plugin kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hookwright.commands._base import HookwrightCommand

if TYPE_CHECKING:
    from hookwright.commands._context import AppContext


@click.command(cls=HookwrightCommand)
@click.pass_obj
def kinds(app: AppContext) -> None:
    """List the plugin exports a module can provide."""
    from hookwright.services.inspect import KindsService

    app.emit(KindsService().list_kinds())
