"""Command: require plugin modules and show the merged plugin settings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from hookwright.commands._base import HookwrightCommand

if TYPE_CHECKING:
    from hookwright.commands._context import AppContext


@click.command(
    "inspect",
    cls=HookwrightCommand,
    examples="""\
  hookwright inspect -r tests/hooks.py
  hookwright inspect -r myproject.testing.fixtures -r tests/hooks.py
  hookwright inspect --plugin-dir tests/plugins
  hookwright --json inspect -r tests/hooks.py""",
)
@click.option(
    "-r",
    "--require",
    "requires",
    multiple=True,
    help="Module name or .py file to require (repeatable, in order).",
)
@click.option(
    "--plugin-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Require every *.py file in this directory after --require modules.",
)
@click.pass_obj
def inspect_cmd(app: AppContext, requires: tuple[str, ...], plugin_dir: Path | None) -> None:
    """Require plugin modules and show the finalized root hooks and fixtures."""
    from hookwright.services.inspect import InspectService

    settings = app.settings
    if plugin_dir is not None:
        settings = settings.model_copy(
            update={
                "plugins": settings.plugins.model_copy(update={"plugin_dir": str(plugin_dir)})
            }
        )

    svc = InspectService(settings, observer=app.observer())
    app.emit(svc.inspect(requires))
