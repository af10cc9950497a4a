"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the loader observer, and result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hookwright.output.formatters import format_result

if TYPE_CHECKING:
    from hookwright.config.settings import HookwrightSettings
    from hookwright.plugins.observers import LoaderObserver
    from hookwright.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: HookwrightSettings) -> None:
        self.settings = settings

        from hookwright.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def observer(self) -> LoaderObserver | None:
        """A logging observer when verbose, else None."""
        if not self.settings.verbose:
            return None
        from hookwright.plugins.observers import LoaderObserver, LoggingObserver

        return LoaderObserver(LoggingObserver())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr unless the
          output is JSON, where they are part of the payload.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output, verbose=self.settings.verbose)
        if result.ok:
            click.echo(output)
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
