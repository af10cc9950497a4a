"""Root CLI group for hookwright with global flags and command registration."""

from __future__ import annotations

import click

from hookwright import __version__
from hookwright.commands import register_commands
from hookwright.commands._context import AppContext
from hookwright.config.settings import HookwrightSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hookwright")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging of plugin loading.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """hookwright: inspect test-runner plugins (root hooks, global fixtures)."""
    # Unset flags must not mask env vars or TOML values.
    flags = {"json_output": json_output, "verbose": verbose, "log_json": log_json}
    settings = HookwrightSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
