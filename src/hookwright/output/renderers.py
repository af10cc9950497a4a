"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from hookwright.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from hookwright.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="hw.ok"), Text(result.op, style="hw.op"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="hw.error"), Text(f" {result.op}{code}", style="hw.op"), "-", Text(msg)
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)

    modules: list[dict[str, Any]] = result.data.get("modules", [])
    if verbose and modules:
        console.print(Text("  modules:", style="hw.key"))
        for module in modules:
            marker = "+" if module["has_plugins"] else "-"
            console.print(Text(f"    {marker} {module['module']}", style="hw.module"))

    plugins: dict[str, Any] = result.data.get("plugins", {})
    if not plugins:
        console.print(Text("  no plugins found", style="hw.key"))
        return

    for key, value in plugins.items():
        console.print(Text(f"  {key}", style="hw.kind"))
        if isinstance(value, dict):
            for slot, hooks in value.items():
                names = ", ".join(hooks) if hooks else "-"
                console.print(Text(f"    {slot}:", style="hw.key"), Text(names, style="hw.hook"))
        elif isinstance(value, list):
            for position, name in enumerate(value, start=1):
                console.print(Text(f"    {position}.", style="hw.key"), Text(name, style="hw.hook"))
        else:
            console.print(Text(f"    {value}"))


def _render_kinds(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Export", style="hw.kind", no_wrap=True)
    table.add_column("Output key")
    table.add_column("Validated")
    table.add_column("Aggregated")
    table.add_column("Passthrough")
    for kind in result.data.get("kinds", []):
        table.add_row(
            kind["export_name"],
            kind["output_key"],
            _yes_no(kind["validated"]),
            _yes_no(kind["aggregated"]),
            _yes_no(kind["passthrough"]),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        console.print(Text(f"  {key}:", style="hw.key"), Text(str(value)))


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


_OP_RENDERERS: dict[str, Any] = {
    "inspect": _render_inspect,
    "kinds": _render_kinds,
}
