"""Rich Console factory and theme for hookwright output.

Consoles render into a StringIO buffer so renderers stay pure
``ServiceResult -> str`` functions. Outside a TTY (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

HW_THEME = Theme(
    {
        "hw.ok": "bold green",
        "hw.error": "bold red",
        "hw.warning": "bold yellow",
        "hw.op": "bold cyan",
        "hw.key": "dim",
        "hw.kind": "bold blue",
        "hw.hook": "green",
        "hw.module": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=HW_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
