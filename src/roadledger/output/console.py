"""Rich Console factory and theme for roadledger output.

Consoles render into a StringIO buffer so renderers keep a plain
``ServiceResult -> str`` contract. In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROAD_THEME = Theme(
    {
        "road.ok": "bold green",
        "road.error": "bold red",
        "road.warning": "bold yellow",
        "road.op": "bold cyan",
        "road.key": "dim",
        "road.index": "bold blue",
        "road.city": "bold",
        "road.path": "dim",
        "road.budget": "magenta",
        "road.present": "green",
        "road.absent": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps matrix output stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=ROAD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
