"""Rich Console factory and theme for folioctl output.

Consoles render to a StringIO buffer so renderers keep a
``render_result() -> str`` contract. Rich disables color codes on its own
when the output is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FOLIO_THEME = Theme(
    {
        "folio.ok": "bold green",
        "folio.error": "bold red",
        "folio.warning": "bold yellow",
        "folio.op": "bold cyan",
        "folio.key": "dim",
        "folio.id": "bold blue",
        "folio.path": "dim",
        "folio.title": "bold",
        "folio.count": "magenta",
        "folio.hash": "yellow",
        "folio.query": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=FOLIO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
