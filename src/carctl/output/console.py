"""Rich Console factory and theme for carctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO
from typing import cast

from rich.console import Console
from rich.theme import Theme

CARCTL_THEME = Theme(
    {
        "car.ok": "bold green",
        "car.error": "bold red",
        "car.warning": "bold yellow",
        "car.op": "bold cyan",
        "car.key": "dim",
        "car.label": "bold",
        "car.path": "dim",
        "car.format.pdf": "red",
        "car.format.word": "blue",
        "car.format.html": "green",
    }
)

_FORMAT_STYLES: dict[str, str] = {
    "pdf": "car.format.pdf",
    "word": "car.format.word",
    "html": "car.format.html",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CARCTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    return cast(StringIO, console.file).getvalue()


def style_for_format(fmt: str) -> str:
    """Return the Rich style name for a document format (any case)."""
    return _FORMAT_STYLES.get(fmt.lower(), "")
