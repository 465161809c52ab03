"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.  Field values
are always wrapped in :class:`~rich.text.Text` so bracketed report values
(``[ABS, Rear Camera]``) are never parsed as Rich markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.rule import Rule
from rich.text import Text

from carctl.domain.car import format_field_value
from carctl.output.console import create_console, get_output, style_for_format

if TYPE_CHECKING:
    from rich.console import Console

    from carctl.services.result import ServiceResult

_CAR_LABELS = ("Engine", "Transmission", "Interior", "Exterior", "Safety")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_formats":
        return "\n".join(result.data.get("formats", []))
    if result.op == "create_report" and result.data.get("path"):
        return str(result.data["path"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="car.ok")
    op = Text(f"  {result.op}", style="car.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="car.key")
    text = format_field_value(value) if isinstance(value, (list, tuple)) else str(value)
    v = Text(text, style=style)
    console.print(k, v, end="", soft_wrap=True)
    console.print()


def _car_fields(console: Console, car: dict[str, Any]) -> None:
    """Print the car projection in report order."""
    for label in _CAR_LABELS:
        _field(console, label, car.get(label.lower()), style="car.label")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="car.error")
    op = Text(f"  {result.op}", style="car.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_build_car(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _car_fields(console, result.data)


def _render_create_report(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    fmt = str(d.get("format", ""))
    _field(console, "format", fmt, style=style_for_format(fmt))
    _field(console, "document", d.get("document"))
    if d.get("saved"):
        _field(console, "path", d.get("path"), style="car.path")
    else:
        _field(console, "path", "(not saved)", style="car.path")

    if verbose and isinstance(d.get("car"), dict):
        console.print()
        console.print(Text("  car:", style="dim"))
        _car_fields(console, d["car"])

    preview = d.get("preview")
    if preview is not None:
        console.print()
        console.print(Rule(f"{d.get('document', '')} preview", style="dim"))
        console.print(Text(str(preview)), soft_wrap=True)


def _render_formats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for fmt in result.data.get("formats", []):
        console.print(Text(f"  {fmt}", style=style_for_format(fmt)))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "build_car": _render_build_car,
    "create_report": _render_create_report,
    "list_formats": _render_formats,
}
