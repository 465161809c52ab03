"""Report content rendering for a finished car.

Pure string builders over :meth:`Car.to_ordered_fields`. Values are not
HTML-escaped: the HTML report embeds field text exactly as given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from carctl.domain.car import format_field_value
from carctl.domain.types import DocumentFormat

if TYPE_CHECKING:
    from carctl.domain.car import Car

REPORT_TITLE = "Car Configuration Report"


def is_html_format(fmt: str) -> bool:
    """Case-insensitive check for the ``html`` format name."""
    return fmt.lower() == DocumentFormat.HTML


def render_html(car: Car) -> str:
    """``<h1>`` title plus one ``<li>`` per field, no line breaks."""
    parts = [f"<h1>{REPORT_TITLE}</h1><ul>"]
    for label, value in car.to_ordered_fields():
        parts.append(f"<li><b>{label}:</b> {format_field_value(value)}</li>")
    parts.append("</ul>")
    return "".join(parts)


def render_text(car: Car) -> str:
    """Title line plus one ``Label: value`` line per field."""
    lines = [f"{REPORT_TITLE}\n"]
    for label, value in car.to_ordered_fields():
        lines.append(f"{label}: {format_field_value(value)}\n")
    return "".join(lines)


def generate_content(car: Car, fmt: str) -> str:
    """Render report content; HTML for ``html`` (any case), plain text otherwise."""
    if is_html_format(fmt):
        return render_html(car)
    return render_text(car)
