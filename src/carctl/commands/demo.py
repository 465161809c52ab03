"""Command: the sample V6 build, saved as an HTML report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from carctl.commands._base import CarCommand

if TYPE_CHECKING:
    from carctl.commands._context import AppContext

DEMO_CAR: dict[str, Any] = {
    "engine": "V6",
    "transmission": "automatic",
    "interior": ("Leather Seats", "GPS Navigation"),
    "exterior": ("Blue Color", "Alloy Wheels"),
    "safety": ("ABS", "Rear Camera"),
}

DEMO_OUTPUT = "car_report.html"


@click.command(
    cls=CarCommand,
    examples="""\
  carctl demo
  carctl demo --output /tmp/car_report.html""",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=DEMO_OUTPUT,
    show_default=True,
    help="Where to save the HTML report.",
)
@click.pass_obj
def demo(app: AppContext, output: str) -> None:
    """Build the sample car, save its HTML report, and print both."""
    from carctl.services.report import ReportService

    result = ReportService(app.plugins).create_report("html", output=output, **DEMO_CAR)
    if not result.ok or app.settings.json_output or app.settings.quiet:
        app.emit(result)
        return

    click.echo("Car Built Successfully:\n")
    click.echo(result.data["car_text"])
    click.echo("\nDocument Preview:\n")
    click.echo(result.data["preview"])
    click.echo(f"\nHTML file saved as: {output}")
    for warning in result.warnings:
        click.echo(f"WARNING: {warning}", err=True)
