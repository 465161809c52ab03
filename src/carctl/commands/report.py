"""Commands: render a car report as a document, list document formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from carctl.commands._base import CarCommand, car_options

if TYPE_CHECKING:
    from carctl.commands._context import AppContext

_REPORT_EXAMPLES = """\
  carctl report --engine V6 --transmission automatic --format html --output car_report.html
  carctl report --engine V6 --transmission manual --format pdf
  carctl report --engine V6 --transmission manual --format word --output out/car.docx"""


@click.command(cls=CarCommand, examples=_REPORT_EXAMPLES)
@car_options
@click.option(
    "--format",
    "fmt",
    default=None,
    help="Document format: pdf, word, or html (default from [report] config).",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Save the document to this file (omit to preview only).",
)
@click.pass_obj
def report(
    app: AppContext,
    engine: str | None,
    transmission: str | None,
    interior: tuple[str, ...],
    exterior: tuple[str, ...],
    safety: tuple[str, ...],
    fmt: str | None,
    output: str | None,
) -> None:
    """Build a car and render its configuration report as a document."""
    from carctl.services.report import ReportService

    report_cfg = app.settings.report
    app.emit(
        ReportService(app.plugins).create_report(
            fmt or report_cfg.default_format,
            output=output or report_cfg.default_output,
            engine=engine,
            transmission=transmission,
            interior=interior,
            exterior=exterior,
            safety=safety,
        )
    )


@click.command(cls=CarCommand, examples="  carctl formats\n  carctl --json formats")
@click.pass_obj
def formats(app: AppContext) -> None:
    """List the supported document formats."""
    from carctl.services.report import ReportService

    app.emit(ReportService(app.plugins).list_formats())
