"""Command: build a car configuration and show it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from carctl.commands._base import CarCommand, car_options

if TYPE_CHECKING:
    from carctl.commands._context import AppContext

_BUILD_EXAMPLES = """\
  carctl build --engine V6 --transmission automatic
  carctl build --engine V8 --transmission manual --interior "Leather Seats" --safety ABS
  carctl --json build --engine I4 --transmission manual --exterior "Blue Color\""""


@click.command(cls=CarCommand, examples=_BUILD_EXAMPLES)
@car_options
@click.pass_obj
def build(
    app: AppContext,
    engine: str | None,
    transmission: str | None,
    interior: tuple[str, ...],
    exterior: tuple[str, ...],
    safety: tuple[str, ...],
) -> None:
    """Build a car configuration and print its fields."""
    from carctl.services.report import ReportService

    app.emit(
        ReportService(app.plugins).build_car(
            engine=engine,
            transmission=transmission,
            interior=interior,
            exterior=exterior,
            safety=safety,
        )
    )
