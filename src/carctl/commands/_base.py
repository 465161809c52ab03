"""Custom Click base classes and shared option sets.

``CarCommand`` accepts an ``examples`` parameter; passing ``--examples``
prints them and exits, keeping ``--help`` concise.  ``car_options`` adds
the engine / transmission / feature flags shared by ``build`` and
``report``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class CarCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


P = ParamSpec("P")
R = TypeVar("R")


def car_options(func: Callable[P, R]) -> Callable[P, R]:
    """Apply the car configuration flags to a command.

    Transmission is validated by the builder, not by Click.
    """
    func = click.option(
        "--safety", multiple=True, metavar="FEATURE", help="Safety feature (repeatable)."
    )(func)
    func = click.option(
        "--exterior", multiple=True, metavar="FEATURE", help="Exterior feature (repeatable)."
    )(func)
    func = click.option(
        "--interior", multiple=True, metavar="FEATURE", help="Interior feature (repeatable)."
    )(func)
    func = click.option(
        "--transmission", default=None, help="Transmission: manual or automatic."
    )(func)
    func = click.option("--engine", default=None, help="Engine name (stored verbatim).")(func)
    return func
