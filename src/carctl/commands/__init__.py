"""Subcommand modules for carctl.

Provides register_commands() which uses deferred imports to keep
``carctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from carctl.commands.build import build
    from carctl.commands.demo import demo
    from carctl.commands.report import formats, report

    cli.add_command(build)
    cli.add_command(report)
    cli.add_command(formats)
    cli.add_command(demo)
