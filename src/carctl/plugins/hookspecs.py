"""Pluggy hook specifications for carctl lifecycle events.

Hooks are called synchronously by the service layer after the
corresponding operation has succeeded.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("carctl")
hookimpl = pluggy.HookimplMarker("carctl")


class CarctlHookSpec:
    """Hook specifications for the carctl plugin system."""

    @hookspec
    def post_build(
        self,
        engine: str,
        transmission: str,
        features: dict[str, list[str]],
    ) -> None:
        """Called after a car has been built and validated."""

    @hookspec
    def post_save(self, fmt: str, path: str) -> None:
        """Called after a document has been written to *path*."""
