"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) in the ``carctl.plugins`` group.
Capabilities: lifecycle hooks (see :mod:`carctl.plugins.hookspecs`).
"""

from __future__ import annotations

import logging

import pluggy

from carctl.plugins.hookspecs import CarctlHookSpec

PROJECT_NAME = "carctl"
ENTRYPOINT_GROUP = "carctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, registration, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CarctlHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load plugins registered under the ``carctl.plugins`` entry point group.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRYPOINT_GROUP)
        names = self.list_plugin_names()
        logger.debug("Plugins loaded: %s", ", ".join(names) or "none")
        return names

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]
