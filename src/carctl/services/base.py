"""BaseService — abstract foundation for all carctl services.

Every service may receive a :class:`PluginManager` at construction time.
Lifecycle events are dispatched through its hook relay; without one,
dispatch is a no-op.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from carctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from carctl.domain.errors import CarctlError
    from carctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ReportService(BaseService):
            def build_car(self, ...) -> ServiceResult:
                try:
                    ...
                except CarctlError as exc:
                    return self._error_result("build_car", exc)
    """

    def __init__(self, plugins: PluginManager | None = None) -> None:
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call a plugin hook synchronously. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Plugin hook failed for %s", hook_name, exc_info=True)
            warnings.append(f"Plugin hook failed for {hook_name}")

    @staticmethod
    def _error_result(
        op: str,
        exc: CarctlError,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Translate a carctl error into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail or {}),
            warnings=warnings or [],
        )
