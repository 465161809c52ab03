"""ReportService — build cars and turn them into documents.

Pipeline: BUILD → RENDER → WRAP → PERSIST (optional) → EVENT → RESPOND

:func:`create_car_document` is the plain-Python entry point (raises on
failure). :class:`ReportService` wraps the same pipeline for the CLI and
returns :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from carctl.domain.car import Car, CarBuilder
from carctl.domain.errors import CarctlError, DocumentWriteError, UnsupportedFormatError
from carctl.domain.report import generate_content
from carctl.domain.types import FeatureGroup
from carctl.infrastructure.documents import SUPPORTED_FORMATS, create_document
from carctl.services.base import BaseService
from carctl.services.result import ServiceResult

if TYPE_CHECKING:
    from carctl.infrastructure.documents import Document

logger = logging.getLogger(__name__)


def create_car_document(car: Car, fmt: str, filename: str | Path | None = None) -> Document:
    """Render *car* as *fmt* and wrap it in the matching document variant.

    Saves to *filename* only when one is given. The document is returned
    either way.

    Raises:
        UnsupportedFormatError: *fmt* is not a known document format.
        DocumentWriteError: saving to *filename* failed.
    """
    content = generate_content(car, fmt)
    document = create_document(fmt, content)
    if filename is not None:
        document.save(filename)
    return document


class ReportService(BaseService):
    """Car building and report generation for the CLI."""

    def build_car(
        self,
        *,
        engine: str | None = None,
        transmission: str | None = None,
        interior: Sequence[str] = (),
        exterior: Sequence[str] = (),
        safety: Sequence[str] = (),
    ) -> ServiceResult:
        """Build a car from option values and return its fields."""
        warnings: list[str] = []
        try:
            car = self._build(
                warnings,
                engine=engine,
                transmission=transmission,
                interior=interior,
                exterior=exterior,
                safety=safety,
            )
        except CarctlError as exc:
            return self._error_result("build_car", exc, warnings=warnings)

        return ServiceResult(
            ok=True,
            op="build_car",
            data={**car.to_dict(), "text": str(car)},
            warnings=warnings,
        )

    def create_report(
        self,
        fmt: str,
        *,
        output: str | Path | None = None,
        engine: str | None = None,
        transmission: str | None = None,
        interior: Sequence[str] = (),
        exterior: Sequence[str] = (),
        safety: Sequence[str] = (),
    ) -> ServiceResult:
        """Build a car, render it as *fmt*, and optionally save to *output*."""
        warnings: list[str] = []
        try:
            car = self._build(
                warnings,
                engine=engine,
                transmission=transmission,
                interior=interior,
                exterior=exterior,
                safety=safety,
            )
            document = create_car_document(car, fmt, output)
        except UnsupportedFormatError as exc:
            return self._error_result(
                "create_report",
                exc,
                detail={"format": exc.format, "supported": list(SUPPORTED_FORMATS)},
                warnings=warnings,
            )
        except DocumentWriteError as exc:
            return self._error_result(
                "create_report", exc, detail={"path": str(output)}, warnings=warnings
            )
        except CarctlError as exc:
            return self._error_result("create_report", exc, warnings=warnings)

        path = str(Path(output)) if output is not None else None
        if path is not None:
            logger.debug("Saved %s report to %s", fmt, path)
            self._dispatch_event("post_save", {"fmt": fmt, "path": path}, warnings)

        data: dict[str, Any] = {
            "format": fmt,
            "document": document.tag,
            "content": document.content,
            "preview": document.display(),
            "path": path,
            "saved": path is not None,
            "car": car.to_dict(),
            "car_text": str(car),
        }
        return ServiceResult(ok=True, op="create_report", data=data, warnings=warnings)

    def list_formats(self) -> ServiceResult:
        """Return the document formats the factory accepts."""
        return ServiceResult(
            ok=True,
            op="list_formats",
            data={"formats": list(SUPPORTED_FORMATS)},
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _build(
        self,
        warnings: list[str],
        *,
        engine: str | None,
        transmission: str | None,
        interior: Sequence[str],
        exterior: Sequence[str],
        safety: Sequence[str],
    ) -> Car:
        car = CarBuilder.from_options(
            engine=engine,
            transmission=transmission,
            interior=interior,
            exterior=exterior,
            safety=safety,
        ).build()
        self._dispatch_event(
            "post_build",
            {
                "engine": car.engine,
                "transmission": car.transmission,
                "features": {str(group): list(getattr(car, group)) for group in FeatureGroup},
            },
            warnings,
        )
        return car
