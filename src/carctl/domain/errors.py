"""Error kinds raised by the domain and infrastructure layers.

Every error carries a stable ``code`` so the service layer can translate it
into a :class:`~carctl.services.result.ServiceError` without string matching.
"""

from __future__ import annotations


class CarctlError(Exception):
    """Base class for all carctl errors."""

    code: str = "ERROR"


class InvalidArgumentError(CarctlError, ValueError):
    """A setter received a value outside its allowed domain."""

    code = "INVALID_ARGUMENT"


class InvalidStateError(CarctlError):
    """An operation was attempted before its preconditions were met."""

    code = "INVALID_STATE"


class UnsupportedFormatError(CarctlError, ValueError):
    """A document format name is not one of the known formats."""

    code = "UNSUPPORTED_FORMAT"

    def __init__(self, fmt: str) -> None:
        super().__init__(f"Unsupported format: {fmt}")
        self.format = fmt


class DocumentWriteError(CarctlError, OSError):
    """The persistence collaborator could not write a document."""

    code = "IO_FAILURE"
