"""Filesystem persistence for generated documents.

The single write path for every document variant. Overwrites existing
files; there is no partial-write recovery.
"""

from __future__ import annotations

import logging
from pathlib import Path

from carctl.domain.errors import DocumentWriteError

logger = logging.getLogger(__name__)


def write_document(path: str | Path, text: str) -> Path:
    """Write *text* to *path* as UTF-8, replacing any existing file.

    Creates parent directories if they don't exist. Text that cannot be
    encoded is rejected before the target is touched.

    Raises:
        DocumentWriteError: the text is not encodable, or the directory
            or file could not be written.
    """
    target = Path(path)
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = f"Could not write {target}: {exc}"
        raise DocumentWriteError(msg) from exc
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        msg = f"Could not write {target}: {exc}"
        raise DocumentWriteError(msg) from exc
    logger.debug("Wrote %d bytes to %s", len(data), target)
    return target
