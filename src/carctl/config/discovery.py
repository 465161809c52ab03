"""Locate ``carctl.toml``.

``CARCTL_CONFIG`` pins the file explicitly; otherwise the nearest
``carctl.toml`` in the start directory or any of its ancestors wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "carctl.toml"
CONFIG_ENV_VAR = "CARCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``CARCTL_CONFIG`` pointing at a missing file disables discovery.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
