"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, carctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- carctl.toml sections ---


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    default_format: str = "html"
    default_output: str | None = None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True

