"""Classification enums for car options and document formats."""

from __future__ import annotations

from enum import StrEnum


class Transmission(StrEnum):
    """Transmission kinds accepted by the builder (exact, case-sensitive)."""

    MANUAL = "manual"
    AUTOMATIC = "automatic"


class DocumentFormat(StrEnum):
    """Document formats known to the document factory."""

    PDF = "pdf"
    WORD = "word"
    HTML = "html"


class FeatureGroup(StrEnum):
    """Repeated feature lists on a car."""

    INTERIOR = "interior"
    EXTERIOR = "exterior"
    SAFETY = "safety"
