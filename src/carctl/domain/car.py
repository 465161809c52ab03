"""Car model and the validating CarBuilder.

The builder is the only mutable piece: it accumulates fields and feature
lists, validates on :meth:`CarBuilder.build`, hands out a frozen
:class:`Car`, and starts over from an empty working state.

``Car.to_ordered_fields()`` is the single projection used by every
rendering (text, HTML, CLI output). It is a list of pairs so field order
is part of the contract, not an accident of dict ordering.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Self

from pydantic import BaseModel, ValidationError

from carctl.domain.errors import InvalidArgumentError, InvalidStateError
from carctl.domain.types import Transmission

logger = logging.getLogger(__name__)

FieldValue = str | Sequence[str] | None

_TRANSMISSIONS = frozenset(t.value for t in Transmission)


def format_field_value(value: FieldValue) -> str:
    """Render one field value for text and HTML reports.

    Sequences use bracket-comma-space (``[a, b]``); strings are verbatim.
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        return value
    return "[" + ", ".join(str(item) for item in value) + "]"


# ---------------------------------------------------------------------------
# Car
# ---------------------------------------------------------------------------


class Car(BaseModel):
    """A finished car configuration.

    Frozen once constructed; feature lists are stored as tuples.
    """

    model_config = {"frozen": True}

    engine: str | None = None
    transmission: str | None = None
    interior: tuple[str, ...] = ()
    exterior: tuple[str, ...] = ()
    safety: tuple[str, ...] = ()

    def is_valid(self) -> bool:
        """True when both engine and transmission are present and non-empty."""
        return bool(self.engine) and bool(self.transmission)

    def to_ordered_fields(self) -> list[tuple[str, FieldValue]]:
        """Return ``(label, value)`` pairs in report order."""
        return [
            ("Engine", self.engine),
            ("Transmission", self.transmission),
            ("Interior", list(self.interior)),
            ("Exterior", list(self.exterior)),
            ("Safety", list(self.safety)),
        ]

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly projection with lower-case keys."""
        return {label.lower(): value for label, value in self.to_ordered_fields()}

    def __str__(self) -> str:
        return "\n".join(
            f"{label}: {format_field_value(value)}" for label, value in self.to_ordered_fields()
        )


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class CarBuilder:
    """Fluent, validating accumulator for :class:`Car`.

    Not thread-safe. Every setter returns the builder itself::

        car = (
            CarBuilder()
            .set_engine("V6")
            .set_transmission("automatic")
            .add_safety("ABS")
            .build()
        )
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._engine: str | None = None
        self._transmission: str | None = None
        self._interior: list[str] = []
        self._exterior: list[str] = []
        self._safety: list[str] = []

    @classmethod
    def from_options(
        cls,
        *,
        engine: str | None = None,
        transmission: str | None = None,
        interior: Iterable[str] = (),
        exterior: Iterable[str] = (),
        safety: Iterable[str] = (),
    ) -> Self:
        """Create a builder pre-loaded with the given options.

        Runs the same setters as chained calls, so ``transmission`` is
        validated here. ``None`` leaves a field unset.
        """
        builder = cls()
        if engine is not None:
            builder.set_engine(engine)
        if transmission is not None:
            builder.set_transmission(transmission)
        for feature in interior:
            builder.add_interior(feature)
        for feature in exterior:
            builder.add_exterior(feature)
        for feature in safety:
            builder.add_safety(feature)
        return builder

    def set_engine(self, engine: str) -> Self:
        self._engine = engine
        return self

    def set_transmission(self, transmission: str) -> Self:
        """Set the transmission; only ``manual`` or ``automatic`` are accepted."""
        if transmission not in _TRANSMISSIONS:
            msg = "Transmission must be manual or automatic"
            raise InvalidArgumentError(msg)
        self._transmission = str(transmission)
        return self

    def add_interior(self, feature: str) -> Self:
        self._interior.append(feature)
        return self

    def add_exterior(self, feature: str) -> Self:
        self._exterior.append(feature)
        return self

    def add_safety(self, feature: str) -> Self:
        self._safety.append(feature)
        return self

    def build(self) -> Car:
        """Validate and return the accumulated car, then reset the builder.

        Raises:
            InvalidArgumentError: a field value is not a valid string.
            InvalidStateError: engine or transmission is missing.
        """
        try:
            car = Car(
                engine=self._engine,
                transmission=self._transmission,
                interior=tuple(self._interior),
                exterior=tuple(self._exterior),
                safety=tuple(self._safety),
            )
        except ValidationError as exc:
            msg = f"Invalid car field: {exc.errors()[0]['msg']}"
            raise InvalidArgumentError(msg) from exc
        if not car.is_valid():
            msg = "Car must have engine and transmission"
            raise InvalidStateError(msg)
        self._reset()
        logger.debug("Built car: engine=%s transmission=%s", car.engine, car.transmission)
        return car
