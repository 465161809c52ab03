"""Shared pytest fixtures and test helpers for carctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from carctl.domain.car import Car, CarBuilder

_SAMPLE_HTML_CONTENT = (
    "<h1>Car Configuration Report</h1><ul>"
    "<li><b>Engine:</b> V6</li>"
    "<li><b>Transmission:</b> automatic</li>"
    "<li><b>Interior:</b> [Leather Seats, GPS Navigation]</li>"
    "<li><b>Exterior:</b> [Blue Color, Alloy Wheels]</li>"
    "<li><b>Safety:</b> [ABS, Rear Camera]</li>"
    "</ul>"
)

_SAMPLE_CAR_OPTIONS = [
    "--engine",
    "V6",
    "--transmission",
    "automatic",
    "--interior",
    "Leather Seats",
    "--interior",
    "GPS Navigation",
    "--exterior",
    "Blue Color",
    "--exterior",
    "Alloy Wheels",
    "--safety",
    "ABS",
    "--safety",
    "Rear Camera",
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_car() -> Car:
    """The V6 / automatic car used throughout the report tests."""
    return (
        CarBuilder()
        .set_engine("V6")
        .set_transmission("automatic")
        .add_interior("Leather Seats")
        .add_interior("GPS Navigation")
        .add_exterior("Blue Color")
        .add_exterior("Alloy Wheels")
        .add_safety("ABS")
        .add_safety("Rear Camera")
        .build()
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no carctl.toml above it.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes that write reports relative to CWD.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CARCTL_CONFIG", str(tmp_path / "missing.toml"))


@pytest.fixture
def sample_html_content() -> str:
    """Expected HTML report content for ``sample_car``."""
    return _SAMPLE_HTML_CONTENT


@pytest.fixture
def sample_car_options() -> list[str]:
    """CLI options that build ``sample_car``."""
    return list(_SAMPLE_CAR_OPTIONS)
