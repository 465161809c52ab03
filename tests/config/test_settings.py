"""Tests for CarctlSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from carctl.config.settings import CarctlSettings


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("CARCTL_CONFIG", "CARCTL_REPORT__DEFAULT_FORMAT", "CARCTL_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = CarctlSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.report.default_format == "html"
        assert settings.report.default_output is None
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CarctlSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "carctl.toml"
        toml.write_text('[report]\ndefault_format = "pdf"\ndefault_output = "out/car.pdf"\n')
        settings = CarctlSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml.resolve()
        assert settings.report.default_format == "pdf"
        assert settings.report.default_output == "out/car.pdf"
        assert settings.plugins.enabled is True

    def test_walk_up_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "carctl.toml").write_text("[plugins]\nenabled = false\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = CarctlSettings.from_cli(start=nested)
        assert settings.plugins.enabled is False

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[report]\ndefault_format = "word"\n')
        settings = CarctlSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.report.default_format == "word"
        assert settings.config_path == custom

    def test_missing_explicit_config_uses_defaults(self, tmp_path: Path) -> None:
        settings = CarctlSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.report.default_format == "html"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "carctl.toml").write_text("[report\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CarctlSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = CarctlSettings.from_cli(start=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "carctl.toml").write_text('[report]\ndefault_format = "pdf"\n')
        monkeypatch.setenv("CARCTL_REPORT__DEFAULT_FORMAT", "word")
        settings = CarctlSettings.from_cli(start=tmp_path)
        assert settings.report.default_format == "word"

    def test_cli_flags_override_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CARCTL_VERBOSE", "true")
        settings = CarctlSettings.from_cli(start=tmp_path, verbose=False)
        assert settings.verbose is False
