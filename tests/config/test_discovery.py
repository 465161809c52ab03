"""Tests for carctl.toml discovery."""

from pathlib import Path

import pytest

from carctl.config.discovery import CONFIG_ENV_VAR, find_config


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "carctl.toml"
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / "carctl.toml"
        cfg.write_text("")
        deep = tmp_path / "x" / "y" / "z"
        deep.mkdir(parents=True)
        assert find_config(deep) == cfg.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "carctl.toml").write_text("")
        other = tmp_path / "other.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "carctl.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None

    def test_nearest_file_wins(self, tmp_path: Path) -> None:
        (tmp_path / "carctl.toml").write_text("")
        inner = tmp_path / "project"
        inner.mkdir()
        cfg = inner / "carctl.toml"
        cfg.write_text("")
        assert find_config(inner) == cfg.resolve()

    def test_none_when_absent(self, tmp_path: Path) -> None:
        start = tmp_path / "empty"
        start.mkdir()
        found = find_config(start)
        assert found is None or not found.is_relative_to(tmp_path.resolve())
