"""Tests for the document writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from carctl.domain.errors import DocumentWriteError
from carctl.infrastructure.filesystem import write_document


class TestWriteDocument:
    def test_writes_text(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        result = write_document(target, "hello")
        assert result == target
        assert target.read_text(encoding="utf-8") == "hello"

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "out.txt"
        write_document(target, "nested")
        assert target.read_text(encoding="utf-8") == "nested"

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        target.write_text("previous", encoding="utf-8")
        write_document(target, "next")
        assert target.read_text(encoding="utf-8") == "next"

    def test_utf8(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        write_document(target, "Sitzheizung · Ölkühler")
        assert target.read_text(encoding="utf-8") == "Sitzheizung · Ölkühler"

    def test_directory_target_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentWriteError, match="Could not write"):
            write_document(tmp_path, "x")

    def test_error_chains_os_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(DocumentWriteError) as exc_info:
            write_document(blocker / "child.txt", "x")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_unencodable_text_raises_without_creating_file(self, tmp_path: Path) -> None:
        target = tmp_path / "reports" / "car.html"
        with pytest.raises(DocumentWriteError, match="Could not write") as exc_info:
            write_document(target, "<html><body>V6\udcff</body></html>")
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
        assert not target.exists()
        assert not target.parent.exists()

    def test_unencodable_text_keeps_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "car.html"
        target.write_text("previous", encoding="utf-8")
        with pytest.raises(DocumentWriteError):
            write_document(target, "V6\udcff")
        assert target.read_text(encoding="utf-8") == "previous"
