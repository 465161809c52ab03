"""Tests for the demo command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from carctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestDemoCommand:
    def test_output_matches_sample_run(
        self, cli_runner: CliRunner, tmp_path: Path, sample_html_content: str
    ) -> None:
        result = cli_runner.invoke(cli, ["demo"])
        assert result.exit_code == 0, result.output
        page = "<html><body>" + sample_html_content + "</body></html>"
        assert result.output == (
            "Car Built Successfully:\n"
            "\n"
            "Engine: V6\n"
            "Transmission: automatic\n"
            "Interior: [Leather Seats, GPS Navigation]\n"
            "Exterior: [Blue Color, Alloy Wheels]\n"
            "Safety: [ABS, Rear Camera]\n"
            "\n"
            "Document Preview:\n"
            "\n"
            f"{page}\n"
            "\n"
            "HTML file saved as: car_report.html\n"
        )
        assert (tmp_path / "car_report.html").read_text(encoding="utf-8") == page

    def test_custom_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["demo", "--output", "reports/demo.html"])
        assert result.exit_code == 0
        assert (tmp_path / "reports" / "demo.html").is_file()
        assert "HTML file saved as: reports/demo.html" in result.output

    def test_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "demo"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "create_report"
        assert data["data"]["path"] == "car_report.html"
        assert (tmp_path / "car_report.html").is_file()

    def test_write_failure(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "blocker").write_text("x")
        result = cli_runner.invoke(cli, ["demo", "--output", "blocker/car_report.html"])
        assert result.exit_code == 1
        assert "Could not write" in result.output

    def test_quiet_prints_saved_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "demo"])
        assert result.exit_code == 0
        assert result.output.strip() == "car_report.html"
        assert (tmp_path / "car_report.html").is_file()
