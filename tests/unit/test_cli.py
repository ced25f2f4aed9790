"""Tests for CLI commands using Click's CliRunner."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from adascan.cli import main


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("ADASCAN_PROFILE", raising=False)


def test_main_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "adascan" in result.output
    assert "scan" in result.output
    assert "pdf" in result.output
    assert "server" in result.output


def test_main_version():
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_scan_json_output(fake_engine):
    runner = CliRunner()
    with patch("adascan.cli.scan.Pa11yEngine", return_value=fake_engine):
        result = runner.invoke(main, ["scan", "https://example.org/", "--json"])

    # Error-type findings present
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["summary"]["total"] == 4
    assert data["totalUniqueIssues"] == 3
    assert fake_engine.calls == ["https://example.org/"]


def test_scan_table_output(fake_engine):
    runner = CliRunner()
    with patch("adascan.cli.scan.Pa11yEngine", return_value=fake_engine):
        result = runner.invoke(main, ["scan", "https://example.org/"])
    assert result.exit_code == 1


def test_scan_clean_page_exits_zero(engine_factory):
    runner = CliRunner()
    with patch("adascan.cli.scan.Pa11yEngine", return_value=engine_factory()):
        result = runner.invoke(main, ["scan", "https://example.org/", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["detailedIssues"] == []


def test_scan_failure_exits_two(failing_engine):
    runner = CliRunner()
    with patch("adascan.cli.scan.Pa11yEngine", return_value=failing_engine):
        result = runner.invoke(main, ["scan", "https://nowhere.invalid/"])
    assert result.exit_code == 2


def test_scan_uses_profile_option(fake_engine, tmp_path: Path):
    profile = tmp_path / "profile.yaml"
    profile.write_text("name: strict\nstandard: WCAG2AAA\n")
    runner = CliRunner()
    with patch("adascan.cli.scan.Pa11yEngine", return_value=fake_engine) as engine_cls:
        runner.invoke(main, ["--profile", str(profile), "scan", "https://example.org/"])
    used_profile = engine_cls.call_args.args[0]
    assert used_profile.standard == "WCAG2AAA"


def test_scan_invalid_profile(tmp_path: Path):
    profile = tmp_path / "broken.yaml"
    profile.write_text("just a string")
    runner = CliRunner()
    result = runner.invoke(main, ["--profile", str(profile), "scan", "https://example.org/"])
    assert result.exit_code == 2


def test_scan_malformed_profile_yaml(tmp_path: Path):
    profile = tmp_path / "malformed.yaml"
    profile.write_text("name: [unclosed\n")
    runner = CliRunner()
    result = runner.invoke(main, ["--profile", str(profile), "scan", "https://example.org/"])
    assert result.exit_code == 2
    assert "Invalid scan profile" in result.output


def test_pdf_json_output(pdf_dir: Path):
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["pdf", str(pdf_dir / "tagged.pdf"), str(pdf_dir / "untagged.pdf"), "--json"],
    )
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["totalFiles"] == 2
    assert data["summary"] == {"totalIssues": 2, "totalWarnings": 2}


def test_pdf_clean_file_exits_zero(pdf_dir: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["pdf", str(pdf_dir / "tagged.pdf")])
    assert result.exit_code == 0


def test_pdf_requires_files():
    runner = CliRunner()
    result = runner.invoke(main, ["pdf"])
    assert result.exit_code != 0


def test_server_help():
    runner = CliRunner()
    result = runner.invoke(main, ["server", "--help"])
    assert result.exit_code == 0
    assert "--port" in result.output


def test_server_starts_with_profile(tmp_path: Path):
    profile = tmp_path / "profile.yaml"
    profile.write_text("name: strict\nstandard: WCAG2AAA\n")
    runner = CliRunner()
    with patch("uvicorn.run") as run:
        result = runner.invoke(main, ["--profile", str(profile), "server", "--port", "8123"])
    assert result.exit_code == 0
    app = run.call_args.args[0]
    assert run.call_args.kwargs["port"] == 8123
    assert app.state.config.web_port == 8123


def test_server_rejects_broken_profile(tmp_path: Path):
    profile = tmp_path / "broken.yaml"
    profile.write_text("- not\n- a mapping\n")
    runner = CliRunner()
    with patch("uvicorn.run") as run:
        result = runner.invoke(main, ["--profile", str(profile), "server"])
    assert result.exit_code == 2
    run.assert_not_called()
