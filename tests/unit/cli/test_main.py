"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import policy_line, scenario_lines, write_policy_archive


def test_cli_generates_reports_in_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """CLI should write reports next to the archive and confirm on stdout."""
    monkeypatch.chdir(tmp_path)
    write_policy_archive(tmp_path / "FL_insurance.csv.zip", scenario_lines())

    exit_code = main([])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == "Report files generated."
    assert (tmp_path / "tiv2012.txt").read_text(encoding="utf-8") == "360.00\n"


def test_cli_returns_error_code_for_missing_archive(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """CLI should report a missing archive on stderr and exit non-zero."""
    monkeypatch.chdir(tmp_path)

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "error=Failed to read archive" in captured.err


def test_cli_returns_error_code_for_failed_report(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """CLI should exit non-zero when any report cannot be written."""
    monkeypatch.chdir(tmp_path)
    write_policy_archive(tmp_path / "FL_insurance.csv.zip", [policy_line("Alpha", "1", "2")])
    (tmp_path / "count.txt").mkdir()

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Report files generated." not in captured.out
    assert (tmp_path / "most_valuable.txt").exists()


def test_cli_rejects_unknown_arguments() -> None:
    """CLI should not accept configuration flags."""
    with pytest.raises(SystemExit):
        main(["--input", "other.zip"])
