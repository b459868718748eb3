from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from main import cli


@pytest.fixture
def runner(tmp_path: Path, clean_env) -> CliRunner:
    clean_env.setenv("LOG_DIR", str(tmp_path / "logs"))
    return CliRunner()


def _invoke(runner: CliRunner, tmp_path: Path, *args: str):
    return runner.invoke(cli, ["--env-file", str(tmp_path / "none.env"), *args])


def _write_log(tmp_path: Path, text: str) -> Path:
    log_file = tmp_path / "logcat.txt"
    log_file.write_text(text, encoding="utf-8")
    return log_file


def test_rules_prints_legend(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "rules")
    assert result.exit_code == 0
    assert "Pattern Legend" in result.output
    assert "Root Access" in result.output
    assert "Kernel Issues" in result.output


def test_load_prints_every_line(runner: CliRunner, tmp_path: Path) -> None:
    log_file = _write_log(tmp_path, "normal boot\nkernel panic - not syncing\nnormal shutdown\n")
    result = _invoke(runner, tmp_path, "load", str(log_file))
    assert result.exit_code == 0
    assert "normal boot\nkernel panic - not syncing\nnormal shutdown" in result.output


def test_analyze_reports_original_line_numbers(runner: CliRunner, tmp_path: Path) -> None:
    log_file = _write_log(
        tmp_path,
        "normal boot\navc: denied { read } scontext=u:r:app:s0\nkernel panic - not syncing\nnormal shutdown\n",
    )
    result = _invoke(runner, tmp_path, "analyze", str(log_file))
    assert result.exit_code == 0
    assert "Found 2 suspicious entries:" in result.output
    assert "[Line 2] avc: denied { read } scontext=u:r:app:s0" in result.output
    assert "[Line 3] kernel panic - not syncing" in result.output


def test_analyze_clean_log(runner: CliRunner, tmp_path: Path) -> None:
    log_file = _write_log(tmp_path, "normal boot\n")
    result = _invoke(runner, tmp_path, "analyze", str(log_file))
    assert result.exit_code == 0
    assert "No suspicious activity found!" in result.output


def test_analyze_empty_log(runner: CliRunner, tmp_path: Path) -> None:
    log_file = _write_log(tmp_path, "")
    result = _invoke(runner, tmp_path, "analyze", str(log_file))
    assert result.exit_code == 0
    assert "No suspicious activity found!" in result.output


def test_analyze_filters_by_label(runner: CliRunner, tmp_path: Path) -> None:
    log_file = _write_log(tmp_path, "virus found\nkernel panic\ntrojan found\n")
    result = _invoke(runner, tmp_path, "analyze", str(log_file), "--label", "malware/trojans")
    assert result.exit_code == 0
    assert "[Line 1] virus found" in result.output
    assert "[Line 3] trojan found" in result.output
    assert "kernel panic" not in result.output


def test_analyze_rejects_unknown_label(runner: CliRunner, tmp_path: Path) -> None:
    log_file = _write_log(tmp_path, "virus found\n")
    result = _invoke(runner, tmp_path, "analyze", str(log_file), "--label", "Nope")
    assert result.exit_code == 2
    assert "Unknown category" in result.output


def test_analyze_summary_table(runner: CliRunner, tmp_path: Path) -> None:
    log_file = _write_log(tmp_path, "virus found\n")
    result = _invoke(runner, tmp_path, "analyze", str(log_file), "--summary")
    assert result.exit_code == 0
    assert "Matches per category" in result.output


def test_missing_file_is_reported(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "analyze", str(tmp_path / "missing.txt"))
    assert result.exit_code == 1
    assert "file not found" in result.output


def test_missing_argument_is_rejected(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "analyze")
    assert result.exit_code == 2
