"""Mini README: Tests for the Typer scenario CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bankqueue.configuration import get_settings
from main_teller import cli

runner = CliRunner()


def test_demo_prints_report() -> None:
    result = runner.invoke(cli, ["demo", "--capacity", "4"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["capacity_per_tier"] == 4
    assert payload["balances"]["321"] == "2800"
    assert payload["rejected"] == 2


def test_run_reports_capacity_errors(tmp_path: Path) -> None:
    path = tmp_path / "scenario.json"
    path.write_text(
        json.dumps(
            {
                "accounts": [{"account_id": 1, "balance": 100}],
                "transactions": [
                    {"account_id": 1, "type": "deposit", "amount": 5},
                    {"account_id": 1, "type": "deposit", "amount": 6},
                ],
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["run", str(path), "--capacity", "1"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error:" in result.output
    assert "heap is full" in result.output


def test_run_reports_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(cli, ["run", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_run_reports_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "scenario.json"
    path.write_bytes(b'{"accounts": [{"account_id": 1, "balance": "\xff"}]}')

    result = runner.invoke(cli, ["run", str(path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error:" in result.output


def test_invalid_log_level_exits_with_message(monkeypatch: pytest.MonkeyPatch) -> None:
    """Bad settings are reported instead of raising a validation traceback."""

    monkeypatch.setenv("BANKQUEUE_LOG_LEVEL", "chatty")
    get_settings.cache_clear()
    try:
        result = runner.invoke(cli, ["demo"])
    finally:
        get_settings.cache_clear()

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "invalid BANKQUEUE_ settings" in result.output
