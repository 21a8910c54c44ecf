"""Tests for the process CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from lemonctl.cli import cli
from tests.conftest import wire


def _write(path: Path, payload: object) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


@pytest.mark.usefixtures("_isolated_stand")
class TestProcessCommand:
    def test_committed_batch(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "orders.json", [wire(20, 1, 4), wire(10, 2, 2)])
        result = cli_runner.invoke(cli, ["process", file])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "[20, 10]" in result.output

    def test_quiet_prints_result_only(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "orders.json", [wire(10, 1, 2)])
        result = cli_runner.invoke(cli, ["-q", "process", file])
        assert result.exit_code == 0
        assert result.output == "[10]\n"

    def test_refused_batch_exits_zero(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "orders.json", [wire(10, 1, 1)])
        result = cli_runner.invoke(cli, ["-q", "process", file])
        assert result.exit_code == 0
        assert result.output == "null\n"

    def test_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "orders.json", [wire(5, 1), wire(10, 2, 1)])
        result = cli_runner.invoke(cli, ["--json", "process", file])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "process_orders"
        assert data["data"]["result"] == "[10]"
        assert data["data"]["committed"] is True
        assert data["data"]["lemonades"] == 2
        assert data["data"]["order_count"] == 2

    def test_reads_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "process", "-"], input=json.dumps([wire(5, 1)])
        )
        assert result.exit_code == 0
        assert result.output == "[5]\n"

    def test_state_persists_between_runs(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        day_one = _write(tmp_path / "d1.json", [wire(10, 1, 2), wire(10, 2, 2), wire(5, 3, 1)])
        day_two = _write(tmp_path / "d2.json", [wire(10, 1, 1)])
        assert cli_runner.invoke(cli, ["-q", "process", day_one]).output == "[10, 10, 5]\n"
        assert cli_runner.invoke(cli, ["-q", "process", day_two]).output == "[10]\n"

    def test_empty_array_is_null(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "orders.json", [])
        result = cli_runner.invoke(cli, ["-q", "process", file])
        assert result.exit_code == 0
        assert result.output == "null\n"


@pytest.mark.usefixtures("_isolated_stand")
class TestProcessInputErrors:
    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "process", "nope.json"])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "invalid_file"

    def test_malformed_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("[{", encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "process", str(bad)])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "invalid_file"

    def test_unknown_bill(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "orders.json", [wire(50, 1)])
        result = cli_runner.invoke(cli, ["--json", "process", file])
        assert result.exit_code == 1
        error = json.loads(result.stderr)["error"]
        assert error["code"] == "invalid_input"
        assert "Invalid bill value: 50" in error["message"]

    def test_wrong_shape(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        file = _write(tmp_path / "orders.json", {"orders": []})
        result = cli_runner.invoke(cli, ["process", file])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
        assert "Invalid input" in result.stderr


def test_examples_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["process", "--examples"])
    assert result.exit_code == 0
    assert "lemonctl process orders.json" in result.output
