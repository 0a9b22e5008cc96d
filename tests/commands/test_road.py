"""Tests for the road command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from roadledger.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestRoadAdd:
    def test_add(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["road", "add", "Rubavu", "Rusizi"])
        assert result.exit_code == 0
        assert "road: Rubavu-Rusizi" in result.stdout
        roads = (tmp_path / "roads.txt").read_text(encoding="utf-8").splitlines()
        assert roads[-1].rstrip() == "10.  Rubavu-Rusizi            0"

    @pytest.mark.parametrize(
        ("first", "second", "code"),
        [
            ("Kigali", "Kigali", "SELF_LOOP"),
            ("Kigali", "Gisenyi", "CITY_NOT_FOUND"),
            ("Kigali", "Muhanga", "DUPLICATE_ROAD"),
        ],
    )
    def test_rejections(
        self, cli_runner: CliRunner, tmp_path: Path, first: str, second: str, code: str
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "road", "add", first, second])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == code
        assert not (tmp_path / "roads.txt").exists()


@pytest.mark.usefixtures("_isolated_cwd")
class TestRoadBudget:
    def test_overwrite(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["road", "budget", "Muhanga", "Kigali", "30.5"])
        assert result.exit_code == 0
        assert "budget: 30.5 billion RWF" in result.stdout
        roads = (tmp_path / "roads.txt").read_text(encoding="utf-8").splitlines()
        assert roads[1].rstrip() == "1.   Kigali-Muhanga           30.5"

    def test_negative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "road", "budget", "Huye", "Rusizi", "--", "-1"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NEGATIVE_BUDGET"

    def test_no_road(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "road", "budget", "Kigali", "Huye", "5"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NO_ROAD"

    def test_non_numeric_amount(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["road", "budget", "Kigali", "Muhanga", "lots"])
        assert result.exit_code == 2

    def test_currency_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "roadledger.toml").write_text('[display]\ncurrency = "million USD"\n')
        result = cli_runner.invoke(cli, ["road", "budget", "Kigali", "Muhanga", "2"])
        assert result.exit_code == 0
        assert "budget: 2 million USD" in result.stdout


@pytest.mark.usefixtures("_isolated_cwd")
class TestRoadQueries:
    def test_list(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["road", "list"])
        assert result.exit_code == 0
        assert "Musanze-Nyagatare" in result.stdout
        assert result.stdout.rstrip().endswith("9 roads")

    def test_list_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "road", "list"])
        assert result.stdout.splitlines()[-1] == "Musanze-Rubavu"

    def test_matrix_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "road", "matrix"])
        data = json.loads(result.stdout)["data"]
        assert data["matrix"][2] == [1, 1, 0, 1, 0, 0, 1]

    def test_budgets(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["road", "budgets"])
        assert result.exit_code == 0
        assert "Budgets adjacency matrix (in billion RWF)" in result.stdout
        assert "117.5" in result.stdout
