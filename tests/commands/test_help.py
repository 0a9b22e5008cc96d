"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from roadledger.cli import cli
from roadledger.commands._base import RoadCommand

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["city", "road", "export", "show", "snapshot", "shell", "--no-seed"]),
    (["city", "--help"], ["add", "rename", "find", "list"]),
    (["city", "add", "--help"], ["NAMES"]),
    (["city", "rename", "--help"], ["OLD_NAME", "NEW_NAME"]),
    (["city", "find", "--help"], ["INDEX"]),
    (["road", "--help"], ["add", "budget", "list", "matrix", "budgets"]),
    (["road", "budget", "--help"], ["FIRST", "SECOND", "AMOUNT"]),
    (["export", "--help"], ["graph"]),
    (["export", "graph", "--help"], ["--format", "--output"]),
    (["show", "--help"], ["--examples"]),
    (["snapshot", "--help"], []),
    (["shell", "--help"], []),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    HELP_COMMANDS,
    ids=[" ".join(args) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(
    ("args", "snippet"),
    [
        (["city", "--examples"], "roadledger city rename Huye Butare"),
        (["road", "budget", "--examples"], "NEGATIVE_BUDGET"),
        (["export", "graph", "--examples"], "dot -Tpng"),
        (["shell", "--examples"], "roadledger --no-seed shell"),
    ],
)
def test_examples(cli_runner: CliRunner, args: list[str], snippet: str) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert f"Examples for 'cli {' '.join(args[:-1])}'" in result.output
    assert snippet in result.output


def test_no_subcommand_prints_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "roadledger, version 0.1.0" in result.output


class TestExamplesOption:
    def test_only_added_when_examples_given(self) -> None:
        with_examples = RoadCommand("with-examples", examples="  roadledger show")
        without = RoadCommand("plain")
        assert "--examples" in [opt for p in with_examples.params for opt in p.opts]
        assert without.params == []
        assert with_examples.examples == "  roadledger show"

    def test_prints_the_command_examples_attribute(self, cli_runner: CliRunner) -> None:
        cmd = RoadCommand("demo", examples="  demo --fast", callback=lambda: None)
        cmd.examples = "  demo --slow"
        result = cli_runner.invoke(cmd, ["--examples"])
        assert result.exit_code == 0
        assert "demo --slow" in result.output
        assert "demo --fast" not in result.output
