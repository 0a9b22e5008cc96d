"""Shared pytest fixtures and test helpers for roadledger tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from roadledger.config.settings import RoadSettings
from roadledger.infrastructure.network import InfrastructureGraph
from roadledger.infrastructure.workspace import Workspace
from roadledger.services.network import NetworkService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ROADLEDGER_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("ROADLEDGER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Iterator[None]:
    """CLI invocations attach a stderr handler bound to the runner's stream."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def empty_network() -> InfrastructureGraph:
    return InfrastructureGraph()


@pytest.fixture
def seeded_network() -> InfrastructureGraph:
    """Network pre-loaded with the 7 seed cities and 9 seed roads."""
    return InfrastructureGraph.seeded()


@pytest.fixture
def settings(tmp_path: Path) -> RoadSettings:
    """Settings rooted at a temp dir (snapshots land in ``tmp_path``)."""
    return RoadSettings.from_cli(base_root=tmp_path)


@pytest.fixture
def workspace(settings: RoadSettings) -> Workspace:
    """Seeded workspace writing snapshots into ``tmp_path``."""
    return Workspace(settings)


@pytest.fixture
def empty_workspace(tmp_path: Path) -> Workspace:
    return Workspace(RoadSettings.from_cli(base_root=tmp_path, no_seed=True))


@pytest.fixture
def service(workspace: Workspace) -> NetworkService:
    return NetworkService(workspace)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run CLI commands from a temp dir so snapshot files land there.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes; tests that need the path request ``tmp_path`` (same directory).
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def assert_consistent(network: InfrastructureGraph) -> None:
    """Assert every structural invariant of *network* holds."""
    problems = network.check_invariants()
    assert problems == [], problems


def ok_data(result: Any) -> dict[str, Any]:
    """Assert a ServiceResult succeeded and return its data."""
    assert result.ok, result.error
    return result.data
