"""Command group: roads and budgets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadledger.commands._base import RoadGroup
from roadledger.services.network import NetworkService

if TYPE_CHECKING:
    from roadledger.commands._context import AppContext

_ROAD_EXAMPLES = """\
  roadledger road add Huye Nyagatare
  roadledger road budget Kigali Muhanga 30.5
  roadledger road list
  roadledger road matrix
  roadledger road budgets"""


@click.group(cls=RoadGroup, examples=_ROAD_EXAMPLES)
@click.pass_obj
def road(app: AppContext) -> None:
    """Connect cities and assign road budgets."""


@road.command(
    examples="""\
  roadledger road add Huye Nyagatare
  roadledger --json road add Rubavu Rusizi"""
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def add(app: AppContext, first: str, second: str) -> None:
    """Add a road between two cities."""
    app.emit(NetworkService(app.workspace).add_road(first, second))


@road.command(
    examples="""\
  roadledger road budget Kigali Muhanga 30.5
  roadledger road budget Huye Rusizi 0
  roadledger road budget Huye Rusizi -- -1  # rejected: NEGATIVE_BUDGET"""
)
@click.argument("first")
@click.argument("second")
@click.argument("amount", type=float)
@click.pass_obj
def budget(app: AppContext, first: str, second: str, amount: float) -> None:
    """Set the budget of an existing road (in the configured currency)."""
    app.emit(NetworkService(app.workspace).set_budget(first, second, amount))


@road.command(
    name="list",
    examples="""\
  roadledger road list
  roadledger -q road list""",
)
@click.pass_obj
def list_roads(app: AppContext) -> None:
    """List roads with their numbers and budgets."""
    app.emit(NetworkService(app.workspace).list_roads())


@road.command(examples="  roadledger road matrix")
@click.pass_obj
def matrix(app: AppContext) -> None:
    """Show the road adjacency matrix."""
    app.emit(NetworkService(app.workspace).road_matrix())


@road.command(examples="  roadledger road budgets")
@click.pass_obj
def budgets(app: AppContext) -> None:
    """Show the budget matrix."""
    app.emit(NetworkService(app.workspace).budget_matrix())
