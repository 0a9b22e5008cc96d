"""Command group: city registry (add, rename, find, list)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadledger.commands._base import RoadGroup
from roadledger.services.network import NetworkService

if TYPE_CHECKING:
    from roadledger.commands._context import AppContext

_CITY_EXAMPLES = """\
  roadledger city add Karongi
  roadledger city add Karongi Nyanza Kayonza
  roadledger city rename Huye Butare
  roadledger city find 3
  roadledger --json city list"""


@click.group(cls=RoadGroup, examples=_CITY_EXAMPLES)
@click.pass_obj
def city(app: AppContext) -> None:
    """Register, rename, and look up cities."""


@city.command(
    examples="""\
  roadledger city add Karongi
  roadledger city add Karongi Nyanza Kayonza
  roadledger --output-dir snapshots city add Karongi"""
)
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def add(app: AppContext, names: tuple[str, ...]) -> None:
    """Add one or more cities by name."""
    svc = NetworkService(app.workspace)
    if len(names) == 1:
        app.emit(svc.add_city(names[0]))
    else:
        app.emit(svc.add_cities(list(names)))


@city.command(
    examples="""\
  roadledger city rename Huye Butare
  roadledger --json city rename Rusizi Kamembe"""
)
@click.argument("old_name")
@click.argument("new_name")
@click.pass_obj
def rename(app: AppContext, old_name: str, new_name: str) -> None:
    """Rename a city, keeping its index and roads."""
    app.emit(NetworkService(app.workspace).rename_city(old_name, new_name))


@city.command(
    examples="""\
  roadledger city find 1
  roadledger -q city find 7"""
)
@click.argument("index", type=int)
@click.pass_obj
def find(app: AppContext, index: int) -> None:
    """Find a city by its index."""
    app.emit(NetworkService(app.workspace).find_city(index))


@city.command(
    name="list",
    examples="""\
  roadledger city list
  roadledger -q city list""",
)
@click.pass_obj
def list_cities(app: AppContext) -> None:
    """List cities in index order."""
    app.emit(NetworkService(app.workspace).list_cities())
