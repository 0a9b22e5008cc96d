"""Standalone commands: full-state display and explicit snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadledger.commands._base import RoadCommand
from roadledger.services.network import NetworkService

if TYPE_CHECKING:
    from roadledger.commands._context import AppContext


@click.command(
    cls=RoadCommand,
    examples="""\
  roadledger show
  roadledger --json show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Display cities, both matrices, and all roads."""
    app.emit(NetworkService(app.workspace).show_all())


@click.command(
    cls=RoadCommand,
    examples="""\
  roadledger snapshot
  roadledger --output-dir /tmp/roads snapshot""",
)
@click.pass_obj
def snapshot(app: AppContext) -> None:
    """Write the city and road tables now."""
    app.emit(NetworkService(app.workspace).write_snapshot())
