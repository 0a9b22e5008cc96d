"""Command group: network export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from roadledger.commands._base import RoadGroup
from roadledger.domain.types import ErrorCode
from roadledger.services.export import GRAPH_FORMATS, ExportService
from roadledger.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from roadledger.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  roadledger export graph --format dot
  roadledger export graph --format json --output roads.json
  roadledger export graph | dot -Tpng -o roads.png"""


@click.group(cls=RoadGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Export the road network in graph formats."""


@export.command(examples=_EXPORT_EXAMPLES)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(GRAPH_FORMATS, case_sensitive=False),
    default="dot",
    help="Graph output format.",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (omit to print to stdout).",
)
@click.pass_obj
def graph(app: AppContext, fmt: str, output_file: str | None) -> None:
    """Export cities and roads in DOT or JSON format."""
    result = ExportService(app.workspace).export_graph(fmt=fmt)

    if not result.ok:
        app.emit(result)
        return

    if output_file:
        try:
            Path(output_file).write_text(result.data["content"], encoding="utf-8")
        except OSError as exc:
            app.emit(
                ServiceResult(
                    ok=False,
                    op="export_graph",
                    error=ServiceError(
                        code=str(ErrorCode.EXPORT_FAILED),
                        message=f"Cannot write {output_file}: {exc}",
                        detail={"output_file": output_file},
                    ),
                )
            )
            return
        app.emit(
            ServiceResult(
                ok=True,
                op="export_graph",
                data={
                    "format": result.data["format"],
                    "output_file": output_file,
                    "node_count": result.data["node_count"],
                    "edge_count": result.data["edge_count"],
                },
            )
        )
    elif app.settings.json_output:
        app.emit(result)
    else:
        # Pipe-friendly: raw content to stdout
        click.echo(result.data["content"], nl=False)
