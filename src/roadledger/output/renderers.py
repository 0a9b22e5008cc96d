"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO; the caller
extracts the text via ``get_output(console)``. Renderers are dispatched
by ``result.op`` in :func:`render_result`; unknown ops fall through to
a generic key-value renderer.

City names are user input and always go through :class:`Text`, never
through markup strings.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from roadledger.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from roadledger.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: names for listings, a status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_cities":
        return "\n".join(str(item["name"]) for item in result.data.get("items", []))
    if result.op == "list_roads":
        return "\n".join(str(item["road"]) for item in result.data.get("items", []))
    if result.op == "find_city":
        return str(result.data.get("name", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="road.ok"), Text(f"  {result.op}", style="road.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="road.key")
    if key == "index":
        v = Text(str(value), style="road.index")
    elif key in ("name", "old_name", "road"):
        v = Text(str(value), style="road.city")
    elif key == "budget":
        v = Text(str(value), style="road.budget")
    else:
        v = Text(str(value))
    console.print(k + v)


def _render_files(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    files = result.data.get("files") or []
    if verbose:
        for path in files:
            console.print(Text(f"  wrote {path}", style="road.path"))


def _city_table(cities: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Index", style="road.index", justify="right", no_wrap=True)
    table.add_column("City_Name", style="road.city")
    for city in cities:
        table.add_row(str(city["index"]), Text(str(city["name"])))
    return table


def _road_table(roads: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Nbr", justify="right", no_wrap=True)
    table.add_column("Road", style="road.city")
    table.add_column("Budget", style="road.budget", justify="right")
    for road in roads:
        table.add_row(f"{road['number']}.", Text(str(road["road"])), f"{road['budget']:g}")
    return table


def _matrix_table(matrix_data: dict[str, Any], *, budgets: bool) -> Table:
    """Square matrix with city indices as row and column labels."""
    indices: list[int] = matrix_data.get("indices", [])
    precision = int(matrix_data.get("precision", 1))
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", style="road.index", justify="right", no_wrap=True)
    for index in indices:
        table.add_column(str(index), justify="right", no_wrap=True)

    for index, row in zip(indices, matrix_data.get("matrix", []), strict=True):
        cells: list[Any] = [str(index)]
        for value in row:
            if budgets:
                style = "road.budget" if value else "road.absent"
                cells.append(Text(f"{value:.{precision}f}", style=style))
            else:
                cells.append(Text(str(value), style="road.present" if value else "road.absent"))
        table.add_row(*cells)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="road.error"),
        Text(f"  {result.op}", style="road.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}", style="dim"))


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add_city / rename_city / add_road / set_budget results."""
    _status_line(console, result)
    d = result.data
    for key in ("index", "old_name", "name", "road"):
        if key in d:
            _field(console, key, d[key])
    if "budget" in d:
        currency = d.get("currency", "")
        _field(console, "budget", f"{d['budget']:g} {currency}".rstrip())
    _render_files(console, result, verbose=verbose)


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add_cities results."""
    _status_line(console, result)
    added = result.data.get("added", [])
    errors = result.data.get("errors", [])
    _field(console, "added", len(added))
    _field(console, "errors", len(errors))
    if added:
        console.print(_city_table(added))
    for err in errors:
        console.print(
            Text("  error", style="road.error"),
            Text(f" {err.get('name')}: {err.get('message')}"),
            sep="",
        )
    _render_files(console, result, verbose=verbose)


def _render_snapshot(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for path in result.data.get("files", []):
        console.print(Text(f"  {path}", style="road.path"))


# ── Query renderers ───────────────────────────────────────────────────


def _render_find(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(
        Text("City found: "),
        Text(str(d.get("index")), style="road.index"),
        Text(": "),
        Text(str(d.get("name")), style="road.city"),
        sep="",
    )


def _render_cities(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No cities recorded yet.")
        return
    console.print(_city_table(items))
    console.print(f"\n{result.data.get('count', len(items))} cities")


def _render_roads(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No roads recorded yet.")
        return
    console.print(_road_table(items))
    console.print(f"\n{result.data.get('count', len(items))} roads")


def _render_road_matrix(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    if not result.data.get("indices"):
        console.print("No cities recorded yet.")
        return
    console.print("[bold]Roads adjacency matrix[/bold]")
    console.print(_matrix_table(result.data, budgets=False))


def _render_budget_matrix(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    if not result.data.get("indices"):
        console.print("No cities recorded yet.")
        return
    currency = result.data.get("currency", "")
    title = Text("Budgets adjacency matrix", style="bold")
    if currency:
        title.append(f" (in {currency})")
    console.print(title)
    console.print(_matrix_table(result.data, budgets=True))


def _render_show_all(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the full state: cities, both matrices, numbered roads."""
    d = result.data
    cities = d.get("cities", [])
    if not cities:
        console.print("No cities recorded yet.")
        return

    console.print("[bold]Cities[/bold]")
    console.print(_city_table(cities))
    console.print()
    console.print("[bold]Roads adjacency matrix[/bold]")
    console.print(_matrix_table(d["road_matrix"], budgets=False))
    console.print()
    budget_title = Text("Budgets adjacency matrix", style="bold")
    currency = d["budget_matrix"].get("currency", "")
    if currency:
        budget_title.append(f" (in {currency})")
    console.print(budget_title)
    console.print(_matrix_table(d["budget_matrix"], budgets=True))

    roads = d.get("roads", [])
    if roads:
        console.print()
        console.print("[bold]Roads[/bold]")
        console.print(_road_table(roads))
    console.print(f"\n{len(cities)} cities, {d.get('road_count', len(roads))} roads")


# ── Export renderers ─────────────────────────────────────────────────


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an export summary (the content itself is printed raw by the command)."""
    _status_line(console, result)
    d = result.data
    for key in ("output_file", "format", "node_count", "edge_count"):
        if key in d:
            _field(console, key, d[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add_city": _render_mutation,
    "add_cities": _render_batch,
    "add_road": _render_mutation,
    "set_budget": _render_mutation,
    "rename_city": _render_mutation,
    "snapshot": _render_snapshot,
    # Queries
    "find_city": _render_find,
    "list_cities": _render_cities,
    "list_roads": _render_roads,
    "road_matrix": _render_road_matrix,
    "budget_matrix": _render_budget_matrix,
    "show_all": _render_show_all,
    # Export
    "export_graph": _render_export,
}
