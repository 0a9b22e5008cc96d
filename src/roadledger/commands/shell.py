"""Interactive numbered menu over a single in-memory network.

Unlike the one-shot commands, every choice in a shell session acts on
the same network, so roads added in one step can be budgeted in the
next. Out-of-range choices and unparsable numbers are re-prompted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from roadledger.commands._base import RoadCommand
from roadledger.services.network import NetworkService

if TYPE_CHECKING:
    from roadledger.commands._context import AppContext
    from roadledger.services.result import ServiceResult

EXIT_CHOICE = 9

MENU = """
Menu:
1. Add new city(ies)
2. Add roads between cities
3. Add the budget for roads
4. Edit city
5. Search for a city
6. Display cities
7. Display roads
8. Display recorded data on the console
9. Exit"""


def _add_cities(svc: NetworkService, app: AppContext) -> ServiceResult:
    count = click.prompt("Enter the number of cities to add", type=click.IntRange(min=0))
    names = [click.prompt(f"Enter the name for city {i}") for i in range(1, count + 1)]
    return svc.add_cities(names)


def _add_road(svc: NetworkService, app: AppContext) -> ServiceResult:
    first = click.prompt("Enter the name of the first city")
    second = click.prompt("Enter the name of the second city")
    return svc.add_road(first, second)


def _set_budget(svc: NetworkService, app: AppContext) -> ServiceResult:
    first = click.prompt("Enter the name of the first city")
    second = click.prompt("Enter the name of the second city")
    currency = app.settings.display.currency
    amount = click.prompt(f"Enter the budget for the road (in {currency})", type=float)
    return svc.set_budget(first, second, amount)


def _rename_city(svc: NetworkService, app: AppContext) -> ServiceResult:
    old_name = click.prompt("Enter the current city name")
    new_name = click.prompt("Enter the new city name")
    return svc.rename_city(old_name, new_name)


def _find_city(svc: NetworkService, app: AppContext) -> ServiceResult:
    index = click.prompt("Enter the city index to search", type=int)
    return svc.find_city(index)


_ACTIONS: dict[int, Callable[[NetworkService, AppContext], ServiceResult]] = {
    1: _add_cities,
    2: _add_road,
    3: _set_budget,
    4: _rename_city,
    5: _find_city,
    6: lambda svc, _app: svc.list_cities(),
    7: lambda svc, _app: svc.road_matrix(),
    8: lambda svc, _app: svc.show_all(),
}


@click.command(
    cls=RoadCommand,
    examples="""\
  roadledger shell
  roadledger --output-dir snapshots shell
  roadledger --no-seed shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Run the interactive menu (the state persists until exit)."""
    svc = NetworkService(app.workspace)
    if app.workspace.autosave:
        initial = svc.write_snapshot()
        if not initial.ok:
            app.emit(initial, exit_on_error=False)

    while True:
        click.echo(MENU)
        choice = click.prompt("Enter your choice", type=click.IntRange(1, EXIT_CHOICE))
        if choice == EXIT_CHOICE:
            click.echo("Exiting program.")
            return
        app.emit(_ACTIONS[choice](svc, app), exit_on_error=False)
