"""Subcommand modules for roadledger.

Provides register_commands() which uses deferred imports to keep
``roadledger --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    3 groups (have subcommands) + 3 standalone commands.
    """
    # --- Groups ---
    from roadledger.commands.city import city
    from roadledger.commands.export import export
    from roadledger.commands.road import road

    cli.add_command(city)
    cli.add_command(road)
    cli.add_command(export)

    # --- Standalone commands ---
    from roadledger.commands.shell import shell
    from roadledger.commands.show import show, snapshot

    cli.add_command(show)
    cli.add_command(snapshot)
    cli.add_command(shell)
