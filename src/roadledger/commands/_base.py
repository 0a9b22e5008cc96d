"""Click base classes with ``--examples`` support.

Commands and groups take an optional ``examples`` string. When one is
given they grow an eager ``--examples`` flag that prints it and exits,
which keeps ``--help`` focused on arguments and options.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


_EXAMPLES_OPTION = {
    "is_flag": True,
    "expose_value": False,
    "is_eager": True,
    "callback": _show_examples,
    "help": "Show usage examples.",
}


class RoadCommand(click.Command):
    """Command carrying optional usage examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(click.Option(["--examples"], **_EXAMPLES_OPTION))


class RoadGroup(click.Group):
    """Group whose subcommands are :class:`RoadCommand` by default."""

    command_class = RoadCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(click.Option(["--examples"], **_EXAMPLES_OPTION))
