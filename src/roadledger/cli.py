"""Root CLI group for roadledger with global flags and command registration."""

from __future__ import annotations

import click

from roadledger import __version__
from roadledger.commands import register_commands
from roadledger.commands._context import AppContext
from roadledger.config.settings import RoadSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="roadledger")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the cities/roads snapshot files.",
)
@click.option("--no-seed", is_flag=True, help="Start from an empty network.")
@click.option("--no-snapshot", is_flag=True, help="Do not write snapshots after changes.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    output_dir: str | None,
    no_seed: bool,
    no_snapshot: bool,
) -> None:
    """roadledger — city and road infrastructure registry."""
    ctx.ensure_object(dict)
    # An unset flag arrives as False; pass None so env vars and TOML still apply.
    settings = RoadSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        output_dir=output_dir,
        no_seed=no_seed or None,
        no_snapshot=no_snapshot or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
