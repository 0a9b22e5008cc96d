"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the workspace lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadledger.config.logging import configure_logging
from roadledger.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from roadledger.config.settings import RoadSettings
    from roadledger.infrastructure.workspace import Workspace
    from roadledger.services.result import ServiceResult


class AppContext:
    """State shared through Click's command hierarchy.

    The workspace (and with it the seeded network) is only built on
    first use, so ``--help`` and ``--version`` do no work.
    """

    def __init__(self, settings: RoadSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The workspace instance (created lazily on first access)."""
        if self._workspace is None:
            from roadledger.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult.

        * Success: stdout. Warnings go to stderr (outside JSON mode, where
          they are already part of the payload).
        * Failure: stderr, then exit code 1 unless *exit_on_error* is False
          (the interactive shell reports and keeps going).
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return
        click.echo(output, err=True)
        if exit_on_error:
            raise SystemExit(1)
