"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Opens the stand lazily and routes results to
stdout/stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lemonctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from lemonctl.config.settings import StandSettings
    from lemonctl.infrastructure.stand import Stand
    from lemonctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The stand is opened on first use, so ``--help`` and ``--version``
    never touch the database.
    """

    def __init__(self, settings: StandSettings) -> None:
        self.settings = settings
        self._stand: Stand | None = None

        from lemonctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def stand(self) -> Stand:
        """The stand (created lazily on first access)."""
        if self._stand is None:
            from lemonctl.infrastructure.stand import Stand

            self._stand = Stand(self.settings)
        return self._stand

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
