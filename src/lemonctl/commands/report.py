"""Command: print the sales report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lemonctl.commands._base import StandCommand

if TYPE_CHECKING:
    from lemonctl.commands._context import AppContext


@click.command(
    cls=StandCommand,
    examples="""\
  lemonctl report
  lemonctl -q report
  lemonctl -v report
  lemonctl --json report""",
)
@click.pass_obj
def report(app: AppContext) -> None:
    """Show lemonades sold, profit, and bills left in the drawer."""
    from lemonctl.services.report import ReportService

    app.emit(ReportService(app.stand).report())
