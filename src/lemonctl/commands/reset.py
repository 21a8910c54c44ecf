"""Command: empty the drawer and zero the sales total."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lemonctl.commands._base import StandCommand

if TYPE_CHECKING:
    from lemonctl.commands._context import AppContext


@click.command(
    cls=StandCommand,
    examples="""\
  lemonctl reset
  lemonctl reset --yes
  lemonctl --no-interact reset --yes""",
)
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def reset(app: AppContext, yes: bool) -> None:
    """Zero every bill count and the lemonade sales total."""
    if not yes:
        if app.settings.no_interact:
            from lemonctl.services.result import ServiceError, ServiceResult

            app.emit(
                ServiceResult(
                    ok=False,
                    op="reset",
                    error=ServiceError(
                        code="confirmation_required",
                        message="Refusing to reset without --yes in non-interactive mode.",
                    ),
                )
            )
            return
        if not click.confirm("Empty the drawer and zero the sales total?", default=False):
            click.echo("Aborted.", err=True)
            return

    from lemonctl.services.orders import OrderService

    app.emit(OrderService(app.stand).reset())
