"""Command: stand initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from lemonctl.commands._base import StandCommand

if TYPE_CHECKING:
    from lemonctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  lemonctl init
  lemonctl init /srv/stand
  lemonctl init . --port 9000
  lemonctl --no-interact init /tmp/stand"""


@click.command("init", cls=StandCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option("--host", default=None, help="Bind address written to [server].")
@click.option(
    "--port",
    default=None,
    type=click.IntRange(1, 65535),
    help="Port written to [server].",
)
@click.pass_obj
def init_cmd(app: AppContext, path: str, host: str | None, port: int | None) -> None:
    """Create lemonctl.toml and an empty drawer database in PATH."""
    stand_path = Path(path).resolve()
    interactive = not app.settings.no_interact
    defaults = app.settings.server

    if host is None:
        host = click.prompt("Bind address", default=defaults.host) if interactive else defaults.host
    if port is None:
        port = (
            click.prompt("Port", default=defaults.port, type=click.IntRange(1, 65535))
            if interactive
            else defaults.port
        )

    from lemonctl.services.init import InitService

    app.emit(InitService.init_stand(stand_path, host=host, port=port))
