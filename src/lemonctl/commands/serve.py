"""serve — run the HTTP API with uvicorn."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lemonctl.commands._base import StandCommand

if TYPE_CHECKING:
    from lemonctl.commands._context import AppContext


@click.command(
    cls=StandCommand,
    examples="""\
  # Serve on the configured address ([server] in lemonctl.toml)
  lemonctl serve

  # Listen on all interfaces, port 9000
  lemonctl serve --host 0.0.0.0 --port 9000

  # Request logs plus structured JSON logging
  lemonctl -v --log-json serve""",
)
@click.option("--host", default=None, help="Bind address (default from [server]).")
@click.option("--port", default=None, type=click.IntRange(1, 65535), help="Listen port.")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Serve POST /api/orders/process and GET /api/orders/report."""
    import uvicorn

    from lemonctl.api.app import create_app

    server = app.settings.server
    uvicorn.run(
        create_app(app.stand),
        host=host or server.host,
        port=port or server.port,
        log_config=None,
    )
