"""Command: process one batch of customer orders from a JSON file."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from lemonctl.commands._base import StandCommand

if TYPE_CHECKING:
    from lemonctl.commands._context import AppContext

_OP = "process_orders"


def _input_error(app: AppContext, code: str, message: str, **detail: object) -> None:
    from lemonctl.services.result import ServiceError, ServiceResult

    app.emit(
        ServiceResult(
            ok=False,
            op=_OP,
            error=ServiceError(code=code, message=message, detail=dict(detail)),
        )
    )


@click.command(
    cls=StandCommand,
    examples="""\
  lemonctl process orders.json
  cat orders.json | lemonctl process -
  lemonctl -q process orders.json
  lemonctl --json process orders.json

  # orders.json
  [{"bill_value": 5, "position_in_line": 1, "requested_lemonades": 1},
   {"bill_value": 10, "position_in_line": 2, "requested_lemonades": 1}]""",
)
@click.argument("file", default="-")
@click.pass_obj
def process(app: AppContext, file: str) -> None:
    """Serve a batch of orders read from FILE (``-`` for stdin).

    FILE must contain a JSON array of objects with "bill_value",
    "position_in_line" and "requested_lemonades". The batch is served
    whole or not at all; a refused batch prints ``null``.
    """
    try:
        if file == "-":
            raw = json.loads(click.get_text_stream("stdin").read())
        else:
            with open(file, encoding="utf-8") as f:
                raw = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        _input_error(app, "invalid_file", f"Error reading {file}: {exc}", file=file)
        return

    from lemonctl.domain.orders import InvalidOrderError
    from lemonctl.services.contracts import describe_validation_error, parse_orders

    try:
        orders = parse_orders(raw)
    except ValidationError as exc:
        _input_error(
            app,
            "invalid_input",
            f"Invalid input: {describe_validation_error(exc)}",
            error_count=exc.error_count(),
        )
        return
    except InvalidOrderError as exc:
        _input_error(app, "invalid_input", f"Invalid input: {exc}")
        return

    from lemonctl.services.orders import OrderService

    app.emit(OrderService(app.stand).process_orders(orders))
