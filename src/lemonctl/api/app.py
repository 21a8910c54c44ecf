"""FastAPI application for the stand.

Routes:
  POST /api/orders/process  JSON batch in, plain-text batch result out
  GET  /api/orders/report   plain-text sales report
  GET  /health              liveness probe

Handlers run the same services as the CLI. Storage work is synchronous,
so it is pushed to the threadpool; the stand's writer lock serializes
concurrent batches.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from lemonctl import __version__
from lemonctl.domain.orders import CustomerOrder, InvalidOrderError
from lemonctl.services.contracts import describe_validation_error, parse_orders
from lemonctl.services.orders import OrderService
from lemonctl.services.report import ReportService

if TYPE_CHECKING:
    from lemonctl.infrastructure.stand import Stand

logger = structlog.get_logger(__name__)


class InvalidInputError(Exception):
    """Request body could not be turned into a batch of orders."""


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"status": status, "message": message})


def _decode_batch(body: bytes) -> list[CustomerOrder | None] | None:
    try:
        raw = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidInputError(f"malformed JSON: {exc}") from exc
    try:
        return parse_orders(raw)
    except ValidationError as exc:
        raise InvalidInputError(describe_validation_error(exc)) from exc
    except InvalidOrderError as exc:
        raise InvalidInputError(str(exc)) from exc


def create_app(stand: Stand | None = None) -> FastAPI:
    """Build the API around *stand*.

    Without a stand, one is opened from the discovered settings on
    startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = False
        if getattr(app.state, "stand", None) is None:
            from lemonctl.config.settings import StandSettings
            from lemonctl.infrastructure.stand import Stand

            app.state.stand = Stand(StandSettings.from_cli())
            owned = True
        try:
            yield
        finally:
            if owned:
                app.state.stand.close()
                app.state.stand = None

    app = FastAPI(title="lemonctl", version=__version__, lifespan=lifespan)
    app.state.stand = stand

    @app.exception_handler(InvalidInputError)
    async def _invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("invalid_input", path=request.url.path, error=str(exc))
        return _error(400, f"Invalid input: {exc}")

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{loc}: {first.get('msg', 'invalid request')}" if loc else str(exc)
        logger.info("invalid_input", path=request.url.path, error=message)
        return _error(400, f"Invalid input: {message}")

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error", path=request.url.path, exc_info=exc)
        return _error(500, "An unexpected error occurred.")

    @app.post("/api/orders/process", response_class=PlainTextResponse)
    async def process_orders(request: Request, include_report: bool = False) -> str:
        orders = _decode_batch(await request.body())
        stand = request.app.state.stand

        result = await run_in_threadpool(OrderService(stand).process_orders, orders)
        text = str(result.data["result"])
        if include_report:
            report = await run_in_threadpool(ReportService(stand).report)
            text = f"{text}\n\n{report.data['report']}"
        return text

    @app.get("/api/orders/report", response_class=PlainTextResponse)
    async def report(request: Request) -> str:
        result = await run_in_threadpool(ReportService(request.app.state.stand).report)
        return str(result.data["report"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
