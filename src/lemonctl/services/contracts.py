"""Typed payload contracts for service and adapter boundaries.

Inbound: :class:`OrderPayload` decodes one order from its wire shape
(``bill_value``, ``position_in_line``, ``requested_lemonades``) and
rejects unknown bill denominations before anything reaches the batch
engine. Both the HTTP API and ``lemonctl process`` decode through here.

Outbound: result-data models validate operation payload shapes before
they leave the service layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from lemonctl.domain.money import is_valid_bill
from lemonctl.domain.orders import CustomerOrder


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


# ---------------------------------------------------------------------------
# Inbound
# ---------------------------------------------------------------------------


class OrderPayload(BaseModel):
    """One customer order as submitted over the wire."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    bill_value: int
    position_in_line: int
    requested_lemonades: int = Field(ge=0)

    @field_validator("bill_value", mode="before")
    @classmethod
    def _accepted_bill(cls, value: Any) -> Any:
        if not is_valid_bill(value):
            msg = f"Invalid bill value: {value}. Accepted values are 5, 10, or 20."
            raise ValueError(msg)
        return value

    def to_order(self) -> CustomerOrder:
        return CustomerOrder(
            bill_value=self.bill_value,
            position_in_line=self.position_in_line,
            requested_lemonades=self.requested_lemonades,
        )


_batch_adapter: TypeAdapter[list[OrderPayload | None] | None] = TypeAdapter(
    list[OrderPayload | None] | None
)


def parse_orders(raw: Any) -> list[CustomerOrder | None] | None:
    """Decode a JSON-compatible batch into domain orders.

    ``None`` entries (and a ``None`` batch) pass through untouched; the
    batch engine turns them into a ``"null"`` result.

    Raises:
        pydantic.ValidationError: If the shape is wrong or a bill is not 5, 10, or 20.
    """
    payloads = _batch_adapter.validate_python(raw)
    if payloads is None:
        return None
    return [p.to_order() if p is not None else None for p in payloads]


def describe_validation_error(exc: ValidationError) -> str:
    """One-line summary of *exc*: the first problem and how many there were."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"])
    summary = f"{loc}: {first['msg']}" if loc else first["msg"]
    if len(errors) > 1:
        summary += f" (and {len(errors) - 1} more)"
    return summary


# ---------------------------------------------------------------------------
# Outbound
# ---------------------------------------------------------------------------


class ProcessResultData(BaseModel):
    """Payload contract for ``OrderService.process_orders``."""

    result: str
    committed: bool
    lemonades: int
    order_count: int
    reason: str | None = None
    position_in_line: int | None = None


class ReportResultData(BaseModel):
    """Payload contract for ``ReportService.report``."""

    report: str
    lemonades_sold: int
    profit: int
    cash_value: int
    bills: dict[str, int]


class ResetResultData(BaseModel):
    """Payload contract for ``OrderService.reset``."""

    lemonades_sold: int
    bills: dict[str, int]


class InitResultData(BaseModel):
    """Payload contract for ``InitService.init_stand``."""

    stand_root: str
    config_path: str
    config_created: bool
    db_path: str
    lemonades_sold: int
    bills: dict[str, int]
