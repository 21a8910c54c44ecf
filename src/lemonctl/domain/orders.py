"""Customer orders and batch-local bookkeeping.

A batch is one ``process_orders`` call. Orders are immutable; the
:class:`BatchState` is the per-batch scratchpad that tracks bills taken
from customers and bills taken out of the persistent drawer.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from lemonctl.domain.money import DENOMINATIONS, is_valid_bill

NULL_RESULT = "null"


class InvalidOrderError(ValueError):
    """Raised when an order is built from an unacceptable bill or quantity."""


class RejectReason(StrEnum):
    """Why a batch was refused."""

    EMPTY_BATCH = "empty_batch"
    ZERO_LEMONADES = "zero_lemonades"
    INSUFFICIENT_PAYMENT = "insufficient_payment"
    NO_CHANGE = "no_change"


@dataclass(frozen=True)
class CustomerOrder:
    """A single customer's order: the bill tendered, queue slot, and quantity."""

    bill_value: int
    position_in_line: int
    requested_lemonades: int

    def __post_init__(self) -> None:
        if not is_valid_bill(self.bill_value):
            msg = (
                f"Invalid bill value: {self.bill_value}. "
                f"Accepted values are {', '.join(str(d) for d in DENOMINATIONS[:-1])}, "
                f"or {DENOMINATIONS[-1]}."
            )
            raise InvalidOrderError(msg)
        if not isinstance(self.requested_lemonades, int) or self.requested_lemonades < 0:
            msg = f"Invalid lemonade count: {self.requested_lemonades!r}. Must be zero or more."
            raise InvalidOrderError(msg)


def sort_by_position(orders: Iterable[CustomerOrder]) -> list[CustomerOrder]:
    """Return *orders* in queue order. Ties keep their submission order."""
    return sorted(orders, key=lambda o: o.position_in_line)


@dataclass
class BatchState:
    """Transient tally for one batch.

    Attributes:
        collected: Bills received from customers in this batch and not yet
            handed back as change. Keys keep first-tendered order.
        consumed_from_drawer: Bills taken out of the persistent drawer as
            change during this batch.
        lemonades: Running sum of lemonades sold in this batch.
        is_sale_complete: False once any order in the batch fails.
    """

    collected: dict[int, int] = field(default_factory=dict)
    consumed_from_drawer: dict[int, int] = field(default_factory=dict)
    lemonades: int = 0
    is_sale_complete: bool = True

    def collect(self, bill: int) -> None:
        self.collected[bill] = self.collected.get(bill, 0) + 1

    def pool_count(self, bill: int) -> int:
        return self.collected.get(bill, 0)

    def take_from_pool(self, bill: int) -> None:
        self.collected[bill] -= 1

    def record_drawer_take(self, bill: int) -> None:
        self.consumed_from_drawer[bill] = self.consumed_from_drawer.get(bill, 0) + 1

    def fail(self) -> None:
        self.is_sale_complete = False


def render_bills(pool: dict[int, int]) -> str:
    """Render a bill pool as ``[d1, d2, ...]``, one entry per bill.

    Denominations appear in the pool's key order; an empty pool is ``[]``.

    Examples:
        >>> render_bills({20: 1, 10: 1})
        '[20, 10]'
        >>> render_bills({5: 2, 10: 0})
        '[5, 5]'
        >>> render_bills({})
        '[]'
    """
    bills: list[str] = []
    for denomination, count in pool.items():
        bills.extend(str(denomination) for _ in range(count))
    return f"[{', '.join(bills)}]"


def has_missing_orders(orders: Sequence[CustomerOrder | None] | None) -> bool:
    """True when the batch is absent, empty, or contains a missing order."""
    return not orders or any(order is None for order in orders)
