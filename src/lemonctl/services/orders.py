"""OrderService — all-or-nothing processing of customer order batches.

A batch is served in queue order. Each tendered bill joins the batch
pool before change is made, so it can immediately be handed to the next
customer. Bills the drawer pays out are tracked; if any order in the
batch is refused, those bills go back and nothing else is written.

The whole batch runs inside one :meth:`Stand.transaction`, so batches
are serialized and a storage failure mid-batch rolls everything back.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import structlog

from lemonctl.domain.change import make_change
from lemonctl.domain.money import order_cost
from lemonctl.domain.orders import (
    NULL_RESULT,
    BatchState,
    CustomerOrder,
    RejectReason,
    has_missing_orders,
    render_bills,
    sort_by_position,
)
from lemonctl.services.base import BaseService
from lemonctl.services.contracts import (
    ProcessResultData,
    ResetResultData,
    dump_validated,
)
from lemonctl.services.result import ServiceResult

if TYPE_CHECKING:
    from lemonctl.infrastructure.database.drawer import DrawerStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BatchOutcome:
    """What a batch run produced."""

    result: str
    committed: bool
    lemonades: int = 0
    reason: RejectReason | None = None
    position_in_line: int | None = None


class BatchEngine:
    """Runs one batch against a drawer store.

    The engine does not open or close transactions; the caller hands it a
    store bound to an active one.
    """

    def __init__(self, drawer: DrawerStore) -> None:
        self._drawer = drawer

    def run(self, orders: Sequence[CustomerOrder | None] | None) -> BatchOutcome:
        if has_missing_orders(orders):
            return BatchOutcome(NULL_RESULT, committed=False, reason=RejectReason.EMPTY_BATCH)
        queue = sort_by_position(cast("Sequence[CustomerOrder]", orders))

        state = BatchState()
        log = logger.bind(order_count=len(queue))
        log.debug("batch_started")

        rejected: CustomerOrder | None = None
        reason: RejectReason | None = None
        for order in queue:
            reason = self._serve(order, state)
            if reason is not None:
                state.fail()
                rejected = order
                log.info(
                    "order_rejected",
                    reason=str(reason),
                    position_in_line=order.position_in_line,
                    bill_value=order.bill_value,
                    requested_lemonades=order.requested_lemonades,
                )
                break

        if not state.is_sale_complete:
            self._drawer.restore(state.consumed_from_drawer)
            log.info("batch_rolled_back", restored=dict(state.consumed_from_drawer))
            return BatchOutcome(
                NULL_RESULT,
                committed=False,
                reason=reason,
                position_in_line=rejected.position_in_line if rejected else None,
            )

        for denomination, count in state.collected.items():
            self._drawer.increment(denomination, count)
        self._drawer.add_lemonades(state.lemonades)

        result = render_bills(state.collected)
        log.info("batch_committed", lemonades=state.lemonades, result=result)
        return BatchOutcome(result, committed=True, lemonades=state.lemonades)

    def _serve(self, order: CustomerOrder, state: BatchState) -> RejectReason | None:
        """Serve a single order, returning why it was refused (or None)."""
        if order.requested_lemonades == 0:
            return RejectReason.ZERO_LEMONADES

        cost = order_cost(order.requested_lemonades)
        if order.bill_value < cost:
            return RejectReason.INSUFFICIENT_PAYMENT

        change = order.bill_value - cost
        state.collect(order.bill_value)

        if change > 0 and not make_change(change, state, self._drawer):
            return RejectReason.NO_CHANGE

        state.lemonades += order.requested_lemonades
        return None


class OrderService(BaseService):
    """Processes order batches and manages the drawer lifecycle."""

    def process_orders(self, orders: Sequence[CustomerOrder | None] | None) -> ServiceResult:
        """Serve a whole batch or none of it.

        A refused batch is still ``ok``: ``data["result"]`` is ``"null"``
        and ``data["reason"]`` says why. Storage errors propagate.
        """
        op = "process_orders"
        with self._stand.transaction() as store:
            outcome = BatchEngine(store).run(orders)

        data = dump_validated(
            ProcessResultData,
            {
                "result": outcome.result,
                "committed": outcome.committed,
                "lemonades": outcome.lemonades,
                "order_count": len(orders) if orders else 0,
                "reason": str(outcome.reason) if outcome.reason else None,
                "position_in_line": outcome.position_in_line,
            },
        )
        return ServiceResult(ok=True, op=op, data=data)

    def reset(self) -> ServiceResult:
        """Empty the drawer and zero the lemonade sales total."""
        with self._stand.transaction() as store:
            store.reset()
            snapshot = store.snapshot()

        logger.info("drawer_reset")
        data = dump_validated(
            ResetResultData,
            {
                "lemonades_sold": snapshot.lemonades_sold,
                "bills": {str(d): c for d, c in snapshot.bills.items()},
            },
        )
        return ServiceResult(ok=True, op="reset", data=data)
