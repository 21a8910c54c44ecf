"""Greedy change-making over the batch pool and the persistent drawer.

Change is paid with $10 bills first, then $5 bills. For each bill the
batch pool is drawn down before the drawer, which decides which bills
remain visible in the batch result.

INVARIANT: a $15 change plan either succeeds completely or moves no bills.
"""

from __future__ import annotations

from typing import Protocol

from lemonctl.domain.money import CHANGE_DENOMINATIONS
from lemonctl.domain.orders import BatchState


class BillSource(Protocol):
    """The slice of the drawer store the change maker needs."""

    def get_count(self, denomination: int) -> int: ...

    def decrement(self, denomination: int) -> bool: ...


def _available(bill: int, state: BatchState, drawer: BillSource) -> bool:
    return state.pool_count(bill) > 0 or drawer.get_count(bill) > 0


def make_change(change_required: int, state: BatchState, drawer: BillSource) -> bool:
    """Pay out *change_required* from *state*'s pool and *drawer*.

    Bills taken from the drawer are recorded in
    ``state.consumed_from_drawer`` so a failed batch can put them back.

    Returns True when exact change was produced.
    """
    if change_required == 15 and not (
        _available(5, state, drawer) and _available(10, state, drawer)
    ):
        return False

    for bill in CHANGE_DENOMINATIONS:
        while change_required >= bill:
            if state.pool_count(bill) > 0:
                state.take_from_pool(bill)
            elif drawer.get_count(bill) > 0 and drawer.decrement(bill):
                state.record_drawer_take(bill)
            else:
                # Only bills actually removed from the drawer count as paid.
                break
            change_required -= bill

    return change_required == 0
