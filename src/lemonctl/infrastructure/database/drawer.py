"""Drawer store — persisted bill counts and the lemonade sales total.

The caller owns the transaction: construct a :class:`DrawerStore` around
a ``Connection`` obtained from ``engine.begin()`` so every increment and
decrement participates in the surrounding atomic transaction. The store
knows nothing about batches or rollback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update

from lemonctl.domain.money import DENOMINATIONS
from lemonctl.domain.report import DrawerSnapshot
from lemonctl.infrastructure.database.schema import SALES_ROW_ID, drawer, sales

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Connection


class DrawerStore:
    """Data access for the ``drawer`` and ``sales`` tables."""

    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    def initialize(self) -> None:
        """Ensure a row for every denomination and the sales row exist.

        Existing rows keep their counts. Idempotent.
        """
        for denomination in DENOMINATIONS:
            row = self.conn.execute(
                select(drawer.c.denomination).where(drawer.c.denomination == denomination)
            ).first()
            if row is None:
                self.conn.execute(insert(drawer).values(denomination=denomination, count=0))

        row = self.conn.execute(select(sales.c.id).where(sales.c.id == SALES_ROW_ID)).first()
        if row is None:
            self.conn.execute(insert(sales).values(id=SALES_ROW_ID, lemonades_sold=0))

    def get_count(self, denomination: int) -> int:
        """Current count for *denomination*, 0 if it has no row."""
        count = self.conn.execute(
            select(drawer.c.count).where(drawer.c.denomination == denomination)
        ).scalar()
        return int(count) if count is not None else 0

    def increment(self, denomination: int, times: int = 1) -> None:
        """Add *times* bills of *denomination* to the drawer."""
        if times <= 0:
            return
        self.conn.execute(
            update(drawer)
            .where(drawer.c.denomination == denomination)
            .values(count=drawer.c.count + times)
        )

    def decrement(self, denomination: int) -> bool:
        """Remove one bill of *denomination* if the drawer holds any.

        Returns True when a bill was removed; an empty slot is a no-op.
        """
        result = self.conn.execute(
            update(drawer)
            .where(drawer.c.denomination == denomination, drawer.c.count > 0)
            .values(count=drawer.c.count - 1)
        )
        return result.rowcount == 1

    def restore(self, consumed: Mapping[int, int]) -> None:
        """Put back bills taken out of the drawer (bulk increment)."""
        for denomination, count in consumed.items():
            self.increment(denomination, count)

    def add_lemonades(self, count: int) -> None:
        """Add *count* lemonades to the cumulative sales total."""
        if count < 0:
            msg = f"Lemonade count must be non-negative, got {count}"
            raise ValueError(msg)
        self.conn.execute(
            update(sales)
            .where(sales.c.id == SALES_ROW_ID)
            .values(lemonades_sold=sales.c.lemonades_sold + count)
        )

    def lemonades_sold(self) -> int:
        total = self.conn.execute(
            select(sales.c.lemonades_sold).where(sales.c.id == SALES_ROW_ID)
        ).scalar()
        return int(total) if total is not None else 0

    def snapshot(self) -> DrawerSnapshot:
        """Frozen view of every denomination count plus the sales total."""
        rows = self.conn.execute(
            select(drawer.c.denomination, drawer.c.count).order_by(drawer.c.denomination)
        ).all()
        bills = {d: 0 for d in DENOMINATIONS}
        bills.update({int(row.denomination): int(row.count) for row in rows})
        return DrawerSnapshot(bills=bills, lemonades_sold=self.lemonades_sold())

    def reset(self) -> None:
        """Zero every bill count and the sales total."""
        self.conn.execute(update(drawer).values(count=0))
        self.conn.execute(update(sales).values(lemonades_sold=0))
        self.initialize()
