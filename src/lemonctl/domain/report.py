"""Drawer snapshot and the plain-text sales report."""

from __future__ import annotations

from dataclasses import dataclass, field

from lemonctl.domain.money import LEMONADE_PRICE


@dataclass(frozen=True)
class DrawerSnapshot:
    """Frozen view of the drawer counts and the lemonade sales total."""

    bills: dict[int, int] = field(default_factory=dict)
    lemonades_sold: int = 0

    @property
    def profit(self) -> int:
        """Derived, never stored."""
        return self.lemonades_sold * LEMONADE_PRICE

    @property
    def cash_value(self) -> int:
        return sum(denomination * count for denomination, count in self.bills.items())

    def count(self, denomination: int) -> int:
        return self.bills.get(denomination, 0)


def format_report(snapshot: DrawerSnapshot) -> str:
    """Render the sales report.

    Denomination lines follow the snapshot's key order. Every line,
    including the last, ends with a newline.
    """
    lines = [
        f"Total Lemonades sold so far - {snapshot.lemonades_sold}\n",
        f"Total Profit Made - {snapshot.profit}\n",
    ]
    for denomination, count in snapshot.bills.items():
        lines.append(f"Total {denomination} Bills Remaining - {count}\n")
    return "".join(lines)
