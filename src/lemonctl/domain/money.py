"""Bill denominations and lemonade pricing.

The denomination set and the price are fixed for the stand; they are
not read from configuration.
"""

from __future__ import annotations

LEMONADE_PRICE = 5

DENOMINATIONS: tuple[int, ...] = (5, 10, 20)

# Bills that may be handed back as change, largest first. $20 bills are
# never paid out.
CHANGE_DENOMINATIONS: tuple[int, ...] = (10, 5)


def is_valid_bill(value: object) -> bool:
    """Check whether *value* is an accepted bill denomination.

    Booleans are rejected even though ``True == 1`` in Python.
    """
    return isinstance(value, int) and not isinstance(value, bool) and value in DENOMINATIONS


def order_cost(requested_lemonades: int) -> int:
    """Price of *requested_lemonades* lemonades."""
    return requested_lemonades * LEMONADE_PRICE
