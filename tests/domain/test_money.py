"""Tests for denominations and pricing."""

import pytest

from lemonctl.domain.money import (
    CHANGE_DENOMINATIONS,
    DENOMINATIONS,
    LEMONADE_PRICE,
    is_valid_bill,
    order_cost,
)


class TestDenominations:
    def test_accepted_bills(self) -> None:
        assert DENOMINATIONS == (5, 10, 20)

    def test_twenties_never_paid_out(self) -> None:
        assert 20 not in CHANGE_DENOMINATIONS
        assert CHANGE_DENOMINATIONS == (10, 5)

    @pytest.mark.parametrize("value", [5, 10, 20])
    def test_valid(self, value: int) -> None:
        assert is_valid_bill(value)

    @pytest.mark.parametrize("value", [0, 1, 7, 15, 50, 100, -5, "5", 5.0, None, True])
    def test_invalid(self, value: object) -> None:
        assert not is_valid_bill(value)


class TestOrderCost:
    def test_price(self) -> None:
        assert LEMONADE_PRICE == 5

    def test_cost_scales(self) -> None:
        assert order_cost(0) == 0
        assert order_cost(1) == 5
        assert order_cost(4) == 20
