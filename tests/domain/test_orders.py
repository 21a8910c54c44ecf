"""Tests for CustomerOrder, BatchState, and bill rendering."""

import pytest

from lemonctl.domain.orders import (
    BatchState,
    CustomerOrder,
    InvalidOrderError,
    RejectReason,
    has_missing_orders,
    render_bills,
    sort_by_position,
)
from tests.conftest import order


class TestCustomerOrder:
    def test_valid_order(self) -> None:
        o = CustomerOrder(bill_value=10, position_in_line=2, requested_lemonades=1)
        assert o.bill_value == 10
        assert o.position_in_line == 2
        assert o.requested_lemonades == 1

    def test_frozen(self) -> None:
        o = order(5, 1)
        with pytest.raises(AttributeError):
            o.bill_value = 10  # type: ignore[misc]

    @pytest.mark.parametrize("bill", [0, 1, 15, 50, 100])
    def test_rejects_unknown_bill(self, bill: int) -> None:
        with pytest.raises(InvalidOrderError, match="Invalid bill value"):
            order(bill, 1)

    def test_error_lists_accepted_bills(self) -> None:
        with pytest.raises(InvalidOrderError, match="Accepted values are 5, 10, or 20"):
            order(7, 1)

    def test_invalid_order_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            order(7, 1)

    def test_rejects_negative_lemonades(self) -> None:
        with pytest.raises(InvalidOrderError, match="Invalid lemonade count"):
            order(5, 1, -1)

    def test_zero_lemonades_allowed_at_construction(self) -> None:
        """A zero order is a business failure, not an invalid order."""
        assert order(5, 1, 0).requested_lemonades == 0


class TestSortByPosition:
    def test_sorts_ascending(self) -> None:
        orders = [order(20, 3), order(5, 1), order(10, 2)]
        assert [o.position_in_line for o in sort_by_position(orders)] == [1, 2, 3]

    def test_ties_keep_submission_order(self) -> None:
        first = order(5, 1)
        second = order(10, 1)
        assert sort_by_position([first, second]) == [first, second]
        assert sort_by_position([second, first]) == [second, first]

    def test_does_not_mutate_input(self) -> None:
        orders = [order(10, 2), order(5, 1)]
        sort_by_position(orders)
        assert orders[0].position_in_line == 2


class TestBatchState:
    def test_starts_empty_and_complete(self) -> None:
        state = BatchState()
        assert state.collected == {}
        assert state.consumed_from_drawer == {}
        assert state.lemonades == 0
        assert state.is_sale_complete is True

    def test_collect_and_take(self) -> None:
        state = BatchState()
        state.collect(5)
        state.collect(5)
        assert state.pool_count(5) == 2
        state.take_from_pool(5)
        assert state.pool_count(5) == 1
        assert state.pool_count(10) == 0

    def test_record_drawer_take(self) -> None:
        state = BatchState()
        state.record_drawer_take(10)
        state.record_drawer_take(10)
        state.record_drawer_take(5)
        assert state.consumed_from_drawer == {10: 2, 5: 1}

    def test_fail(self) -> None:
        state = BatchState()
        state.fail()
        assert state.is_sale_complete is False


class TestRenderBills:
    def test_insertion_order(self) -> None:
        assert render_bills({20: 1, 10: 1}) == "[20, 10]"

    def test_repeats(self) -> None:
        assert render_bills({5: 3}) == "[5, 5, 5]"

    def test_skips_zero_counts(self) -> None:
        assert render_bills({5: 0, 10: 1}) == "[10]"

    def test_empty(self) -> None:
        assert render_bills({}) == "[]"
        assert render_bills({5: 0, 10: 0}) == "[]"


class TestHasMissingOrders:
    def test_none_batch(self) -> None:
        assert has_missing_orders(None)

    def test_empty_batch(self) -> None:
        assert has_missing_orders([])

    def test_missing_entry(self) -> None:
        assert has_missing_orders([order(5, 1), None])

    def test_complete_batch(self) -> None:
        assert not has_missing_orders([order(5, 1)])


def test_reject_reasons_are_strings() -> None:
    assert str(RejectReason.NO_CHANGE) == "no_change"
    assert RejectReason("empty_batch") is RejectReason.EMPTY_BATCH
