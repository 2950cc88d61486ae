"""Unit tests for the CoffeeOrder aggregate and its business rules."""

from decimal import Decimal

import pytest

from waiter.domain.exceptions import ValidationError
from waiter.domain.model.order import (
    MAX_LINE_ITEMS,
    CoffeeOrder,
    OrderLineItem,
    OrderState,
)
from waiter.domain.model.value_objects import Money, Quantity


def _make_item(
    name: str = "latte", qty: int = 1, price: str = "125.00", currency: str = "TWD"
) -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        coffee_id=1,
        coffee_name=name,
        quantity=Quantity(qty),
        unit_price=Money(Decimal(price), currency),
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = CoffeeOrder.create(" Li Lei ", [_make_item(qty=2, price="100.00")])
        assert order.customer == "Li Lei"
        assert order.state == OrderState.INIT
        assert order.id is None  # assigned by repository
        assert order.total == Money(Decimal("200.00"))

    def test_total_is_sum_of_line_items(self):
        items = [
            _make_item("latte", qty=3, price="125.00"),
            _make_item("mocha", qty=1, price="150.50"),
        ]
        assert CoffeeOrder.create("Han", items).total == Money(Decimal("525.50"))

    def test_total_keeps_item_currency(self):
        order = CoffeeOrder.create("Han", [_make_item(currency="USD", price="4.50")])
        assert order.total == Money(Decimal("4.50"), "USD")

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer is required"):
            CoffeeOrder.create("   ", [_make_item()])

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            CoffeeOrder.create("Han", [])

    def test_too_many_items_rejected(self):
        items = [_make_item(name=f"c{i}") for i in range(MAX_LINE_ITEMS + 1)]
        with pytest.raises(ValidationError, match="Maximum"):
            CoffeeOrder.create("Han", items)

    def test_mixed_currencies_rejected(self):
        items = [_make_item(currency="TWD"), _make_item(currency="USD")]
        with pytest.raises(ValidationError, match="mixes currencies"):
            CoffeeOrder.create("Han", items)


class TestOrderStateTransitions:

    def _order(self) -> CoffeeOrder:
        return CoffeeOrder.create("Han", [_make_item()])

    def test_forward_steps(self):
        order = self._order()
        for state in (OrderState.PAID, OrderState.BREWING, OrderState.BREWED, OrderState.TAKEN):
            order.update_state(state)
            assert order.state == state

    def test_skipping_ahead_allowed(self):
        order = self._order()
        order.update_state(OrderState.BREWED)
        assert order.state == OrderState.BREWED

    def test_cancel_from_init(self):
        order = self._order()
        order.update_state(OrderState.CANCELLED)
        assert order.state == OrderState.CANCELLED

    def test_same_state_rejected(self):
        order = self._order()
        with pytest.raises(ValidationError, match="from INIT to INIT"):
            order.update_state(OrderState.INIT)

    def test_backwards_rejected(self):
        order = self._order()
        order.update_state(OrderState.BREWING)
        with pytest.raises(ValidationError, match="from BREWING to PAID"):
            order.update_state(OrderState.PAID)

    @pytest.mark.parametrize("terminal", [OrderState.TAKEN, OrderState.CANCELLED])
    def test_terminal_states_are_final(self, terminal):
        order = self._order()
        order.update_state(terminal)
        with pytest.raises(ValidationError, match="Cannot change order"):
            order.update_state(OrderState.CANCELLED)

    def test_update_refreshes_timestamp(self):
        order = self._order()
        before = order.updated_at
        order.update_state(OrderState.PAID)
        assert order.updated_at >= before
