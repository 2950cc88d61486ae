"""CoffeeOrder aggregate.

The order owns its line items and its state. All business invariants
are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from waiter.domain.exceptions import ValidationError
from waiter.domain.model.value_objects import Money, Quantity


class OrderState(Enum):
    """Order lifecycle. Declaration order is the only allowed direction."""

    INIT = "INIT"
    PAID = "PAID"
    BREWING = "BREWING"
    BREWED = "BREWED"
    TAKEN = "TAKEN"
    CANCELLED = "CANCELLED"

    @property
    def rank(self) -> int:
        return list(OrderState).index(self)

    @property
    def is_terminal(self) -> bool:
        return self in (OrderState.TAKEN, OrderState.CANCELLED)


@dataclass
class OrderLineItem:
    """One coffee on an order with the price it had when ordered."""

    coffee_id: int
    coffee_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


MAX_LINE_ITEMS = 50


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CoffeeOrder:
    """Aggregate root for customer orders.

    Use ``CoffeeOrder.create()`` for new orders; it enforces all business
    rules. The repository reconstitutes persisted orders via ``__init__``.
    """

    id: int | None
    customer: str
    items: list[OrderLineItem]
    state: OrderState = OrderState.INIT
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer: str, items: list[OrderLineItem]) -> CoffeeOrder:
        """Create a new order, enforcing all invariants."""
        if not customer or not customer.strip():
            raise ValidationError("Customer is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        currencies = sorted({item.unit_price.currency for item in items})
        if len(currencies) > 1:
            raise ValidationError(
                f"Order mixes currencies: {', '.join(currencies)}"
            )

        return CoffeeOrder(id=None, customer=customer.strip(), items=list(items))

    # --- State transitions ----------------------------------------------------

    def update_state(self, new_state: OrderState) -> None:
        """Move the order forward to *new_state*."""
        if self.state.is_terminal:
            raise ValidationError(
                f"Cannot change order in {self.state.value} state"
            )
        if new_state.rank <= self.state.rank:
            raise ValidationError(
                f"Cannot move order from {self.state.value} to {new_state.value}"
            )
        self.state = new_state
        self.updated_at = _now()

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            result = result + item.line_total
        return result
