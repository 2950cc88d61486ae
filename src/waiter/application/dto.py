"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP and application layers without
exposing domain internals. Money is already rendered as text.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from waiter.domain.model.coffee import Coffee
from waiter.domain.model.order import CoffeeOrder
from waiter.domain.service.money_text_codec import MoneyTextCodec


@dataclass(frozen=True)
class CoffeeDTO:
    """Output: a coffee as displayed to the client."""

    id: int
    name: str
    price: str  # formatted, e.g. "TWD 125.00"
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the client."""

    coffee_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the client."""

    id: int
    customer: str
    state: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: datetime
    updated_at: datetime


# --- Mapping ------------------------------------------------------------------


def coffee_to_dto(coffee: Coffee, codec: MoneyTextCodec) -> CoffeeDTO:
    return CoffeeDTO(
        id=coffee.id,  # type: ignore[arg-type]
        name=coffee.name,
        price=codec.format(coffee.price),
        created_at=coffee.created_at,
        updated_at=coffee.updated_at,
    )


def order_to_dto(order: CoffeeOrder, codec: MoneyTextCodec) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer=order.customer,
        state=order.state.value,
        items=[
            OrderLineItemDTO(
                coffee_name=item.coffee_name,
                quantity=item.quantity.value,
                unit_price=codec.format(item.unit_price),
                line_total=codec.format(item.line_total),
            )
            for item in order.items
        ],
        total=codec.format(order.total),
        created_at=order.created_at,
        updated_at=order.updated_at,
    )
