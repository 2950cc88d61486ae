"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from waiter.domain.service.money_text_codec import MoneyTextCodec
from waiter.infrastructure.config import settings
from waiter.infrastructure.persistence.json_coffee_repository import (
    JsonCoffeeRepository,
)
from waiter.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def coffee_repository() -> JsonCoffeeRepository:
    return JsonCoffeeRepository(settings.data_dir / "coffees.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def money_codec() -> MoneyTextCodec:
    return MoneyTextCodec(default_currency=settings.default_currency)
