"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Coffee
lookup + CoffeeOrder creation).
"""

from __future__ import annotations

import logging

from waiter.application.dto import OrderDTO, order_to_dto
from waiter.domain.exceptions import EntityNotFoundError
from waiter.domain.model.coffee import Coffee
from waiter.domain.model.order import CoffeeOrder, OrderLineItem
from waiter.domain.model.value_objects import Quantity
from waiter.domain.repository.coffee_repository import CoffeeRepository
from waiter.domain.repository.order_repository import OrderRepository
from waiter.domain.service.money_text_codec import MoneyTextCodec

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        coffee_repo: CoffeeRepository,
        codec: MoneyTextCodec,
    ) -> None:
        self._order_repo = order_repo
        self._coffee_repo = coffee_repo
        self._codec = codec

    def handle(self, customer: str, coffee_names: list[str]) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Resolve each coffee name to a Coffee (fail if not found).
        2. Group repeated names into one line with a quantity.
        3. Build OrderLineItems with *current* prices (snapshot).
        4. Let the CoffeeOrder aggregate validate all business rules.
        5. Persist and return a DTO.
        """
        counts: dict[int, int] = {}
        coffees: dict[int, Coffee] = {}

        for name in coffee_names:
            coffee = self._coffee_repo.get_by_name(name.strip())
            if coffee is None:
                raise EntityNotFoundError(f"Coffee not found: '{name}'")
            coffees[coffee.id] = coffee  # type: ignore[index]
            counts[coffee.id] = counts.get(coffee.id, 0) + 1  # type: ignore[index]

        line_items = [
            OrderLineItem(
                coffee_id=coffee_id,
                coffee_name=coffees[coffee_id].name,
                quantity=Quantity(qty),
                unit_price=coffees[coffee_id].price,  # <-- price snapshot
            )
            for coffee_id, qty in counts.items()
        ]

        order = CoffeeOrder.create(customer=customer, items=line_items)
        self._order_repo.save(order)
        logger.info("Created order #%s for %r", order.id, order.customer)

        return order_to_dto(order, self._codec)
