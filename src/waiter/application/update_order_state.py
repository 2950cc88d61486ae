"""Application service: Update Order State use case.

States only move forward (INIT -> PAID -> BREWING -> BREWED -> TAKEN,
with CANCELLED reachable from any non-terminal state).
"""

from __future__ import annotations

import logging

from waiter.application.dto import OrderDTO, order_to_dto
from waiter.domain.exceptions import EntityNotFoundError
from waiter.domain.model.order import OrderState
from waiter.domain.repository.order_repository import OrderRepository
from waiter.domain.service.money_text_codec import MoneyTextCodec

logger = logging.getLogger(__name__)


class UpdateOrderStateHandler:

    def __init__(self, order_repo: OrderRepository, codec: MoneyTextCodec) -> None:
        self._order_repo = order_repo
        self._codec = codec

    def handle(self, order_id: int, new_state: OrderState) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.state
        order.update_state(new_state)
        self._order_repo.save(order)
        logger.info("Order #%s moved %s -> %s", order_id, previous.value, new_state.value)

        return order_to_dto(order, self._codec)
