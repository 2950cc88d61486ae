"""Application service: Show Order use case (query)."""

from __future__ import annotations

from waiter.application.dto import OrderDTO, order_to_dto
from waiter.domain.exceptions import EntityNotFoundError
from waiter.domain.repository.order_repository import OrderRepository
from waiter.domain.service.money_text_codec import MoneyTextCodec


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, codec: MoneyTextCodec) -> None:
        self._order_repo = order_repo
        self._codec = codec

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order, self._codec)
