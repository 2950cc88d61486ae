"""Application service: Coffee queries."""

from __future__ import annotations

from waiter.application.dto import CoffeeDTO, coffee_to_dto
from waiter.domain.exceptions import EntityNotFoundError
from waiter.domain.repository.coffee_repository import CoffeeRepository
from waiter.domain.service.money_text_codec import MoneyTextCodec


class ShowCoffeeHandler:

    def __init__(self, coffee_repo: CoffeeRepository, codec: MoneyTextCodec) -> None:
        self._coffee_repo = coffee_repo
        self._codec = codec

    def by_id(self, coffee_id: int) -> CoffeeDTO:
        coffee = self._coffee_repo.get_by_id(coffee_id)
        if coffee is None:
            raise EntityNotFoundError(f"Coffee #{coffee_id} not found")
        return coffee_to_dto(coffee, self._codec)

    def by_name(self, name: str) -> CoffeeDTO:
        coffee = self._coffee_repo.get_by_name(name)
        if coffee is None:
            raise EntityNotFoundError(f"Coffee '{name}' not found")
        return coffee_to_dto(coffee, self._codec)

    def list_all(self) -> list[CoffeeDTO]:
        coffees = sorted(self._coffee_repo.list_all(), key=lambda c: c.id or 0)
        return [coffee_to_dto(c, self._codec) for c in coffees]
