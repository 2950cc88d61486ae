"""Application service: Add Coffee use case (single and batch)."""

from __future__ import annotations

import logging

from waiter.application.dto import CoffeeDTO, coffee_to_dto
from waiter.domain.exceptions import ValidationError
from waiter.domain.model.coffee import Coffee
from waiter.domain.model.value_objects import Money
from waiter.domain.repository.coffee_repository import CoffeeRepository
from waiter.domain.service.money_text_codec import MoneyTextCodec

logger = logging.getLogger(__name__)


class AddCoffeeHandler:

    def __init__(self, coffee_repo: CoffeeRepository, codec: MoneyTextCodec) -> None:
        self._coffee_repo = coffee_repo
        self._codec = codec

    def handle(self, name: str, price: Money) -> CoffeeDTO:
        """Add a new coffee to the menu."""
        coffee = Coffee.create(name=name, price=price)
        self._assert_unique(coffee.name)

        self._coffee_repo.save(coffee)
        logger.info("Added coffee #%s %r at %s", coffee.id, coffee.name, self._codec.format(price))
        return coffee_to_dto(coffee, self._codec)

    def handle_batch(self, entries: list[tuple[str, Money]]) -> list[CoffeeDTO]:
        """Add several coffees; nothing is saved unless every entry is valid."""
        coffees = [Coffee.create(name=name, price=price) for name, price in entries]

        seen: set[str] = set()
        for coffee in coffees:
            key = coffee.name.lower()
            if key in seen:
                raise ValidationError(f"Coffee '{coffee.name}' listed more than once")
            seen.add(key)
            self._assert_unique(coffee.name)

        for coffee in coffees:
            self._coffee_repo.save(coffee)
        logger.info("Added %d coffees in batch", len(coffees))
        return [coffee_to_dto(c, self._codec) for c in coffees]

    def _assert_unique(self, name: str) -> None:
        if self._coffee_repo.get_by_name(name) is not None:
            raise ValidationError(f"Coffee '{name}' already exists")
