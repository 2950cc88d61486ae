"""Abstract repository for CoffeeOrder aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from waiter.domain.model.order import CoffeeOrder


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> CoffeeOrder | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: CoffeeOrder) -> None:
        """Persist a new or updated order, assigning an ID to a new one."""
