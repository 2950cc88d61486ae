"""Abstract repository for Coffee aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from waiter.domain.model.coffee import Coffee


class CoffeeRepository(ABC):

    @abstractmethod
    def get_by_id(self, coffee_id: int) -> Coffee | None:
        """Return a coffee by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Coffee | None:
        """Return a coffee by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Coffee]:
        """Return every coffee on the menu."""

    @abstractmethod
    def save(self, coffee: Coffee) -> None:
        """Persist a new or updated coffee, assigning an ID to new ones."""
