"""Coffee aggregate.

Coffees live independently of orders. Their prices change over time;
orders capture a price snapshot and are unaffected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from waiter.domain.exceptions import ValidationError
from waiter.domain.model.value_objects import Money


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Coffee:
    """A coffee on the menu.

    Use ``Coffee.create()`` for new coffees. The ``__init__`` stays simple so
    the repository can reconstitute persisted coffees without re-validating.
    """

    id: int | None
    name: str
    price: Money
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(name: str, price: Money) -> Coffee:
        if not name or not name.strip():
            raise ValidationError("Coffee name is required")
        if not price.is_positive:
            raise ValidationError("Coffee price must be greater than zero")
        return Coffee(id=None, name=name.strip(), price=price)

    def update_price(self, new_price: Money) -> None:
        """Change the menu price.

        Existing orders keep the price they were created with.
        """
        if not new_price.is_positive:
            raise ValidationError("Coffee price must be greater than zero")
        self.price = new_price
        self.updated_at = _now()
