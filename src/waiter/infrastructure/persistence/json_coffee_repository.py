"""JSON-file-backed implementation of CoffeeRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from waiter.domain.model.coffee import Coffee
from waiter.domain.model.value_objects import DEFAULT_CURRENCY, Money
from waiter.domain.repository.coffee_repository import CoffeeRepository


class JsonCoffeeRepository(CoffeeRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CoffeeRepository interface -------------------------------------------

    def get_by_id(self, coffee_id: int) -> Coffee | None:
        return self._load().get(coffee_id)

    def get_by_name(self, name: str) -> Coffee | None:
        for coffee in self._load().values():
            if coffee.name.lower() == name.lower():
                return coffee
        return None

    def list_all(self) -> list[Coffee]:
        return list(self._load().values())

    def save(self, coffee: Coffee) -> None:
        coffees = self._load()
        if coffee.id is None:
            coffee.id = max(coffees, default=0) + 1
        coffees[coffee.id] = coffee
        self._persist(coffees)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Coffee]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Coffee(
                id=item["id"],
                name=item["name"],
                # Amounts are stored as strings so their scale survives.
                price=Money(Decimal(item["price"]), item.get("currency", DEFAULT_CURRENCY)),
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in raw
        }

    def _persist(self, coffees: dict[int, Coffee]) -> None:
        raw = [
            {
                "id": c.id,
                "name": c.name,
                "price": str(c.price.amount),
                "currency": c.price.currency,
                "created_at": c.created_at.isoformat(),
                "updated_at": c.updated_at.isoformat(),
            }
            for c in coffees.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
