"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from waiter.domain.model.order import CoffeeOrder, OrderLineItem, OrderState
from waiter.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from waiter.domain.repository.order_repository import OrderRepository


def _item_from_raw(raw: dict) -> OrderLineItem:
    return OrderLineItem(
        coffee_id=raw["coffee_id"],
        coffee_name=raw["coffee_name"],
        quantity=Quantity(raw["quantity"]),
        unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", DEFAULT_CURRENCY)),
    )


def _item_to_raw(item: OrderLineItem) -> dict:
    return {
        "coffee_id": item.coffee_id,
        "coffee_name": item.coffee_name,
        "quantity": item.quantity.value,
        "unit_price": str(item.unit_price.amount),
        "currency": item.unit_price.currency,
    }


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> CoffeeOrder | None:
        return self._load().get(order_id)

    def save(self, order: CoffeeOrder) -> None:
        orders = self._load()
        if order.id is None:
            order.id = max(orders, default=0) + 1
        orders[order.id] = order
        self._persist(orders)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, CoffeeOrder]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            entry["id"]: CoffeeOrder(
                id=entry["id"],
                customer=entry["customer"],
                items=[_item_from_raw(i) for i in entry["items"]],
                state=OrderState(entry["state"]),
                created_at=datetime.fromisoformat(entry["created_at"]),
                updated_at=datetime.fromisoformat(entry["updated_at"]),
            )
            for entry in raw
        }

    def _persist(self, orders: dict[int, CoffeeOrder]) -> None:
        raw = [
            {
                "id": o.id,
                "customer": o.customer,
                "state": o.state.value,
                "items": [_item_to_raw(i) for i in o.items],
                "created_at": o.created_at.isoformat(),
                "updated_at": o.updated_at.isoformat(),
            }
            for o in orders.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
