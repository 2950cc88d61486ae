"""
Dependency injection for the HTTP layer.

Provides FastAPI dependency functions that wire repositories and the
money codec into use-case handlers via constructor injection. Tests
replace the repository providers through ``app.dependency_overrides``.
"""

from fastapi import Depends

from waiter.application.add_coffee import AddCoffeeHandler
from waiter.application.create_order import CreateOrderHandler
from waiter.application.show_coffee import ShowCoffeeHandler
from waiter.application.show_order import ShowOrderHandler
from waiter.application.update_order_state import UpdateOrderStateHandler
from waiter.domain.repository.coffee_repository import CoffeeRepository
from waiter.domain.repository.order_repository import OrderRepository
from waiter.domain.service.money_text_codec import MoneyTextCodec
from waiter.infrastructure import bootstrap


def get_coffee_repository() -> CoffeeRepository:
    return bootstrap.coffee_repository()


def get_order_repository() -> OrderRepository:
    return bootstrap.order_repository()


def get_money_codec() -> MoneyTextCodec:
    return bootstrap.money_codec()


def get_add_coffee_handler(
    coffee_repo: CoffeeRepository = Depends(get_coffee_repository),
    codec: MoneyTextCodec = Depends(get_money_codec),
) -> AddCoffeeHandler:
    """Build AddCoffeeHandler with its infrastructure dependencies."""
    return AddCoffeeHandler(coffee_repo=coffee_repo, codec=codec)


def get_show_coffee_handler(
    coffee_repo: CoffeeRepository = Depends(get_coffee_repository),
    codec: MoneyTextCodec = Depends(get_money_codec),
) -> ShowCoffeeHandler:
    """Build ShowCoffeeHandler with its infrastructure dependencies."""
    return ShowCoffeeHandler(coffee_repo=coffee_repo, codec=codec)


def get_create_order_handler(
    order_repo: OrderRepository = Depends(get_order_repository),
    coffee_repo: CoffeeRepository = Depends(get_coffee_repository),
    codec: MoneyTextCodec = Depends(get_money_codec),
) -> CreateOrderHandler:
    """Build CreateOrderHandler with its infrastructure dependencies."""
    return CreateOrderHandler(order_repo=order_repo, coffee_repo=coffee_repo, codec=codec)


def get_show_order_handler(
    order_repo: OrderRepository = Depends(get_order_repository),
    codec: MoneyTextCodec = Depends(get_money_codec),
) -> ShowOrderHandler:
    """Build ShowOrderHandler with its infrastructure dependencies."""
    return ShowOrderHandler(order_repo=order_repo, codec=codec)


def get_update_order_state_handler(
    order_repo: OrderRepository = Depends(get_order_repository),
    codec: MoneyTextCodec = Depends(get_money_codec),
) -> UpdateOrderStateHandler:
    """Build UpdateOrderStateHandler with its infrastructure dependencies."""
    return UpdateOrderStateHandler(order_repo=order_repo, codec=codec)
