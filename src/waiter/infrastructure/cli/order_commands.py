"""CLI commands for the CoffeeOrder aggregate."""

from __future__ import annotations

import click

from waiter.application.create_order import CreateOrderHandler
from waiter.application.dto import OrderDTO
from waiter.application.show_order import ShowOrderHandler
from waiter.application.update_order_state import UpdateOrderStateHandler
from waiter.domain.exceptions import DomainException
from waiter.domain.model.order import OrderState
from waiter.infrastructure.bootstrap import (
    coffee_repository,
    money_codec,
    order_repository,
)


def _parse_items(raw: str) -> list[str]:
    """Parse 'latte,latte,mocha' into a list of coffee names."""
    names = [name.strip() for name in raw.split(",")]
    if not all(names):
        raise click.BadParameter(
            f"Invalid items '{raw}'. Expected 'Coffee,Coffee,...'."
        )
    return names


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (state={dto.state})")
    click.echo(f"Customer: {dto.customer}")
    click.echo(f"Created:  {dto.created_at:%Y-%m-%d %H:%M UTC}")
    click.echo()
    click.echo(f"  {'Coffee':<20} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        click.echo(
            f"  {item.coffee_name:<20} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Order Total':<27} {dto.total:>28}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Coffee names as 'latte,mocha'.")
def order_create(customer: str, items: str) -> None:
    """Place a new order."""
    names = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        coffee_repo=coffee_repository(),
        codec=money_codec(),
    )

    try:
        dto = handler.handle(customer=customer, coffee_names=names)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_show(order_id: int) -> None:
    """Show an order."""
    handler = ShowOrderHandler(order_repo=order_repository(), codec=money_codec())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("state")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--state",
    "new_state",
    required=True,
    type=click.Choice([s.value for s in OrderState], case_sensitive=False),
    help="Target state.",
)
def order_state(order_id: int, new_state: str) -> None:
    """Move an order to a new state."""
    handler = UpdateOrderStateHandler(order_repo=order_repository(), codec=money_codec())

    try:
        dto = handler.handle(order_id, OrderState(new_state.upper()))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.state}")
