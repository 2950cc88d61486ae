"""CLI commands for the Coffee aggregate."""

from __future__ import annotations

import click

from waiter.application.add_coffee import AddCoffeeHandler
from waiter.application.show_coffee import ShowCoffeeHandler
from waiter.domain.exceptions import DomainException
from waiter.infrastructure.bootstrap import coffee_repository, money_codec


@click.command("add")
@click.option("--name", required=True, help="Coffee name.")
@click.option("--price", required=True, help="Price, e.g. '125.00' or 'TWD 125.00'.")
def coffee_add(name: str, price: str) -> None:
    """Add a new coffee to the menu."""
    codec = money_codec()
    handler = AddCoffeeHandler(coffee_repo=coffee_repository(), codec=codec)

    try:
        dto = handler.handle(name=name, price=codec.parse(price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Coffee #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
def coffee_list() -> None:
    """List all coffees on the menu."""
    handler = ShowCoffeeHandler(coffee_repo=coffee_repository(), codec=money_codec())
    coffees = handler.list_all()

    if not coffees:
        click.echo("No coffees found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>14}")
    click.echo("-" * 42)
    for c in coffees:
        click.echo(f"{c.id:<6} {c.name:<20} {c.price:>14}")


@click.command("show")
@click.option("--id", "coffee_id", type=int, help="Coffee ID.")
@click.option("--name", help="Coffee name.")
def coffee_show(coffee_id: int | None, name: str | None) -> None:
    """Show one coffee by ID or name."""
    if (coffee_id is None) == (name is None):
        raise click.UsageError("Pass exactly one of --id or --name.")

    handler = ShowCoffeeHandler(coffee_repo=coffee_repository(), codec=money_codec())

    try:
        dto = handler.by_id(coffee_id) if coffee_id is not None else handler.by_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Coffee #{dto.id}  {dto.name}  {dto.price}")
    click.echo(f"Updated: {dto.updated_at:%Y-%m-%d %H:%M UTC}")
