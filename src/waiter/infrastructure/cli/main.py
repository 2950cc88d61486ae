import click

from waiter.infrastructure.cli.coffee_commands import coffee_add, coffee_list, coffee_show
from waiter.infrastructure.cli.order_commands import order_create, order_show, order_state


@click.group()
def cli() -> None:
    """Waiter: coffee menu and order desk"""


@cli.group()
def coffee() -> None:
    """Manage the coffee menu."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8080, show_default=True, type=int, help="Bind port.")
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("waiter.infrastructure.web.app:app", host=host, port=port)


# Register subcommands
coffee.add_command(coffee_add)
coffee.add_command(coffee_list)
coffee.add_command(coffee_show)
order.add_command(order_create)
order.add_command(order_show)
order.add_command(order_state)
