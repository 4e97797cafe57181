"""CLI commands for the product catalog.

The store lives only as long as the process, so products are managed
from a single interactive session.
"""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler
from catalog.application.remove_product import RemoveProductHandler
from catalog.infrastructure.bootstrap import product_store

ACTIONS = ("add", "remove", "list", "quit")


def _display_products(products: list[ProductDTO]) -> None:
    """Shared formatting for the product table."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"Registered products ({len(products)})")
    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<16} {'Price':>10}")
    click.echo("-" * 55)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<16} {p.price:>10}")


def _prompt_text(label: str) -> str:
    # Blank answers are allowed; the store decides what is valid.
    return click.prompt(label, default="", show_default=False)


@click.command("session")
def product_session() -> None:
    """Register, list and remove products interactively."""
    store = product_store()
    add_handler = AddProductHandler(product_store=store)
    remove_handler = RemoveProductHandler(product_store=store)
    list_handler = ListProductsHandler(product_store=store)

    # Re-render whenever the catalog changes.
    store.subscribe(lambda _snapshot: _display_products(list_handler.handle()))

    _display_products(list_handler.handle())

    while True:
        action = click.prompt(
            "Action",
            type=click.Choice(ACTIONS, case_sensitive=False),
            default="list",
        ).lower()

        if action == "quit":
            break

        if action == "add":
            name = _prompt_text("Product name")
            price = _prompt_text("Price")
            category = _prompt_text("Category")
            if add_handler.handle(name=name, price=price, category=category):
                click.echo("Product registered!")
            else:
                click.echo("Error: fill in all fields correctly.")
        elif action == "remove":
            product_id = click.prompt("Product ID", type=int)
            remove_handler.handle(product_id)
        else:
            _display_products(list_handler.handle())
