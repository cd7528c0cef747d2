"""CLI commands for the Product aggregate and its stock."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.list_products import ListProductsHandler, ShowProductHandler
from ims.application.restock_product import RestockProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import product_repository, stock_ledger
from ims.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", default=0, show_default=True, type=int, help="Opening stock.")
@click.option("--description", default="", help="Short description.")
@click.option("--category", default="", help="Category name.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    price: str,
    quantity: int,
    description: str,
    category: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(
            name=name,
            price=price,
            quantity=quantity,
            description=description,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at "
        f"{product.price.format(settings.currency_symbol)} ({product.quantity} in stock)"
    )


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(
        product_repo=product_repository(settings),
        currency_symbol=settings.currency_symbol,
    )

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 61)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<14} {p.price:>10} {p.quantity:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(
        product_repo=product_repository(settings),
        currency_symbol=settings.currency_symbol,
    )

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"Category:    {p.category}")
    click.echo(f"Description: {p.description}")
    click.echo(f"Price:       {p.price}")
    click.echo(f"In stock:    {p.quantity}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    price: str | None,
    description: str | None,
    category: str | None,
) -> None:
    """Update a product's details or price (not its stock)."""
    handler = UpdateProductHandler(
        product_repo=product_repository(settings),
        ledger=stock_ledger(settings),
    )

    try:
        handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            category=category,
            price=price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated.")


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to add.")
@click.pass_obj
def product_restock(settings: Settings, product_id: str, amount: int) -> None:
    """Add stock to a product."""
    handler = RestockProductHandler(ledger=stock_ledger(settings))

    try:
        new_quantity = handler.handle(product_id=product_id, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} restocked, {new_quantity} now in stock.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", "confirmed", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str, confirmed: bool) -> None:
    """Delete a product (sales history is kept)."""
    if not confirmed:
        confirmed = click.confirm(f"Delete product #{product_id}?", default=False)
    if not confirmed:
        click.echo("Aborted.")
        return

    handler = DeleteProductHandler(
        product_repo=product_repository(settings),
        ledger=stock_ledger(settings),
    )

    try:
        handler.handle(product_id, confirmed=True)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
