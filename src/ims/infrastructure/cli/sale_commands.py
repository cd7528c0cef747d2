"""CLI commands for recording and listing sales."""

from __future__ import annotations

import click

from ims.application.list_sales import ListSalesHandler
from ims.application.record_sale import RecordSaleHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import (
    product_repository,
    sale_repository,
    stock_ledger,
)
from ims.infrastructure.config import Settings


@click.command("record")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units sold.")
@click.option("--paid", required=True, help="Amount tendered (e.g. 50.00).")
@click.pass_obj
def sale_record(settings: Settings, product_id: str, quantity: int, paid: str) -> None:
    """Record a sale and compute change."""
    handler = RecordSaleHandler(
        product_repo=product_repository(settings),
        sale_repo=sale_repository(settings),
        ledger=stock_ledger(settings),
        low_stock_threshold=settings.low_stock_threshold,
        currency_symbol=settings.currency_symbol,
    )

    try:
        receipt = handler.handle(product_id=product_id, quantity=quantity, amount_tendered=paid)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    sale = receipt.sale
    click.echo(f"Sale #{sale.id} completed")
    click.echo(f"  {sale.quantity} x {sale.product_name} @ {sale.unit_price}")
    click.echo(f"  {'Total':<8} {sale.total:>12}")
    click.echo(f"  {'Paid':<8} {sale.amount_tendered:>12}")
    click.echo(f"  {'Change':<8} {sale.change:>12}")
    if receipt.low_stock:
        click.echo(
            f"LOW STOCK: '{sale.product_name}' has only {receipt.remaining_quantity} left!"
        )


@click.command("list")
@click.pass_obj
def sale_list(settings: Settings) -> None:
    """Show sales history, newest first."""
    handler = ListSalesHandler(
        sale_repo=sale_repository(settings),
        currency_symbol=settings.currency_symbol,
    )

    try:
        sales = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not sales:
        click.echo("No sales recorded yet.")
        return

    click.echo(
        f"{'ID':<5} {'Product':<20} {'Qty':>5} {'Total':>10} {'Paid':>10} {'Change':>10}  Date"
    )
    click.echo("-" * 84)
    for s in sales:
        click.echo(
            f"{s.id:<5} {s.product_name:<20} {s.quantity:>5} {s.total:>10} "
            f"{s.amount_tendered:>10} {s.change:>10}  {s.sold_at}"
        )
