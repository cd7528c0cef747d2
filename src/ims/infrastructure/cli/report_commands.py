"""CLI commands for reports."""

from __future__ import annotations

import click

from ims.application.reports import ReportAggregator
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import (
    customer_repository,
    product_repository,
    sale_repository,
)
from ims.infrastructure.config import Settings


def _aggregator(settings: Settings) -> ReportAggregator:
    return ReportAggregator(
        product_repo=product_repository(settings),
        sale_repo=sale_repository(settings),
        customer_repo=customer_repository(settings),
        low_stock_threshold=settings.low_stock_threshold,
        currency_symbol=settings.currency_symbol,
    )


@click.command("summary")
@click.pass_obj
def report_summary(settings: Settings) -> None:
    """Show the dashboard figures."""
    try:
        summary = _aggregator(settings).summary()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Total inventory value':<24} {summary.total_inventory_value:>14}")
    click.echo(f"{'Low stock items':<24} {summary.low_stock_count:>14}")
    click.echo(f"{'Total sales value':<24} {summary.total_sales_value:>14}")
    click.echo(f"{'Customers':<24} {summary.customer_count:>14}")


@click.command("low-stock")
@click.option("--threshold", type=int, default=None, help="Flag quantities below this.")
@click.pass_obj
def report_low_stock(settings: Settings, threshold: int | None) -> None:
    """List products running low, lowest stock first."""
    try:
        items = _aggregator(settings).low_stock_items(threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No low-stock items.")
        return

    for p in items:
        click.echo(f"{p.name} ({p.quantity})")


@click.command("inventory")
@click.option("--threshold", type=int, default=None, help="Flag quantities below this.")
@click.pass_obj
def report_inventory(settings: Settings, threshold: int | None) -> None:
    """Detailed per-product inventory report."""
    try:
        lines = _aggregator(settings).inventory_report(threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return

    click.echo(
        f"{'Product':<20} {'Category':<14} {'Price':>10} {'Stock':>7} {'Value':>12}  Status"
    )
    click.echo("-" * 79)
    for line in lines:
        click.echo(
            f"{line.product_name:<20} {line.category:<14} {line.price:>10} "
            f"{line.quantity:>7} {line.value:>12}  {line.status}"
        )
