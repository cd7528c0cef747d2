import dataclasses
from pathlib import Path

import click

from ims.domain.exceptions import DomainException
from ims.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_show,
    customer_update,
)
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_restock,
    product_show,
    product_update,
)
from ims.infrastructure.cli.report_commands import (
    report_inventory,
    report_low_stock,
    report_summary,
)
from ims.infrastructure.cli.sale_commands import sale_list, sale_record
from ims.infrastructure.config import configure_logging, load_settings


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON data files (overrides IMS_DATA_DIR).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (overrides IMS_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """IMS: Inventory & Sales Management"""
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    overrides = {}
    if data_dir is not None:
        overrides["data_dir"] = data_dir
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products and stock."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def sale() -> None:
    """Record and list sales."""


@cli.group()
def report() -> None:
    """Inventory and sales reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_restock)
product.add_command(product_show)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
sale.add_command(sale_list)
sale.add_command(sale_record)
report.add_command(report_inventory)
report.add_command(report_low_stock)
report.add_command(report_summary)
