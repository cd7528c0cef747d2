"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from ims.application.manage_customers import (
    AddCustomerHandler,
    DeleteCustomerHandler,
    ListCustomersHandler,
    ShowCustomerHandler,
    UpdateCustomerHandler,
)
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import customer_repository
from ims.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", default="", help="Email address.")
@click.option("--phone", default="", help="Phone number.")
@click.option("--address", default="", help="Postal address.")
@click.pass_obj
def customer_add(settings: Settings, name: str, email: str, phone: str, address: str) -> None:
    """Add a customer."""
    handler = AddCustomerHandler(customer_repo=customer_repository(settings))

    try:
        dto = handler.handle(name=name, email=email, phone=phone, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{dto.id} '{dto.name}' added")


@click.command("list")
@click.pass_obj
def customer_list(settings: Settings) -> None:
    """List all customers."""
    handler = ListCustomersHandler(customer_repo=customer_repository(settings))

    try:
        customers = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<28} {'Phone':<15}")
    click.echo("-" * 72)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<20} {c.email:<28} {c.phone:<15}")


@click.command("show")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_show(settings: Settings, customer_id: str) -> None:
    """Show one customer."""
    handler = ShowCustomerHandler(customer_repo=customer_repository(settings))

    try:
        c = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{c.id}  {c.name}")
    click.echo(f"Email:   {c.email}")
    click.echo(f"Phone:   {c.phone}")
    click.echo(f"Address: {c.address}")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--email", default=None, help="New email address.")
@click.option("--phone", default=None, help="New phone number.")
@click.option("--address", default=None, help="New postal address.")
@click.pass_obj
def customer_update(
    settings: Settings,
    customer_id: str,
    name: str | None,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Update a customer's details."""
    handler = UpdateCustomerHandler(customer_repo=customer_repository(settings))

    try:
        handler.handle(customer_id, name=name, email=email, phone=phone, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} updated.")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--yes", "confirmed", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_obj
def customer_delete(settings: Settings, customer_id: str, confirmed: bool) -> None:
    """Delete a customer."""
    if not confirmed:
        confirmed = click.confirm(f"Delete customer #{customer_id}?", default=False)
    if not confirmed:
        click.echo("Aborted.")
        return

    handler = DeleteCustomerHandler(customer_repo=customer_repository(settings))

    try:
        handler.handle(customer_id, confirmed=True)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} deleted.")
