"""CLI commands for the Service catalog."""

from __future__ import annotations

import click

from rsm.application.add_service import AddServiceHandler
from rsm.application.update_service import UpdateServiceHandler
from rsm.domain.exceptions import DomainError
from rsm.infrastructure.bootstrap import service_repository


@click.command("add")
@click.option("--name", required=True, help="Service name.")
@click.option("--price", required=True, help="Price (e.g. 150.00).")
@click.option("--description", default=None, help="Optional description.")
def service_add(name: str, price: str, description: str | None) -> None:
    """Add a new service to the catalog."""
    handler = AddServiceHandler(service_repo=service_repository())

    try:
        service = handler.handle(name=name, price=price, description=description)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Service {service.id} '{service.name}' added at {service.price}")


@click.command("list")
def service_list() -> None:
    """List all services in the catalog."""
    services = service_repository().list_all()

    if not services:
        click.echo("No services found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Price':>12}")
    click.echo("-" * 75)
    for s in services:
        click.echo(f"{s.id:<36}  {s.name:<24} {str(s.price):>12}")


@click.command("update")
@click.option("--id", "service_id", required=True, help="Service ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New catalog price.")
def service_update(service_id: str, name: str | None, price: str | None) -> None:
    """Rename a service or change its price (existing orders keep theirs)."""
    if name is None and price is None:
        raise click.UsageError("Give --name, --price or both.")

    handler = UpdateServiceHandler(service_repo=service_repository())

    try:
        service = handler.handle(service_id=service_id, name=name, price=price)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Service {service.id} is now '{service.name}' at {service.price}")
