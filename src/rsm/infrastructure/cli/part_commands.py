"""CLI commands for the Part aggregate and its stock."""

from __future__ import annotations

import click

from rsm.application.add_part import AddPartHandler
from rsm.application.restock_part import RestockPartHandler
from rsm.application.update_part import UpdatePartHandler
from rsm.domain.exceptions import DomainError
from rsm.infrastructure.bootstrap import part_repository


@click.command("add")
@click.option("--name", required=True, help="Part name.")
@click.option("--price", required=True, help="Price (e.g. 25.90).")
@click.option("--code", default=None, help="Manufacturer or shelf code.")
@click.option("--stock", default=0, type=int, show_default=True, help="Opening stock.")
def part_add(name: str, price: str, code: str | None, stock: int) -> None:
    """Add a new part to the catalog."""
    handler = AddPartHandler(part_repo=part_repository())

    try:
        part = handler.handle(name=name, price=price, stock=stock, code=code)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part {part.id} '{part.name}' added at {part.price} (stock={part.stock})")


@click.command("list")
def part_list() -> None:
    """Show parts with their current stock."""
    parts = part_repository().list_all()

    if not parts:
        click.echo("No parts found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Code':<10} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 93)
    for p in parts:
        click.echo(
            f"{p.id:<36}  {p.name:<24} {p.code or '-':<10} {str(p.price):>12} {p.stock.value:>6}"
        )


@click.command("restock")
@click.option("--id", "part_id", required=True, help="Part ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
def part_restock(part_id: str, quantity: int) -> None:
    """Put units of a part back on the shelf."""
    handler = RestockPartHandler(part_repo=part_repository())

    try:
        part = handler.handle(part_id=part_id, quantity=quantity)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part '{part.name}' restocked, stock is now {part.stock}")


@click.command("update")
@click.option("--id", "part_id", required=True, help="Part ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New catalog price.")
def part_update(part_id: str, name: str | None, price: str | None) -> None:
    """Rename a part or change its price (existing orders keep theirs)."""
    if name is None and price is None:
        raise click.UsageError("Give --name, --price or both.")

    handler = UpdatePartHandler(part_repo=part_repository())

    try:
        part = handler.handle(part_id=part_id, name=name, price=price)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part {part.id} is now '{part.name}' at {part.price}")
