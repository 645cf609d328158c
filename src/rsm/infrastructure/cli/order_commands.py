"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from rsm.application.add_part_item import AddPartItemHandler
from rsm.application.add_service_item import AddServiceItemHandler
from rsm.application.approve_budget import ApproveBudgetHandler
from rsm.application.assign_client_vehicle import AssignClientVehicleHandler
from rsm.application.create_order import CreateOrderHandler
from rsm.application.delete_order import DeleteOrderHandler
from rsm.application.dto import ItemSpec, OrderDTO
from rsm.application.list_orders import ListOrdersHandler
from rsm.application.reject_budget import RejectBudgetHandler
from rsm.application.show_order import ShowOrderHandler
from rsm.application.update_order_status import UpdateOrderStatusHandler
from rsm.domain.exceptions import DomainError
from rsm.domain.model.status import OrderStatus
from rsm.infrastructure.bootstrap import (
    line_item_repository,
    order_repository,
    part_repository,
    service_repository,
)

_STATUS_CHOICES = click.Choice([status.value for status in OrderStatus])


def _transitions_help() -> str:
    """List the manual moves allowed from each status."""
    lines = ["\b", "Allowed moves:"]
    for status in OrderStatus:
        targets = [t.value for t in OrderStatus if t in status.allowed_targets]
        if targets:
            lines.append(f"  {status.value} -> {', '.join(targets)}")
    return "\n".join(lines)


def _parse_items(raw: str | None) -> list[ItemSpec]:
    """Parse 'ID:3,ID:5' into an ItemSpec list."""
    if not raw:
        return []
    specs: list[ItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ID:Quantity'."
            )
        item_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{item_id}'."
            )
        specs.append(ItemSpec(item_id=item_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Client:   {dto.client_id or '-'}")
    click.echo(f"Vehicle:  {dto.vehicle_id or '-'}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.execution_started_at:
        click.echo(f"Started:  {dto.execution_started_at}")
    if dto.execution_finished_at:
        click.echo(f"Finished: {dto.execution_finished_at}")
    click.echo()

    if dto.items:
        click.echo(f"  {'Kind':<8} {'Item':<36} {'Qty':>5} {'Price':>12} {'Subtotal':>12}")
        click.echo(f"  {'-'*77}")
        for item in dto.items:
            click.echo(
                f"  {item.kind:<8} {item.item_id:<36} {item.quantity:>5} "
                f"{item.unit_price:>12} {item.subtotal:>12}"
            )
        click.echo(f"  {'-'*77}")

    click.echo(f"  {'Order Total':<50} {dto.total:>27}")


@click.command("create")
@click.option("--client", "client_id", default=None, help="Client ID.")
@click.option("--vehicle", "vehicle_id", default=None, help="Vehicle ID (requires --client).")
@click.option("--services", default=None, help="Services as 'ID:Qty,ID:Qty'.")
@click.option("--parts", default=None, help="Parts as 'ID:Qty,ID:Qty'.")
def order_create(
    client_id: str | None,
    vehicle_id: str | None,
    services: str | None,
    parts: str | None,
) -> None:
    """Open a new service order."""
    service_specs = _parse_items(services)
    part_specs = _parse_items(parts)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        service_repo=service_repository(),
        part_repo=part_repository(),
        line_item_repo=line_item_repository(),
    )

    try:
        dto = handler.handle(
            client_id=client_id,
            vehicle_id=vehicle_id,
            services=service_specs,
            parts=part_specs,
        )
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("assign")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--client", "client_id", default=None, help="Client ID.")
@click.option("--vehicle", "vehicle_id", default=None, help="Vehicle ID (the order needs a client).")
def order_assign(order_id: str, client_id: str | None, vehicle_id: str | None) -> None:
    """Set the client and/or vehicle of an order."""
    if client_id is None and vehicle_id is None:
        raise click.UsageError("Give --client, --vehicle or both.")

    handler = AssignClientVehicleHandler(
        order_repo=order_repository(),
        line_item_repo=line_item_repository(),
    )

    try:
        dto = handler.handle(order_id, client_id=client_id, vehicle_id=vehicle_id)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("add-service")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--service", "service_id", required=True, help="Service ID.")
@click.option("--quantity", default=1, type=int, show_default=True, help="Quantity.")
@click.option("--price", default=None, help="Unit price override (defaults to catalog price).")
def order_add_service(order_id: str, service_id: str, quantity: int, price: str | None) -> None:
    """Add a service to an order."""
    handler = AddServiceItemHandler(
        order_repo=order_repository(),
        service_repo=service_repository(),
        line_item_repo=line_item_repository(),
    )

    try:
        dto = handler.handle(order_id, service_id, quantity, unit_price=price)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("add-part")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--part", "part_id", required=True, help="Part ID.")
@click.option("--quantity", default=1, type=int, show_default=True, help="Quantity.")
@click.option("--price", default=None, help="Unit price override (defaults to catalog price).")
def order_add_part(order_id: str, part_id: str, quantity: int, price: str | None) -> None:
    """Add a part to an order (takes it out of stock)."""
    handler = AddPartItemHandler(
        order_repo=order_repository(),
        part_repo=part_repository(),
        line_item_repo=line_item_repository(),
    )

    try:
        dto = handler.handle(order_id, part_id, quantity, unit_price=price)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("status", epilog=_transitions_help())
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--to", "new_status", required=True, type=_STATUS_CHOICES, help="Target status.")
def order_status(order_id: str, new_status: str) -> None:
    """Move an order to another status."""
    handler = UpdateOrderStatusHandler(
        order_repo=order_repository(),
        line_item_repo=line_item_repository(),
        part_repo=part_repository(),
    )

    try:
        dto = handler.handle(order_id, new_status)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} is now {dto.status}.")


@click.command("approve")
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_approve(order_id: str) -> None:
    """Approve the budget of an order (starts execution)."""
    handler = ApproveBudgetHandler(
        order_repo=order_repository(),
        line_item_repo=line_item_repository(),
    )

    try:
        handler.handle(order_id)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} budget approved, execution started.")


@click.command("reject")
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_reject(order_id: str) -> None:
    """Reject the budget of an order (cancels it, returns parts to stock)."""
    handler = RejectBudgetHandler(
        order_repo=order_repository(),
        line_item_repo=line_item_repository(),
        part_repo=part_repository(),
    )

    try:
        handler.handle(order_id)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} budget rejected, order canceled.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(
        order_repo=order_repository(),
        line_item_repo=line_item_repository(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--client", "client_id", default=None, help="Only orders of this client.")
@click.option("--vehicle", "vehicle_id", default=None, help="Only orders of this vehicle.")
@click.option("--status", default=None, type=_STATUS_CHOICES, help="Only orders in this status.")
def order_list(client_id: str | None, vehicle_id: str | None, status: str | None) -> None:
    """List orders, the ones being worked on first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(client_id=client_id, vehicle_id=vehicle_id, status=status)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36}  {'Status':<18} {'Client':<14} {'Total':>12}")
    click.echo("-" * 83)
    for dto in orders:
        click.echo(
            f"{dto.id:<36}  {dto.status:<18} {dto.client_id or '-':<14} {dto.total:>12}"
        )


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order that has not entered execution."""
    handler = DeleteOrderHandler(
        order_repo=order_repository(),
        line_item_repo=line_item_repository(),
        part_repo=part_repository(),
    )

    try:
        handler.handle(order_id)
    except DomainError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")
