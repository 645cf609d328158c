import click

from rsm.infrastructure.cli.order_commands import (
    order_add_part,
    order_add_service,
    order_approve,
    order_assign,
    order_create,
    order_delete,
    order_list,
    order_reject,
    order_show,
    order_status,
)
from rsm.infrastructure.cli.part_commands import part_add, part_list, part_restock, part_update
from rsm.infrastructure.cli.service_commands import service_add, service_list, service_update
from rsm.infrastructure.logging import configure_logging
from rsm.infrastructure.settings import get_settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, default=None, help="Log as JSON lines.")
def cli(verbose: bool, log_json: bool | None) -> None:
    """RSM: Repair Shop Manager"""
    settings = get_settings()
    configure_logging(
        verbose=verbose,
        log_json=settings.log_json if log_json is None else log_json,
        level=settings.log_level,
    )


@cli.group()
def order() -> None:
    """Manage service orders."""


@cli.group()
def part() -> None:
    """Manage parts and stock."""


@cli.group()
def service() -> None:
    """Manage the service catalog."""


# Register subcommands
order.add_command(order_add_part)
order.add_command(order_add_service)
order.add_command(order_approve)
order.add_command(order_assign)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_reject)
order.add_command(order_show)
order.add_command(order_status)
part.add_command(part_add)
part.add_command(part_list)
part.add_command(part_restock)
part.add_command(part_update)
service.add_command(service_add)
service.add_command(service_list)
service.add_command(service_update)
