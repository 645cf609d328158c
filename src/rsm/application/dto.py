"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from rsm.domain.model.line_item import LineItem
from rsm.domain.model.order import Order

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ItemSpec:
    """Input: a catalog entry (service or part ID) and how many of it."""

    item_id: str
    quantity: int


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single line item as displayed to the user."""

    kind: str  # "service" or "part"
    item_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "R$ 15.00"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete service order as displayed to the user."""

    id: str
    status: str
    client_id: str | None
    vehicle_id: str | None
    items: list[LineItemDTO]
    total: str
    created_at: str
    updated_at: str
    execution_started_at: str | None = None
    execution_finished_at: str | None = None


def _fmt(moment: datetime | None) -> str | None:
    return moment.strftime(_TIMESTAMP_FORMAT) if moment else None


def order_to_dto(order: Order, items: Iterable[LineItem] = ()) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        status=order.status.value,
        client_id=order.client_id,
        vehicle_id=order.vehicle_id,
        items=[
            LineItemDTO(
                kind=item.kind,
                item_id=item.reference_id,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime(_TIMESTAMP_FORMAT),
        updated_at=order.updated_at.strftime(_TIMESTAMP_FORMAT),
        execution_started_at=_fmt(order.execution.started_at),
        execution_finished_at=_fmt(order.execution.finished_at),
    )
