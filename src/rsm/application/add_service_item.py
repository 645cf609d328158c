"""Application service: Add Service Item use case.

Attaches a catalog service to an existing order and recomputes the
order total from all of its items.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from rsm.application.dto import OrderDTO, order_to_dto
from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.model.line_item import ServiceLineItem, total_of
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.line_item_repository import LineItemRepository
from rsm.domain.repository.order_repository import OrderRepository
from rsm.domain.repository.service_repository import ServiceRepository

log = structlog.get_logger(__name__)


class AddServiceItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        service_repo: ServiceRepository,
        line_item_repo: LineItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._service_repo = service_repo
        self._line_item_repo = line_item_repo

    def handle(
        self,
        order_id: str,
        service_id: str,
        quantity: int,
        unit_price: str | Decimal | None = None,
    ) -> OrderDTO:
        """Add a service to an order.

        ``unit_price`` overrides the catalog price (a negotiated price);
        either way the price is frozen on the item.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        order.ensure_accepts_items()

        service = self._service_repo.get_by_id(service_id)
        if service is None:
            raise EntityNotFoundError(f"Service '{service_id}' not found")

        price = service.price if unit_price is None else Money.of(unit_price)
        item = ServiceLineItem.create(
            order_id=order.id,
            service_id=service.id,
            quantity=quantity,
            unit_price=price,
        )

        items = [*self._line_item_repo.list_for_order(order.id), item]
        order.update_total(total_of(items))

        self._line_item_repo.add(item)
        self._order_repo.save(order)

        log.info(
            "service_item_added",
            order_id=order.id,
            service_id=service.id,
            quantity=quantity,
            status=order.status.value,
        )
        return order_to_dto(order, items)
