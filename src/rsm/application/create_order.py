"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
A new order may arrive with services and parts already budgeted; in that
case the catalog prices are captured, part stock is consumed and the
total is set, all before anything is persisted.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from rsm.application.dto import ItemSpec, OrderDTO, order_to_dto
from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.model.line_item import LineItem, PartLineItem, ServiceLineItem, total_of
from rsm.domain.model.order import Order
from rsm.domain.repository.line_item_repository import LineItemRepository
from rsm.domain.repository.order_repository import OrderRepository
from rsm.domain.repository.part_repository import PartRepository
from rsm.domain.repository.service_repository import ServiceRepository
from rsm.domain.service.part_stock_service import PartStockService

log = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        service_repo: ServiceRepository,
        part_repo: PartRepository,
        line_item_repo: LineItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._service_repo = service_repo
        self._part_repo = part_repo
        self._line_item_repo = line_item_repo

    def handle(
        self,
        client_id: str | None = None,
        vehicle_id: str | None = None,
        services: Sequence[ItemSpec] = (),
        parts: Sequence[ItemSpec] = (),
    ) -> OrderDTO:
        """Open a new service order.

        Steps:
        1. Create the order; binding a vehicle moves it into diagnosis.
        2. Resolve every service and part against the catalog and build
           line items with *current* prices (snapshot).
        3. Consume part stock (all-or-nothing).
        4. Set the total, which opens the budget for approval.
        5. Persist and return a DTO.
        """
        order = Order.create(client_id=client_id)
        if vehicle_id is not None:
            order.set_vehicle(vehicle_id)

        items: list[LineItem] = []
        for spec in services:
            service = self._service_repo.get_by_id(spec.item_id)
            if service is None:
                raise EntityNotFoundError(f"Service '{spec.item_id}' not found")
            items.append(
                ServiceLineItem.create(
                    order_id=order.id,
                    service_id=service.id,
                    quantity=spec.quantity,
                    unit_price=service.price,  # <-- price snapshot
                )
            )

        for spec in parts:
            part = self._part_repo.get_by_id(spec.item_id)
            if part is None:
                raise EntityNotFoundError(f"Part '{spec.item_id}' not found")
            items.append(
                PartLineItem.create(
                    order_id=order.id,
                    part_id=part.id,
                    quantity=spec.quantity,
                    unit_price=part.price,
                )
            )

        stock = PartStockService(self._part_repo)
        stock.consume(
            (item.part_id, item.quantity.value)
            for item in items
            if isinstance(item, PartLineItem)
        )

        if items:
            order.update_total(total_of(items))

        self._order_repo.save(order)
        for item in items:
            self._line_item_repo.add(item)

        log.info(
            "order_created",
            order_id=order.id,
            status=order.status.value,
            total=str(order.total.amount),
            items=len(items),
        )
        return order_to_dto(order, items)
