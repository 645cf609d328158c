"""Application service: Add Part Item use case.

Attaching a part and depleting its stock form one logical operation:
the stock check happens first, and nothing is persisted if it fails.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from rsm.application.dto import OrderDTO, order_to_dto
from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.model.line_item import PartLineItem, total_of
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.line_item_repository import LineItemRepository
from rsm.domain.repository.order_repository import OrderRepository
from rsm.domain.repository.part_repository import PartRepository
from rsm.domain.service.part_stock_service import PartStockService

log = structlog.get_logger(__name__)


class AddPartItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        part_repo: PartRepository,
        line_item_repo: LineItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._part_repo = part_repo
        self._line_item_repo = line_item_repo

    def handle(
        self,
        order_id: str,
        part_id: str,
        quantity: int,
        unit_price: str | Decimal | None = None,
    ) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        order.ensure_accepts_items()

        part = self._part_repo.get_by_id(part_id)
        if part is None:
            raise EntityNotFoundError(f"Part '{part_id}' not found")

        price = part.price if unit_price is None else Money.of(unit_price)
        item = PartLineItem.create(
            order_id=order.id,
            part_id=part.id,
            quantity=quantity,
            unit_price=price,
        )

        # Deplete stock first (domain service validates availability)
        PartStockService(self._part_repo).consume([(part.id, quantity)])

        items = [*self._line_item_repo.list_for_order(order.id), item]
        order.update_total(total_of(items))

        self._line_item_repo.add(item)
        self._order_repo.save(order)

        log.info(
            "part_item_added",
            order_id=order.id,
            part_id=part.id,
            quantity=quantity,
            status=order.status.value,
        )
        return order_to_dto(order, items)
