"""Application service: Reject Budget use case.

A rejected budget cancels the order. Parts already set aside for it
are returned to stock before the order is saved.
"""

from __future__ import annotations

import structlog

from rsm.application.dto import OrderDTO, order_to_dto
from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.model.line_item import PartLineItem
from rsm.domain.repository.line_item_repository import LineItemRepository
from rsm.domain.repository.order_repository import OrderRepository
from rsm.domain.repository.part_repository import PartRepository
from rsm.domain.service.part_stock_service import PartStockService

log = structlog.get_logger(__name__)


class RejectBudgetHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        line_item_repo: LineItemRepository,
        part_repo: PartRepository,
    ) -> None:
        self._order_repo = order_repo
        self._line_item_repo = line_item_repo
        self._part_repo = part_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.reject_budget()

        items = self._line_item_repo.list_for_order(order.id)
        PartStockService(self._part_repo).give_back(
            item for item in items if isinstance(item, PartLineItem)
        )
        self._order_repo.save(order)

        log.info("budget_rejected", order_id=order.id)
        return order_to_dto(order, items)
