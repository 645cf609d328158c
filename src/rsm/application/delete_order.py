"""Application service: Delete Order use case.

Only orders that have not entered execution (or were canceled) may be
removed. Unless the order was already canceled, the parts it consumed
go back to stock first.
"""

from __future__ import annotations

import structlog

from rsm.domain.exceptions import BusinessRuleError, EntityNotFoundError
from rsm.domain.model.line_item import PartLineItem
from rsm.domain.repository.line_item_repository import LineItemRepository
from rsm.domain.repository.order_repository import OrderRepository
from rsm.domain.repository.part_repository import PartRepository
from rsm.domain.service.part_stock_service import PartStockService

log = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        line_item_repo: LineItemRepository,
        part_repo: PartRepository,
    ) -> None:
        self._order_repo = order_repo
        self._line_item_repo = line_item_repo
        self._part_repo = part_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        if not order.is_removable:
            raise BusinessRuleError(
                f"Cannot delete order in {order.status.value} status"
            )

        # Canceled orders already returned their parts
        if not order.status.is_canceled:
            PartStockService(self._part_repo).give_back(
                item
                for item in self._line_item_repo.list_for_order(order.id)
                if isinstance(item, PartLineItem)
            )

        self._line_item_repo.delete_for_order(order.id)
        self._order_repo.delete(order.id)

        log.info("order_deleted", order_id=order.id, status=order.status.value)
