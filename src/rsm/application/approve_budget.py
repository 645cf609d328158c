"""Application service: Approve Budget use case."""

from __future__ import annotations

import structlog

from rsm.application.dto import OrderDTO, order_to_dto
from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.repository.line_item_repository import LineItemRepository
from rsm.domain.repository.order_repository import OrderRepository

log = structlog.get_logger(__name__)


class ApproveBudgetHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        line_item_repo: LineItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._line_item_repo = line_item_repo

    def handle(self, order_id: str) -> OrderDTO:
        """Approve the budget; the order goes straight into execution."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.approve_budget()
        self._order_repo.save(order)

        log.info("budget_approved", order_id=order.id, total=str(order.total.amount))
        return order_to_dto(order, self._line_item_repo.list_for_order(order.id))
