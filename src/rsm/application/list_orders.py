"""Application service: List Orders use case (query).

Orders come back in work-queue order: the ones being worked on first,
concluded ones last. Orders with the same priority keep the order in
which they were opened.
"""

from __future__ import annotations

from rsm.application.dto import OrderDTO, order_to_dto
from rsm.domain.model.status import OrderStatus
from rsm.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        client_id: str | None = None,
        vehicle_id: str | None = None,
        status: OrderStatus | str | None = None,
    ) -> list[OrderDTO]:
        wanted = OrderStatus.reconstruct(status) if status is not None else None

        orders = [
            order
            for order in self._order_repo.list_all()
            if (client_id is None or order.client_id == client_id)
            and (vehicle_id is None or order.vehicle_id == vehicle_id)
            and (wanted is None or order.status is wanted)
        ]
        return [order_to_dto(order) for order in OrderStatus.by_priority(orders)]
