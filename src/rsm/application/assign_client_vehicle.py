"""Application service: Assign Client/Vehicle use case.

An order can be opened at the counter before the client or the vehicle
is known. Binding the vehicle later moves a received order into
diagnosis.
"""

from __future__ import annotations

import structlog

from rsm.application.dto import OrderDTO, order_to_dto
from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.repository.line_item_repository import LineItemRepository
from rsm.domain.repository.order_repository import OrderRepository

log = structlog.get_logger(__name__)


class AssignClientVehicleHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        line_item_repo: LineItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._line_item_repo = line_item_repo

    def handle(
        self,
        order_id: str,
        client_id: str | None = None,
        vehicle_id: str | None = None,
    ) -> OrderDTO:
        """Set the client and/or the vehicle of an existing order.

        The client is applied first, so both can be given in one call.
        Nothing is saved if either assignment is rejected.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        previous = order.status
        if client_id is not None:
            order.set_client(client_id)
        if vehicle_id is not None:
            order.set_vehicle(vehicle_id)

        self._order_repo.save(order)

        log.info(
            "client_vehicle_assigned",
            order_id=order.id,
            client_id=order.client_id,
            vehicle_id=order.vehicle_id,
            from_status=previous.value,
            to_status=order.status.value,
        )
        return order_to_dto(order, self._line_item_repo.list_for_order(order.id))
