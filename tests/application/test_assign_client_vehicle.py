"""Tests for binding a client and a vehicle to an existing order."""

import pytest

from rsm.application.assign_client_vehicle import AssignClientVehicleHandler
from rsm.application.create_order import CreateOrderHandler
from rsm.application.update_order_status import UpdateOrderStatusHandler
from rsm.domain.exceptions import BusinessRuleError, EntityNotFoundError, ValidationError
from rsm.domain.model.status import OrderStatus


def _open_order(repos, **kwargs) -> str:
    handler = CreateOrderHandler(repos.orders, repos.services, repos.parts, repos.items)
    return handler.handle(**kwargs).id


def _assign(repos) -> AssignClientVehicleHandler:
    return AssignClientVehicleHandler(repos.orders, repos.items)


class TestAssignClientVehicle:

    def test_client_alone_keeps_order_received(self, repos):
        order_id = _open_order(repos)
        dto = _assign(repos).handle(order_id, client_id="c1")
        assert dto.client_id == "c1"
        assert dto.status == "received"

    def test_vehicle_moves_received_order_into_diagnosis(self, repos):
        order_id = _open_order(repos, client_id="c1")
        dto = _assign(repos).handle(order_id, vehicle_id="v1")
        assert dto.vehicle_id == "v1"
        assert dto.status == "in_diagnosis"
        assert repos.orders.get_by_id(order_id).status is OrderStatus.IN_DIAGNOSIS

    def test_client_and_vehicle_in_one_call(self, repos):
        order_id = _open_order(repos)
        dto = _assign(repos).handle(order_id, client_id="c1", vehicle_id="v1")
        assert (dto.client_id, dto.vehicle_id) == ("c1", "v1")
        assert dto.status == "in_diagnosis"

    def test_vehicle_before_client_rejected(self, repos):
        order_id = _open_order(repos)
        with pytest.raises(BusinessRuleError, match="without a client"):
            _assign(repos).handle(order_id, vehicle_id="v1")
        saved = repos.orders.get_by_id(order_id)
        assert saved.vehicle_id is None
        assert saved.status is OrderStatus.RECEIVED

    def test_blank_client_rejected(self, repos):
        order_id = _open_order(repos)
        with pytest.raises(ValidationError, match="Client id is required"):
            _assign(repos).handle(order_id, client_id="")

    def test_vehicle_later_in_lifecycle_keeps_status(self, repos):
        order_id = _open_order(repos, client_id="c1", vehicle_id="v1")
        UpdateOrderStatusHandler(repos.orders, repos.items, repos.parts).handle(
            order_id, "awaiting_approval"
        )
        dto = _assign(repos).handle(order_id, vehicle_id="v2")
        assert dto.vehicle_id == "v2"
        assert dto.status == "awaiting_approval"

    def test_unknown_order(self, repos):
        with pytest.raises(EntityNotFoundError):
            _assign(repos).handle("nope", client_id="c1")
