"""Tests for the ListOrders query."""

from rsm.application.list_orders import ListOrdersHandler
from rsm.domain.model.order import Order
from rsm.domain.model.status import OrderStatus
from tests.fakes import FakeOrderRepository


def _order(order_id: str, status: OrderStatus, client: str = "c1", vehicle: str = "v1") -> Order:
    return Order(id=order_id, status=status, client_id=client, vehicle_id=vehicle)


def _handler() -> ListOrdersHandler:
    repo = FakeOrderRepository([
        _order("done", OrderStatus.DELIVERED),
        _order("new", OrderStatus.RECEIVED, client="c2", vehicle="v2"),
        _order("working", OrderStatus.IN_EXECUTION),
        _order("budget", OrderStatus.AWAITING_APPROVAL, client="c2", vehicle="v3"),
        _order("checking", OrderStatus.IN_DIAGNOSIS),
        _order("dropped", OrderStatus.CANCELED),
    ])
    return ListOrdersHandler(repo)


def test_orders_come_back_by_priority():
    ids = [dto.id for dto in _handler().handle()]
    assert ids == ["working", "budget", "checking", "new", "done", "dropped"]


def test_filter_by_client():
    ids = [dto.id for dto in _handler().handle(client_id="c2")]
    assert ids == ["budget", "new"]


def test_filter_by_vehicle_and_status():
    assert [d.id for d in _handler().handle(vehicle_id="v3")] == ["budget"]
    assert [d.id for d in _handler().handle(status="canceled")] == ["dropped"]


def test_empty_repository():
    assert ListOrdersHandler(FakeOrderRepository()).handle() == []
