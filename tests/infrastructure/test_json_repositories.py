"""Round-trip tests for the JSON file repositories."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from rsm.domain.exceptions import BusinessRuleError, InvalidStatusError
from rsm.domain.model.line_item import PartLineItem, ServiceLineItem
from rsm.domain.model.order import ExecutionPeriod, Order
from rsm.domain.model.part import Part
from rsm.domain.model.service import Service
from rsm.domain.model.status import OrderStatus
from rsm.domain.model.value_objects import Money
from rsm.infrastructure.persistence.json_line_item_repository import JsonLineItemRepository
from rsm.infrastructure.persistence.json_order_repository import JsonOrderRepository
from rsm.infrastructure.persistence.json_part_repository import JsonPartRepository
from rsm.infrastructure.persistence.json_service_repository import JsonServiceRepository


class TestJsonOrderRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "orders.json"
        repo = JsonOrderRepository(path)
        assert path.exists()
        assert repo.list_all() == []

    def test_round_trip_keeps_every_field(self, tmp_path):
        start = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)
        order = Order(
            id="o1",
            status=OrderStatus.FINISHED,
            total=Money.of("379.20"),
            client_id="c1",
            vehicle_id="v1",
            execution=ExecutionPeriod(start, start + timedelta(hours=3)),
            created_at=start - timedelta(days=1),
            updated_at=start + timedelta(hours=3),
        )
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(order)

        loaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id("o1")
        assert loaded.status is OrderStatus.FINISHED
        assert loaded.total == Money.of("379.20")
        assert (loaded.client_id, loaded.vehicle_id) == ("c1", "v1")
        assert loaded.execution_duration() == timedelta(hours=3)
        assert loaded.created_at == order.created_at

    def test_save_upserts(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create(client_id="c1")
        repo.save(order)
        order.set_vehicle("v1")
        repo.save(order)
        [loaded] = repo.list_all()
        assert loaded.status is OrderStatus.IN_DIAGNOSIS

    def test_list_keeps_insertion_order(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        ids = [Order.create().id for _ in range(3)]
        for order_id in ids:
            repo.save(Order(id=order_id))
        assert [o.id for o in repo.list_all()] == ids

    def test_delete(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(Order(id="o1"))
        repo.delete("o1")
        assert repo.get_by_id("o1") is None

    def test_unknown_status_in_file_is_rejected(self, tmp_path):
        path = tmp_path / "orders.json"
        repo = JsonOrderRepository(path)
        repo.save(Order(id="o1"))
        raw = json.loads(path.read_text())
        raw[0]["status"] = "paused"
        path.write_text(json.dumps(raw))
        with pytest.raises(InvalidStatusError):
            repo.get_by_id("o1")


class TestJsonLineItemRepository:

    def test_round_trip_by_kind(self, tmp_path):
        repo = JsonLineItemRepository(tmp_path / "line_items.json")
        repo.add(ServiceLineItem.create("o1", "s1", 2, Money.of("100.50")))
        repo.add(PartLineItem.create("o1", "p1", 3, Money.of("25.90")))
        repo.add(PartLineItem.create("o2", "p1", 1, Money.of("25.90")))

        service, part = repo.list_for_order("o1")
        assert isinstance(service, ServiceLineItem)
        assert service.subtotal == Money.of("201.00")
        assert isinstance(part, PartLineItem)
        assert part.quantity.value == 3

    def test_delete_for_order(self, tmp_path):
        repo = JsonLineItemRepository(tmp_path / "line_items.json")
        repo.add(ServiceLineItem.create("o1", "s1", 1, Money.of("10")))
        repo.add(ServiceLineItem.create("o2", "s1", 1, Money.of("10")))
        repo.delete_for_order("o1")
        assert repo.list_for_order("o1") == []
        assert len(repo.list_for_order("o2")) == 1

    def test_incomplete_record_is_rejected(self, tmp_path):
        path = tmp_path / "line_items.json"
        path.write_text(json.dumps([
            {"kind": "part", "order_id": "o1", "item_id": "p1", "quantity": 1},
        ]))
        with pytest.raises(BusinessRuleError, match="Unit price is required"):
            JsonLineItemRepository(path).list_for_order("o1")

    def test_unknown_kind_is_rejected(self, tmp_path):
        path = tmp_path / "line_items.json"
        path.write_text(json.dumps([
            {"kind": "tip", "order_id": "o1", "item_id": "x", "quantity": 1,
             "unit_price": "5"},
        ]))
        with pytest.raises(BusinessRuleError, match="Unknown line item kind"):
            JsonLineItemRepository(path).list_for_order("o1")


class TestJsonCatalogRepositories:

    def test_part_round_trip(self, tmp_path):
        repo = JsonPartRepository(tmp_path / "parts.json")
        part = Part.create(name="Oil Filter", price=Money.of("25.90"), stock=4, code="FO-1")
        repo.save(part)
        part.deplete(1)
        repo.save(part)

        loaded = JsonPartRepository(tmp_path / "parts.json").get_by_id(part.id)
        assert loaded.name == "Oil Filter"
        assert loaded.code == "FO-1"
        assert loaded.stock.value == 3
        assert loaded.price == Money.of("25.90")
        assert len(repo.list_all()) == 1

    def test_service_round_trip(self, tmp_path):
        repo = JsonServiceRepository(tmp_path / "services.json")
        service = Service.create(name="Alignment", price=Money.of("80"), description="4 wheels")
        repo.save(service)

        loaded = repo.get_by_id(service.id)
        assert loaded.description == "4 wheels"
        assert loaded.price == Money.of("80")
        assert repo.get_by_id("missing") is None
