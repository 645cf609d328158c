"""Tests for the catalog use cases: services and parts."""

import pytest

from rsm.application.add_part import AddPartHandler
from rsm.application.add_service import AddServiceHandler
from rsm.application.add_service_item import AddServiceItemHandler
from rsm.application.create_order import CreateOrderHandler
from rsm.application.dto import ItemSpec
from rsm.application.restock_part import RestockPartHandler
from rsm.application.show_order import ShowOrderHandler
from rsm.application.update_part import UpdatePartHandler
from rsm.application.update_service import UpdateServiceHandler
from rsm.domain.exceptions import EntityNotFoundError, ValidationError
from rsm.domain.model.value_objects import Money
from tests.fakes import FakePartRepository, FakeServiceRepository


def test_add_service_persists():
    repo = FakeServiceRepository()
    service = AddServiceHandler(repo).handle("Oil Change", "100.50", "Synthetic oil")
    assert repo.get_by_id(service.id) is service
    assert service.price == Money.of("100.50")


def test_add_service_rejects_zero_price():
    repo = FakeServiceRepository()
    with pytest.raises(ValidationError):
        AddServiceHandler(repo).handle("Oil Change", "0")
    assert repo.list_all() == []


def test_add_part_with_opening_stock():
    repo = FakePartRepository()
    part = AddPartHandler(repo).handle("Oil Filter", "25.90", stock=12, code="FO-1")
    assert repo.get_by_id(part.id).stock.value == 12


def test_restock_part():
    repo = FakePartRepository()
    part = AddPartHandler(repo).handle("Oil Filter", "25.90")
    RestockPartHandler(repo).handle(part.id, 5)
    assert repo.get_by_id(part.id).stock.value == 5


def test_restock_unknown_part():
    with pytest.raises(EntityNotFoundError):
        RestockPartHandler(FakePartRepository()).handle("nope", 1)


def test_restock_rejects_non_positive_quantity():
    repo = FakePartRepository()
    part = AddPartHandler(repo).handle("Oil Filter", "25.90", stock=3)
    with pytest.raises(ValidationError):
        RestockPartHandler(repo).handle(part.id, 0)
    assert repo.get_by_id(part.id).stock.value == 3


class TestUpdateCatalog:

    def _order_with_oil_change(self, repos) -> str:
        handler = CreateOrderHandler(repos.orders, repos.services, repos.parts, repos.items)
        return handler.handle(
            client_id="c1",
            vehicle_id="v1",
            services=[ItemSpec("s1", 1)],
            parts=[ItemSpec("p1", 2)],
        ).id

    def test_price_change_does_not_reprice_existing_orders(self, repos):
        order_id = self._order_with_oil_change(repos)
        UpdateServiceHandler(repos.services).handle("s1", price="150.00")
        UpdatePartHandler(repos.parts).handle("p1", price="30.00")

        assert repos.services.get_by_id("s1").price == Money.of("150.00")
        assert repos.parts.get_by_id("p1").price == Money.of("30.00")
        dto = ShowOrderHandler(repos.orders, repos.items).handle(order_id)
        assert [i.unit_price for i in dto.items] == ["R$ 100.50", "R$ 25.90"]
        assert dto.total == "R$ 152.30"

    def test_new_items_use_the_new_price(self, repos):
        order_id = self._order_with_oil_change(repos)
        UpdateServiceHandler(repos.services).handle("s2", price="95.00")
        dto = AddServiceItemHandler(repos.orders, repos.services, repos.items).handle(
            order_id, "s2", 1
        )
        assert dto.items[-1].unit_price == "R$ 95.00"

    def test_rename(self, repos):
        part = UpdatePartHandler(repos.parts).handle("p1", name="  Oil Filter XL ")
        assert part.name == "Oil Filter XL"
        assert part.price == Money.of("25.90")

    def test_invalid_price_leaves_part_untouched(self, repos):
        with pytest.raises(ValidationError, match="greater than zero"):
            UpdatePartHandler(repos.parts).handle("p1", name="Renamed", price="0")
        part = repos.parts.get_by_id("p1")
        assert part.name == "Oil Filter"
        assert part.price == Money.of("25.90")

    def test_unknown_service(self, repos):
        with pytest.raises(EntityNotFoundError, match="Service 'nope' not found"):
            UpdateServiceHandler(repos.services).handle("nope", price="10")
