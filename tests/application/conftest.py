"""Shared fixtures for the use-case tests: a small catalog in fake repos."""

from dataclasses import dataclass

import pytest

from rsm.domain.model.part import Part
from rsm.domain.model.service import Service
from rsm.domain.model.value_objects import Money, StockLevel
from tests.fakes import (
    FakeLineItemRepository,
    FakeOrderRepository,
    FakePartRepository,
    FakeServiceRepository,
)


@dataclass
class Repos:
    orders: FakeOrderRepository
    services: FakeServiceRepository
    parts: FakePartRepository
    items: FakeLineItemRepository


@pytest.fixture
def repos() -> Repos:
    return Repos(
        orders=FakeOrderRepository(),
        services=FakeServiceRepository([
            Service(id="s1", name="Oil Change", price=Money.of("100.50")),
            Service(id="s2", name="Alignment", price=Money.of("80.00")),
        ]),
        parts=FakePartRepository([
            Part(id="p1", name="Oil Filter", price=Money.of("25.90"), stock=StockLevel(10)),
            Part(id="p2", name="Brake Pad", price=Money.of("89.50"), stock=StockLevel(2)),
        ]),
        items=FakeLineItemRepository(),
    )
