"""Line items: a service or a part attached to an order.

Each item captures the unit price at the moment it was added, so later
catalog price changes never reprice existing orders.

Two items compare equal when they reference the same service (or the
same part), regardless of order or quantity.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Iterable

from rsm.domain.exceptions import BusinessRuleError
from rsm.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True, eq=False)
class _LineItem:
    order_id: str
    quantity: Quantity
    unit_price: Money  # snapshot taken at creation time

    kind: ClassVar[str] = ""

    @property
    def reference_id(self) -> str:
        raise NotImplementedError

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value

    def update_quantity(self, quantity: int):
        """Return a copy with a new quantity; this instance is untouched."""
        return replace(self, quantity=Quantity(quantity))

    def belongs_to_order(self, order_id: str) -> bool:
        return self.order_id == order_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _LineItem):
            return NotImplemented
        return (self.kind, self.reference_id) == (other.kind, other.reference_id)

    def __hash__(self) -> int:
        return hash((self.kind, self.reference_id))


@dataclass(frozen=True, eq=False)
class ServiceLineItem(_LineItem):
    service_id: str = ""

    kind: ClassVar[str] = "service"

    @property
    def reference_id(self) -> str:
        return self.service_id

    @staticmethod
    def create(
        order_id: str,
        service_id: str,
        quantity: int,
        unit_price: Money,
    ) -> ServiceLineItem:
        return ServiceLineItem(
            order_id=order_id,
            service_id=service_id,
            quantity=Quantity(quantity),
            unit_price=unit_price,
        )

    @staticmethod
    def reconstruct(
        order_id: str | None,
        service_id: str | None,
        quantity: int | None,
        unit_price: Money | None,
    ) -> ServiceLineItem:
        _require(service_id, "Service id")
        _require(order_id, "Order id")
        _require(quantity, "Quantity")
        _require(unit_price, "Unit price")
        return ServiceLineItem.create(order_id, service_id, quantity, unit_price)  # type: ignore[arg-type]


@dataclass(frozen=True, eq=False)
class PartLineItem(_LineItem):
    part_id: str = ""

    kind: ClassVar[str] = "part"

    @property
    def reference_id(self) -> str:
        return self.part_id

    @staticmethod
    def create(
        order_id: str,
        part_id: str,
        quantity: int,
        unit_price: Money,
    ) -> PartLineItem:
        return PartLineItem(
            order_id=order_id,
            part_id=part_id,
            quantity=Quantity(quantity),
            unit_price=unit_price,
        )

    @staticmethod
    def reconstruct(
        order_id: str | None,
        part_id: str | None,
        quantity: int | None,
        unit_price: Money | None,
    ) -> PartLineItem:
        _require(part_id, "Part id")
        _require(order_id, "Order id")
        _require(quantity, "Quantity")
        _require(unit_price, "Unit price")
        return PartLineItem.create(order_id, part_id, quantity, unit_price)  # type: ignore[arg-type]


LineItem = ServiceLineItem | PartLineItem


def total_of(items: Iterable[LineItem]) -> Money:
    """Sum the subtotals of *items*."""
    result = Money.zero()
    for item in items:
        result = result + item.subtotal
    return result


def _require(value: object, label: str) -> None:
    if value is None or value == "":
        raise BusinessRuleError(f"{label} is required")
