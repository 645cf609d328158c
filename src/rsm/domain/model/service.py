"""Service aggregate: a labour item in the shop's catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from rsm.domain.model.catalog import validate_name, validate_price
from rsm.domain.model.value_objects import Money, new_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Service:
    """A service offered by the shop (oil change, alignment...)."""

    id: str
    name: str
    price: Money
    description: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(name: str, price: Money, description: str | None = None) -> Service:
        now = _now()
        return Service(
            id=new_id(),
            name=validate_name(name),
            price=validate_price(price),
            description=description,
            created_at=now,
            updated_at=now,
        )

    def rename(self, name: str) -> None:
        self.name = validate_name(name)
        self.updated_at = _now()

    def update_price(self, new_price: Money) -> None:
        self.price = validate_price(new_price)
        self.updated_at = _now()
