"""Part aggregate: a catalog item with stock on the shelf.

Stock goes down when a part is attached to an order and back up when
the shop restocks (or an order consuming it is canceled or removed).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from rsm.domain.exceptions import BusinessRuleError
from rsm.domain.model.catalog import validate_name, validate_price
from rsm.domain.model.value_objects import Money, Quantity, StockLevel, new_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Part:
    """Aggregate root for parts.

    Invariant: ``stock`` never drops below zero.
    """

    id: str
    name: str
    price: Money
    stock: StockLevel = field(default_factory=StockLevel)
    code: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock: int = 0,
        code: str | None = None,
    ) -> Part:
        now = _now()
        return Part(
            id=new_id(),
            name=validate_name(name),
            price=validate_price(price),
            stock=StockLevel(stock),
            code=code.strip() if code and code.strip() else None,
            created_at=now,
            updated_at=now,
        )

    # --- Stock ----------------------------------------------------------------

    @property
    def has_stock(self) -> bool:
        return self.stock.value > 0

    def has_enough_stock(self, quantity: int) -> bool:
        return self.stock.covers(quantity)

    def restock(self, quantity: int) -> None:
        self.stock = self.stock + quantity
        self.updated_at = _now()

    def deplete(self, quantity: int) -> None:
        """Take *quantity* units off the shelf for an order."""
        units = Quantity(quantity).value
        if not self.stock.covers(units):
            raise BusinessRuleError(
                f"Insufficient stock for {self.name} "
                f"(need {units}, have {self.stock.value})"
            )
        self.stock = self.stock - units
        self.updated_at = _now()

    # --- Catalog data ---------------------------------------------------------

    def rename(self, name: str) -> None:
        self.name = validate_name(name)
        self.updated_at = _now()

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Line items already on orders keep the price they captured.
        """
        self.price = validate_price(new_price)
        self.updated_at = _now()
