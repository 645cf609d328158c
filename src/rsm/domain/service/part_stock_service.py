"""Domain service: Part Stock.

Attaching parts to an order touches two kinds of aggregates (the order
and every part it consumes). This service owns the part side of that
operation.

The two-phase approach (validate-then-mutate) ensures a request for
several parts never leaves some of them depleted when another one is
short.
"""

from __future__ import annotations

from typing import Iterable

from rsm.domain.exceptions import BusinessRuleError, EntityNotFoundError
from rsm.domain.model.line_item import PartLineItem
from rsm.domain.model.part import Part
from rsm.domain.model.value_objects import Quantity
from rsm.domain.repository.part_repository import PartRepository


class PartStockService:

    def __init__(self, part_repo: PartRepository) -> None:
        self._part_repo = part_repo

    def load_available(self, requests: Iterable[tuple[str, int]]) -> dict[str, Part]:
        """Phase 1: load every requested part and check its stock.

        Quantities requested for the same part are summed before the
        check. Raises before anything is mutated.
        """
        needed: dict[str, int] = {}
        for part_id, qty in requests:
            needed[part_id] = needed.get(part_id, 0) + Quantity(qty).value

        parts: dict[str, Part] = {}
        for part_id, qty in needed.items():
            part = self._part_repo.get_by_id(part_id)
            if part is None:
                raise EntityNotFoundError(f"Part '{part_id}' not found")
            if not part.has_enough_stock(qty):
                raise BusinessRuleError(
                    f"Insufficient stock for {part.name} "
                    f"(need {qty}, have {part.stock.value})"
                )
            parts[part_id] = part
        return parts

    def consume(self, requests: Iterable[tuple[str, int]]) -> None:
        """Deplete stock for every ``(part_id, quantity)`` pair."""
        requests = list(requests)
        # Phase 1: load all parts and validate
        parts = self.load_available(requests)

        # Phase 2: mutate and persist
        for part_id, qty in requests:
            parts[part_id].deplete(qty)
        for part in parts.values():
            self._part_repo.save(part)

    def give_back(self, items: Iterable[PartLineItem]) -> None:
        """Return the stock consumed by *items* to the shelf."""
        returned: dict[str, int] = {}
        for item in items:
            returned[item.part_id] = returned.get(item.part_id, 0) + item.quantity.value

        parts: list[tuple[Part, int]] = []
        for part_id, qty in returned.items():
            part = self._part_repo.get_by_id(part_id)
            if part is None:
                raise EntityNotFoundError(f"Part '{part_id}' not found")
            parts.append((part, qty))

        for part, qty in parts:
            part.restock(qty)
            self._part_repo.save(part)
