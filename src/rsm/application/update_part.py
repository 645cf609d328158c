"""Application service: Update Part use case."""

from __future__ import annotations

import structlog

from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.model.catalog import validate_name, validate_price
from rsm.domain.model.part import Part
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.part_repository import PartRepository

log = structlog.get_logger(__name__)


class UpdatePartHandler:

    def __init__(self, part_repo: PartRepository) -> None:
        self._part_repo = part_repo

    def handle(
        self,
        part_id: str,
        name: str | None = None,
        price: str | None = None,
    ) -> Part:
        """Rename a part and/or change its catalog price.

        Orders that already carry the part keep the price they captured.
        """
        part = self._part_repo.get_by_id(part_id)
        if part is None:
            raise EntityNotFoundError(f"Part '{part_id}' not found")

        # Validate both before touching the part
        new_name = validate_name(name) if name is not None else None
        new_price = validate_price(Money.of(price)) if price is not None else None

        if new_name is not None:
            part.rename(new_name)
        if new_price is not None:
            part.update_price(new_price)
        self._part_repo.save(part)

        log.info("part_updated", part_id=part.id, name=part.name, price=str(part.price.amount))
        return part
