"""Application service: Add Part use case."""

from __future__ import annotations

import structlog

from rsm.domain.model.part import Part
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.part_repository import PartRepository

log = structlog.get_logger(__name__)


class AddPartHandler:

    def __init__(self, part_repo: PartRepository) -> None:
        self._part_repo = part_repo

    def handle(
        self,
        name: str,
        price: str,
        stock: int = 0,
        code: str | None = None,
    ) -> Part:
        """Add a new part to the catalog with an opening stock."""
        part = Part.create(name=name, price=Money.of(price), stock=stock, code=code)
        self._part_repo.save(part)
        log.info("part_added", part_id=part.id, stock=part.stock.value)
        return part
