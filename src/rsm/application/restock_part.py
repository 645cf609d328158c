"""Application service: Restock Part use case."""

from __future__ import annotations

import structlog

from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.model.part import Part
from rsm.domain.repository.part_repository import PartRepository

log = structlog.get_logger(__name__)


class RestockPartHandler:

    def __init__(self, part_repo: PartRepository) -> None:
        self._part_repo = part_repo

    def handle(self, part_id: str, quantity: int) -> Part:
        part = self._part_repo.get_by_id(part_id)
        if part is None:
            raise EntityNotFoundError(f"Part '{part_id}' not found")

        part.restock(quantity)
        self._part_repo.save(part)

        log.info("part_restocked", part_id=part.id, quantity=quantity, stock=part.stock.value)
        return part
