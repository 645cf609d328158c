"""Application service: Update Service use case."""

from __future__ import annotations

import structlog

from rsm.domain.exceptions import EntityNotFoundError
from rsm.domain.model.catalog import validate_name, validate_price
from rsm.domain.model.service import Service
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.service_repository import ServiceRepository

log = structlog.get_logger(__name__)


class UpdateServiceHandler:

    def __init__(self, service_repo: ServiceRepository) -> None:
        self._service_repo = service_repo

    def handle(
        self,
        service_id: str,
        name: str | None = None,
        price: str | None = None,
    ) -> Service:
        service = self._service_repo.get_by_id(service_id)
        if service is None:
            raise EntityNotFoundError(f"Service '{service_id}' not found")

        new_name = validate_name(name) if name is not None else None
        new_price = validate_price(Money.of(price)) if price is not None else None

        if new_name is not None:
            service.rename(new_name)
        if new_price is not None:
            service.update_price(new_price)
        self._service_repo.save(service)

        log.info(
            "service_updated",
            service_id=service.id,
            name=service.name,
            price=str(service.price.amount),
        )
        return service
