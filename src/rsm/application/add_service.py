"""Application service: Add Service use case."""

from __future__ import annotations

import structlog

from rsm.domain.model.service import Service
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.service_repository import ServiceRepository

log = structlog.get_logger(__name__)


class AddServiceHandler:

    def __init__(self, service_repo: ServiceRepository) -> None:
        self._service_repo = service_repo

    def handle(self, name: str, price: str, description: str | None = None) -> Service:
        """Add a new service to the catalog."""
        service = Service.create(name=name, price=Money.of(price), description=description)
        self._service_repo.save(service)
        log.info("service_added", service_id=service.id, price=str(service.price.amount))
        return service
