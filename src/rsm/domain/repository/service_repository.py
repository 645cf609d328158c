"""Abstract repository for Service aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rsm.domain.model.service import Service


class ServiceRepository(ABC):

    @abstractmethod
    def get_by_id(self, service_id: str) -> Service | None:
        """Return a service by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Service]:
        """Return every service in the catalog."""

    @abstractmethod
    def save(self, service: Service) -> None:
        """Persist a new or updated service."""
