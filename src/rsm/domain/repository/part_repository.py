"""Abstract repository for Part aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rsm.domain.model.part import Part


class PartRepository(ABC):

    @abstractmethod
    def get_by_id(self, part_id: str) -> Part | None:
        """Return a part by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Part]:
        """Return every part in the catalog."""

    @abstractmethod
    def save(self, part: Part) -> None:
        """Persist a new or updated part (stock included)."""
