"""Abstract repository for the line items attached to orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rsm.domain.model.line_item import LineItem


class LineItemRepository(ABC):

    @abstractmethod
    def add(self, item: LineItem) -> None:
        """Attach an item to its order."""

    @abstractmethod
    def list_for_order(self, order_id: str) -> list[LineItem]:
        """Return the items of an order, in the order they were added."""

    @abstractmethod
    def delete_for_order(self, order_id: str) -> None:
        """Remove every item of an order."""
