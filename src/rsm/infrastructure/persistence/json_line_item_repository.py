"""JSON-file-backed implementation of LineItemRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from rsm.domain.exceptions import BusinessRuleError
from rsm.domain.model.line_item import LineItem, PartLineItem, ServiceLineItem
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.line_item_repository import LineItemRepository


class JsonLineItemRepository(LineItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- LineItemRepository interface -----------------------------------------

    def add(self, item: LineItem) -> None:
        records = self._load_raw()
        records.append(self._to_raw(item))
        self._persist_raw(records)

    def list_for_order(self, order_id: str) -> list[LineItem]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["order_id"] == order_id
        ]

    def delete_for_order(self, order_id: str) -> None:
        records = [raw for raw in self._load_raw() if raw["order_id"] != order_id]
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: LineItem) -> dict:
        return {
            "kind": item.kind,
            "order_id": item.order_id,
            "item_id": item.reference_id,
            "quantity": item.quantity.value,
            "unit_price": str(item.unit_price.amount),
            "currency": item.unit_price.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> LineItem:
        price = raw.get("unit_price")
        unit_price = (
            Money(Decimal(price), raw.get("currency", "BRL")) if price is not None else None
        )
        if raw.get("kind") == ServiceLineItem.kind:
            return ServiceLineItem.reconstruct(
                order_id=raw.get("order_id"),
                service_id=raw.get("item_id"),
                quantity=raw.get("quantity"),
                unit_price=unit_price,
            )
        if raw.get("kind") == PartLineItem.kind:
            return PartLineItem.reconstruct(
                order_id=raw.get("order_id"),
                part_id=raw.get("item_id"),
                quantity=raw.get("quantity"),
                unit_price=unit_price,
            )
        raise BusinessRuleError(f"Unknown line item kind: {raw.get('kind')!r}")

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
