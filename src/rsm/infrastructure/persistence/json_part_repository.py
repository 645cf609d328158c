"""JSON-file-backed implementation of PartRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from rsm.domain.model.part import Part
from rsm.domain.model.value_objects import Money, StockLevel
from rsm.domain.repository.part_repository import PartRepository


class JsonPartRepository(PartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PartRepository interface ---------------------------------------------

    def get_by_id(self, part_id: str) -> Part | None:
        return self._load().get(part_id)

    def list_all(self) -> list[Part]:
        return list(self._load().values())

    def save(self, part: Part) -> None:
        parts = self._load()
        parts[part.id] = part
        self._persist(parts)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Part]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Part(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "BRL")),
                stock=StockLevel(item.get("stock", 0)),
                code=item.get("code"),
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in raw
        }

    def _persist(self, parts: dict[str, Part]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "code": p.code,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "stock": p.stock.value,
                "created_at": p.created_at.isoformat(),
                "updated_at": p.updated_at.isoformat(),
            }
            for p in parts.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
