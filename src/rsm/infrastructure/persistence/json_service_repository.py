"""JSON-file-backed implementation of ServiceRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from rsm.domain.model.service import Service
from rsm.domain.model.value_objects import Money
from rsm.domain.repository.service_repository import ServiceRepository


class JsonServiceRepository(ServiceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ServiceRepository interface ------------------------------------------

    def get_by_id(self, service_id: str) -> Service | None:
        return self._load().get(service_id)

    def list_all(self) -> list[Service]:
        return list(self._load().values())

    def save(self, service: Service) -> None:
        services = self._load()
        services[service.id] = service
        self._persist(services)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Service]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Service(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "BRL")),
                description=item.get("description"),
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in raw
        }

    def _persist(self, services: dict[str, Service]) -> None:
        raw = [
            {
                "id": s.id,
                "name": s.name,
                "description": s.description,
                "price": str(s.price.amount),
                "currency": s.price.currency,
                "created_at": s.created_at.isoformat(),
                "updated_at": s.updated_at.isoformat(),
            }
            for s in services.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
