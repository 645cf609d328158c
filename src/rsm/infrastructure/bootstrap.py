"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from rsm.infrastructure.persistence.json_line_item_repository import (
    JsonLineItemRepository,
)
from rsm.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from rsm.infrastructure.persistence.json_part_repository import (
    JsonPartRepository,
)
from rsm.infrastructure.persistence.json_service_repository import (
    JsonServiceRepository,
)
from rsm.infrastructure.settings import get_settings


def _data_dir() -> Path:
    return get_settings().data_dir


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(_data_dir() / "orders.json")


def line_item_repository() -> JsonLineItemRepository:
    return JsonLineItemRepository(_data_dir() / "line_items.json")


def part_repository() -> JsonPartRepository:
    return JsonPartRepository(_data_dir() / "parts.json")


def service_repository() -> JsonServiceRepository:
    return JsonServiceRepository(_data_dir() / "services.json")
