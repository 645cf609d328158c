"""Validation rules shared by catalog entries (services and parts)."""

from __future__ import annotations

from rsm.domain.exceptions import ValidationError
from rsm.domain.model.value_objects import Money

MIN_NAME_LENGTH = 2


def validate_name(name: str) -> str:
    cleaned = (name or "").strip()
    if len(cleaned) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Name must have at least {MIN_NAME_LENGTH} characters"
        )
    return cleaned


def validate_price(price: Money) -> Money:
    if price.is_zero:
        raise ValidationError("Price must be greater than zero")
    return price
