"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from dirquest.core.types import ItemEffect, RingKind


@dataclass(frozen=True, slots=True)
class ItemDef:
    """Consumable, passive or wearable item definition."""

    id: str
    name: str
    description: str
    effect_type: ItemEffect
    power: int = 0
    ring: RingKind | None = None
