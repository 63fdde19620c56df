"""Items repository."""
from __future__ import annotations

from typing import Dict

from dirquest.data.errors import DataValidationError
from dirquest.data.repositories.base import RepositoryBase
from dirquest.domain.defs import ItemDef

VALID_EFFECT_TYPES = {"heal", "restore_mp", "cure", "passive", "ring"}
VALID_RINGS = {"void", "attack", "speed", "evade", "ruling"}


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads consumables, quest items and rings."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            context = f"item '{raw_id}'"
            item_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                item_data,
                {"name", "description", "effect_type"},
                context,
                optional_fields={"power", "ring"},
            )
            effect_type = self._require_literal(item_data["effect_type"], VALID_EFFECT_TYPES, f"{context} effect_type")
            ring = item_data.get("ring")
            if effect_type == "ring":
                ring = self._require_literal(ring, VALID_RINGS, f"{context} ring")
            elif ring is not None:
                raise DataValidationError(f"{context} declares a ring but is not a ring item.")
            items[raw_id] = ItemDef(
                id=raw_id,
                name=self._require_str(item_data["name"], f"{context} name"),
                description=self._require_str(item_data["description"], f"{context} description"),
                effect_type=effect_type,  # type: ignore[arg-type]
                power=self._require_int(item_data.get("power", 0), f"{context} power", minimum=0),
                ring=ring,  # type: ignore[arg-type]
            )
        return items

    def ring_item_id(self, ring: str) -> str:
        """Return the id of the item that carries the given ring kind."""
        for item in self.in_file_order():
            if item.ring == ring:
                return item.id
        raise KeyError(ring)
