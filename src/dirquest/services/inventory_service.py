"""Inventory, consumables and ring equipment."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from dirquest.data.repositories import ItemsRepository
from dirquest.domain.defs import ItemDef
from dirquest.domain.events import ItemAdded
from dirquest.domain.state import GameState
from dirquest.domain.status_effects import cure_status
from dirquest.services.errors import InvalidActionError
from dirquest.services.quest_service import QuestService, QuestUpdate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ItemUseResult:
    item_id: str
    hp_delta: int = 0
    mp_delta: int = 0
    cured: bool = False
    equipped_ring: str | None = None
    evicted_ring: str | None = None


@dataclass(slots=True)
class InventoryEntryView:
    item_id: str
    name: str
    quantity: int


@dataclass(slots=True)
class ItemAddedResult:
    item_id: str
    quantity: int
    quest_updates: List[QuestUpdate] = field(default_factory=list)


class InventoryService:
    """Adds, consumes and equips items on the game state."""

    def __init__(self, *, items_repo: ItemsRepository, quest_service: QuestService) -> None:
        self._items_repo = items_repo
        self._quest_service = quest_service

    def add_item(self, state: GameState, item_id: str, quantity: int = 1) -> ItemAddedResult:
        item = self._get_item(item_id)
        if quantity < 1:
            raise ValueError("Quantity must be positive.")
        state.inventory[item.id] = state.inventory.get(item.id, 0) + quantity
        result = ItemAddedResult(item_id=item.id, quantity=quantity)
        result.quest_updates = self._quest_service.dispatch(state, ItemAdded(item_id=item.id))
        return result

    def use_item(self, state: GameState, item_id: str) -> ItemUseResult:
        """Consume one item. Ring items are equipped instead."""
        item = self._get_item(item_id)
        if state.inventory.get(item.id, 0) <= 0:
            raise InvalidActionError(f"You have no {item.name}.")
        if item.effect_type == "passive":
            raise InvalidActionError(f"The {item.name} cannot be used.")

        player = state.player
        result = ItemUseResult(item_id=item.id)
        if item.effect_type == "heal":
            result.hp_delta = player.heal(player.max_hp * item.power // 100)
        elif item.effect_type == "restore_mp":
            result.mp_delta = player.restore_mp(player.max_mp * item.power // 100)
        elif item.effect_type == "cure":
            result.cured = cure_status(player)
        elif item.effect_type == "ring":
            assert item.ring is not None
            evicted = player.equip_ring(item.ring)
            result.equipped_ring = item.ring
            result.evicted_ring = evicted
            if evicted is not None:
                self._store(state, self._items_repo.ring_item_id(evicted))
        self._take(state, item.id)
        logger.debug("Used %s", item.id)
        return result

    def unequip_ring(self, state: GameState, ring: str) -> None:
        if not state.player.unequip_ring(ring):  # type: ignore[arg-type]
            raise InvalidActionError(f"You are not wearing a {ring} ring.")
        self._store(state, self._items_repo.ring_item_id(ring))

    def build_inventory_view(self, state: GameState) -> List[InventoryEntryView]:
        return [
            InventoryEntryView(item_id=item_id, name=self._items_repo.get(item_id).name, quantity=quantity)
            for item_id, quantity in sorted(state.inventory.items())
            if quantity > 0
        ]

    def _get_item(self, item_id: str) -> ItemDef:
        try:
            return self._items_repo.get(item_id)
        except KeyError as exc:
            raise InvalidActionError(f"Unknown item '{item_id}'.") from exc

    @staticmethod
    def _store(state: GameState, item_id: str) -> None:
        # Returning a worn ring is not a new find, so no ItemAdded event.
        state.inventory[item_id] = state.inventory.get(item_id, 0) + 1

    @staticmethod
    def _take(state: GameState, item_id: str) -> None:
        remaining = state.inventory[item_id] - 1
        if remaining > 0:
            state.inventory[item_id] = remaining
        else:
            del state.inventory[item_id]
