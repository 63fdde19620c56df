"""Verbs for the friendly encounters: gambler, witch and ghostly maiden."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from dirquest.core.types import NpcKind
from dirquest.domain.state import GameState
from dirquest.services.errors import InsufficientGoldError, InvalidActionError
from dirquest.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

LORE = (
    "She whispers of a hidden treasure in a nearby cave.",
    "She speaks of a great evil that slumbers deep within the earth.",
    "She warns of a powerful dragon that guards the mountain pass.",
)
BREW_ITEM_ID = "potion"


@dataclass(slots=True)
class BetResult:
    amount: int
    won: bool


class NpcService:
    """Each verb resolves its encounter in one shot and clears the slot."""

    def __init__(self, *, inventory_service: InventoryService) -> None:
        self._inventory_service = inventory_service

    def bet(self, state: GameState, amount: int) -> BetResult:
        self._require_npc(state, "gambler", "There is no one to bet with here.")
        if amount <= 0:
            raise InvalidActionError("You must bet a positive amount.")
        if amount > state.gold:
            raise InsufficientGoldError("You don't have that much gold to bet.")
        won = state.randomizer.range(2) == 0
        state.gold += amount if won else -amount
        state.clear_encounter()
        logger.debug("Bet %d gold and %s", amount, "won" if won else "lost")
        return BetResult(amount=amount, won=won)

    def brew(self, state: GameState) -> str:
        """The witch brews a potion; returns the id of the item received."""
        self._require_npc(state, "witch", "There is no witch here to brew a potion.")
        state.clear_encounter()
        self._inventory_service.add_item(state, BREW_ITEM_ID)
        return BREW_ITEM_ID

    def listen(self, state: GameState) -> str:
        self._require_npc(state, "ghostly_maiden", "There is no one to listen to here.")
        lore = LORE[state.randomizer.range(len(LORE))]
        state.clear_encounter()
        return lore

    @staticmethod
    def _require_npc(state: GameState, kind: NpcKind, message: str) -> None:
        if state.npc != kind:
            raise InvalidActionError(message)
