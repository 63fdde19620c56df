"""Death pipeline and tombstone recovery."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, NoReturn

from dirquest.domain.entities import Character
from dirquest.domain.events import TombstoneFound
from dirquest.domain.state import GameState
from dirquest.domain.tombstone import Tombstone
from dirquest.services.errors import CharacterDeadError
from dirquest.services.quest_service import QuestService, QuestUpdate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TombstonePickup:
    gold: int = 0
    tombstones: List[Tombstone] = field(default_factory=list)
    quest_updates: List[QuestUpdate] = field(default_factory=list)


class DeathService:
    """Turns a dead character into a tombstone and a fresh start."""

    def __init__(self, *, quest_service: QuestService) -> None:
        self._quest_service = quest_service

    def settle_death(self, state: GameState) -> Tombstone:
        """Bury the carried gold where the player fell and reset the player.

        The new character keeps the class but starts over at level 1 with
        no rings, skills or status. Gold and inventory are lost, the
        encounter slot is cleared and the player wakes up at home.
        """
        tombstone = state.tombstones.bury(state.location.path, state.gold)
        logger.info("%s died at %s leaving %d gold", state.player.name, state.location.path, tombstone.gold)
        state.player = Character(class_def=state.player.class_def, level=1)
        state.gold = 0
        state.inventory.clear()
        state.clear_encounter()
        state.location = state.home
        return tombstone

    def kill(self, state: GameState) -> NoReturn:
        tombstone = self.settle_death(state)
        raise CharacterDeadError(tombstone)

    def check(self, state: GameState) -> None:
        """Run the death pipeline if the player has no health left."""
        if state.player.is_dead:
            self.kill(state)

    def collect_tombstones(self, state: GameState) -> TombstonePickup:
        pickup = TombstonePickup()
        for tombstone in state.tombstones.collect(state.location.path):
            state.gold += tombstone.gold
            pickup.gold += tombstone.gold
            pickup.tombstones.append(tombstone)
            pickup.quest_updates.extend(self._quest_service.dispatch(state, TombstoneFound(gold=tombstone.gold)))
        if pickup.tombstones:
            logger.info("Recovered %d gold from %d tombstone(s)", pickup.gold, len(pickup.tombstones))
        return pickup
