"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from dirquest.core.randomizer import Randomizer
from dirquest.core.types import NpcKind
from dirquest.domain.encounter import Encounter, InCombat, InNpcEncounter
from dirquest.domain.entities import Character
from dirquest.domain.location import Location
from dirquest.domain.quests import Quest
from dirquest.domain.tombstone import TombstoneLedger


@dataclass
class GameState:
    """Everything one game owns; mutated by one player action at a time."""

    seed: int
    randomizer: Randomizer
    player: Character
    home: Location
    location: Location
    gold: int = 0
    inventory: Dict[str, int] = field(default_factory=dict)
    quests: List[Quest] = field(default_factory=list)
    tombstones: TombstoneLedger = field(default_factory=TombstoneLedger)
    encounter: Encounter | None = None

    @property
    def enemy(self) -> Character | None:
        if isinstance(self.encounter, InCombat):
            return self.encounter.enemy
        return None

    @property
    def npc(self) -> NpcKind | None:
        if isinstance(self.encounter, InNpcEncounter):
            return self.encounter.kind
        return None

    def enter_encounter(self, encounter: Encounter) -> None:
        if self.encounter is not None:
            raise ValueError("An encounter is already in progress.")
        self.encounter = encounter

    def clear_encounter(self) -> None:
        self.encounter = None

    def quest(self, description: str) -> Quest:
        for quest in self.quests:
            if quest.description == description:
                return quest
        raise KeyError(description)
