"""Quest progress and event dispatch."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from dirquest.domain.defs import QuestDef
from dirquest.domain.events import BattleWon, GameEvent, ItemAdded, LevelUp, TombstoneFound


@dataclass(slots=True)
class Quest:
    """A quest instance. Once completed it stays completed."""

    definition: QuestDef
    progress: int = 0
    completed: bool = False

    @property
    def quest_id(self) -> str:
        return self.definition.quest_id

    @property
    def description(self) -> str:
        return self.definition.description

    def handle(self, event: GameEvent) -> bool:
        """Consume ``event`` and return whether the quest is now complete."""
        if self.completed:
            return True
        definition = self.definition
        kind = definition.kind
        if kind == "win_battles":
            if isinstance(event, BattleWon):
                self.progress += 1
        elif kind == "defeat_enemy":
            if isinstance(event, BattleWon) and event.enemy_name == definition.target:
                self.progress += 1
        elif kind == "find_item":
            if isinstance(event, ItemAdded) and event.item_id == definition.target:
                self.progress += 1
        elif kind == "visit_tombstone":
            if isinstance(event, TombstoneFound):
                self.progress += 1
        elif kind == "reach_level":
            if isinstance(event, LevelUp):
                self.progress = max(self.progress, event.level)
        else:
            raise ValueError(f"Unsupported quest kind '{kind}'.")
        self.completed = self.progress >= definition.quantity
        return self.completed


def create_quests(definitions: Iterable[QuestDef]) -> List[Quest]:
    return [Quest(definition=definition) for definition in definitions]


def dispatch_event(quests: Iterable[Quest], event: GameEvent) -> List[Quest]:
    """Deliver ``event`` to every open quest in order.

    Returns the quests this event completed. Quests that were already
    complete are skipped.
    """
    newly_completed: List[Quest] = []
    for quest in quests:
        if quest.completed:
            continue
        if quest.handle(event):
            newly_completed.append(quest)
    return newly_completed


def is_quest_active(quests: Iterable[Quest], description: str) -> bool:
    return any(quest.description == description and not quest.completed for quest in quests)
