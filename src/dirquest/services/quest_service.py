"""Quest event bus with rewards."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from dirquest.data.repositories import QuestsRepository
from dirquest.domain.events import GameEvent
from dirquest.domain.quests import Quest, create_quests, dispatch_event
from dirquest.domain.state import GameState

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class QuestUpdate:
    quest_id: str
    description: str
    reward_gold: int


@dataclass(slots=True)
class QuestStatusView:
    description: str
    completed: bool
    progress: int
    target: int


class QuestService:
    """Delivers events to the game's quests and pays out rewards."""

    def __init__(self, *, quests_repo: QuestsRepository) -> None:
        self._quests_repo = quests_repo

    def create_quests(self) -> List[Quest]:
        return create_quests(self._quests_repo.in_file_order())

    def dispatch(self, state: GameState, event: GameEvent) -> List[QuestUpdate]:
        updates: List[QuestUpdate] = []
        for quest in dispatch_event(state.quests, event):
            reward = quest.definition.reward_gold
            state.gold += reward
            logger.info("Quest completed: %s (+%d gold)", quest.description, reward)
            updates.append(QuestUpdate(quest_id=quest.quest_id, description=quest.description, reward_gold=reward))
        return updates

    def dispatch_all(self, state: GameState, events: List[GameEvent]) -> List[QuestUpdate]:
        updates: List[QuestUpdate] = []
        for event in events:
            updates.extend(self.dispatch(state, event))
        return updates

    def build_todo_list(self, state: GameState) -> List[QuestStatusView]:
        """Open quests first, then completed ones, each group in quest order."""
        views = [
            QuestStatusView(
                description=quest.description,
                completed=quest.completed,
                progress=min(quest.progress, quest.definition.quantity),
                target=quest.definition.quantity,
            )
            for quest in state.quests
        ]
        return [view for view in views if not view.completed] + [view for view in views if view.completed]
