"""Quest definition data structures."""
from __future__ import annotations

from dataclasses import dataclass

from dirquest.core.types import QuestKind


@dataclass(frozen=True, slots=True)
class QuestDef:
    quest_id: str
    kind: QuestKind
    description: str
    target: str | None = None
    quantity: int = 1
    reward_gold: int = 0
