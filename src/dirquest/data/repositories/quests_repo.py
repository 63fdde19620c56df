"""Quests repository."""
from __future__ import annotations

from typing import Dict

from dirquest.data.errors import DataValidationError
from dirquest.data.repositories.base import RepositoryBase
from dirquest.domain.defs import QuestDef

VALID_KINDS = {"win_battles", "defeat_enemy", "find_item", "visit_tombstone", "reach_level"}
TARGETED_KINDS = {"defeat_enemy", "find_item"}


class QuestsRepository(RepositoryBase[QuestDef]):
    """Loads the quest list every new game starts with."""

    def __init__(self, base_path=None) -> None:
        super().__init__("quests.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, QuestDef]:
        quests: Dict[str, QuestDef] = {}
        descriptions: set[str] = set()
        for raw_id, payload in raw.items():
            context = f"quest '{raw_id}'"
            quest_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                quest_data,
                {"kind", "description"},
                context,
                optional_fields={"target", "quantity", "reward_gold"},
            )
            kind = self._require_literal(quest_data["kind"], VALID_KINDS, f"{context} kind")
            target = quest_data.get("target")
            if kind in TARGETED_KINDS:
                target = self._require_str(target, f"{context} target")
            elif target is not None:
                raise DataValidationError(f"{context} of kind '{kind}' does not take a target.")
            description = self._require_str(quest_data["description"], f"{context} description")
            if description in descriptions:
                raise DataValidationError(f"{context} reuses description '{description}'.")
            descriptions.add(description)
            quests[raw_id] = QuestDef(
                quest_id=raw_id,
                kind=kind,  # type: ignore[arg-type]
                description=description,
                target=target,
                quantity=self._require_int(quest_data.get("quantity", 1), f"{context} quantity", minimum=1),
                reward_gold=self._require_int(quest_data.get("reward_gold", 0), f"{context} reward_gold", minimum=0),
            )
        return quests
