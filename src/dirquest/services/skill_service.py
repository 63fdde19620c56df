"""Skill learning and listing."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from dirquest.data.repositories import SkillsRepository
from dirquest.domain.defs import SkillDef
from dirquest.domain.state import GameState
from dirquest.services.errors import SkillAlreadyLearnedError, SkillRequirementError, UnknownSkillError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SkillView:
    skill_id: str
    name: str
    description: str
    mp_cost: int
    min_level: int
    learned: bool
    learnable: bool


class SkillService:
    def __init__(self, *, skills_repo: SkillsRepository) -> None:
        self._skills_repo = skills_repo

    def learn_skill(self, state: GameState, skill_id: str) -> SkillDef:
        try:
            skill = self._skills_repo.get(skill_id)
        except KeyError as exc:
            raise UnknownSkillError(f"Unknown skill '{skill_id}'.") from exc
        player = state.player
        if player.knows(skill.id):
            raise SkillAlreadyLearnedError(f"{skill.name} is already learned.")
        if player.level < skill.min_level:
            raise SkillRequirementError(f"{skill.name} requires level {skill.min_level}.")
        player.skills.add(skill.id)
        logger.debug("Learned skill %s", skill.id)
        return skill

    def list_skills(self, state: GameState) -> List[SkillView]:
        player = state.player
        return [
            SkillView(
                skill_id=skill.id,
                name=skill.name,
                description=skill.description,
                mp_cost=skill.mp_cost,
                min_level=skill.min_level,
                learned=player.knows(skill.id),
                learnable=not player.knows(skill.id) and player.level >= skill.min_level,
            )
            for skill in self._skills_repo.all()
        ]
