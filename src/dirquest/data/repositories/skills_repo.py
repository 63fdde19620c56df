"""Skills repository."""
from __future__ import annotations

from typing import Dict

from dirquest.data.repositories.base import RepositoryBase
from dirquest.domain.defs import SkillDef

VALID_EFFECT_TYPES = {"damage", "heal", "cure"}


class SkillsRepository(RepositoryBase[SkillDef]):
    """Loads learnable skills."""

    def __init__(self, base_path=None) -> None:
        super().__init__("skills.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, SkillDef]:
        skills: Dict[str, SkillDef] = {}
        for raw_id, payload in raw.items():
            context = f"skill '{raw_id}'"
            skill_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                skill_data,
                {"name", "description", "effect_type", "mp_cost", "min_level", "power"},
                context,
            )
            skills[raw_id] = SkillDef(
                id=raw_id,
                name=self._require_str(skill_data["name"], f"{context} name"),
                description=self._require_str(skill_data["description"], f"{context} description"),
                effect_type=self._require_literal(  # type: ignore[arg-type]
                    skill_data["effect_type"], VALID_EFFECT_TYPES, f"{context} effect_type"
                ),
                mp_cost=self._require_int(skill_data["mp_cost"], f"{context} mp_cost", minimum=0),
                min_level=self._require_int(skill_data["min_level"], f"{context} min_level", minimum=1),
                power=self._require_int(skill_data["power"], f"{context} power", minimum=0),
            )
        return skills
