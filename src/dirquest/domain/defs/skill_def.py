"""Skill definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from dirquest.core.types import SkillEffect


@dataclass(frozen=True, slots=True)
class SkillDef:
    """A learnable skill paid for with magic points.

    ``power`` is a percentage: of strength for damage skills and of
    maximum health for healing skills. Cure skills ignore it.
    """

    id: str
    name: str
    description: str
    effect_type: SkillEffect
    mp_cost: int
    min_level: int
    power: int
