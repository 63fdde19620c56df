"""Character class definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from dirquest.core.types import Category, StatusEffect


@dataclass(frozen=True, slots=True)
class StatDef:
    """A stat as a base value plus a non-negative per-level growth."""

    base: int
    growth: int

    def at(self, level: int) -> int:
        return self.base + self.growth * (max(1, level) - 1)


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Archetype shared by player characters and enemies."""

    id: str
    name: str
    category: Category
    hp: StatDef
    strength: StatDef
    speed: StatDef
    mp: StatDef = StatDef(0, 0)
    inflicts: StatusEffect | None = None

    @property
    def family(self) -> str:
        """Name prefix shared by variants of the same enemy."""
        return self.name.split(" ", 1)[0]
