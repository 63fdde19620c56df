"""Character runtime model shared by the player and spawned enemies."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

from dirquest.core.types import RingKind, StatusEffect
from dirquest.domain.defs import ClassDef

from .equipment import RingSlots

XP_BASE = 30
XP_EXPONENT = 1.5


@dataclass(slots=True)
class Character:
    """A class snapshot plus level, vitals, rings, status and skills.

    Health and magic points left as ``None`` start full. Health never
    exceeds the maximum for the current level.
    """

    class_def: ClassDef
    level: int = 1
    xp: int = 0
    current_hp: int | None = None
    current_mp: int | None = None
    rings: RingSlots = field(default_factory=RingSlots)
    status_effect: StatusEffect | None = None
    skills: Set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError("Character level must be at least 1.")
        if self.xp < 0:
            raise ValueError("Character experience cannot be negative.")
        self.current_hp = self.max_hp if self.current_hp is None else max(0, min(self.current_hp, self.max_hp))
        self.current_mp = self.max_mp if self.current_mp is None else max(0, min(self.current_mp, self.max_mp))

    @property
    def name(self) -> str:
        return self.class_def.name

    @property
    def hp(self) -> int:
        assert self.current_hp is not None
        return self.current_hp

    @property
    def mp(self) -> int:
        assert self.current_mp is not None
        return self.current_mp

    @property
    def max_hp(self) -> int:
        return self.class_def.hp.at(self.level)

    @property
    def max_mp(self) -> int:
        return self.class_def.mp.at(self.level)

    @property
    def strength(self) -> int:
        value = self.class_def.strength.at(self.level)
        if self.rings.is_wearing("attack"):
            value = value * 3 // 2
        return value

    @property
    def speed(self) -> int:
        value = self.class_def.speed.at(self.level)
        if self.rings.is_wearing("speed"):
            value = value * 3 // 2
        return value

    @property
    def is_dead(self) -> bool:
        return self.hp <= 0

    @property
    def is_evading(self) -> bool:
        return self.rings.is_evading

    def xp_for_next(self) -> int:
        return int(XP_BASE * self.level**XP_EXPONENT)

    def add_experience(self, amount: int) -> int:
        """Accumulate experience and return how many levels were gained."""
        self.xp += max(0, amount)
        gained = 0
        while self.xp >= self.xp_for_next():
            self.xp -= self.xp_for_next()
            self._level_up()
            gained += 1
        return gained

    def _level_up(self) -> None:
        old_max_hp, old_max_mp = self.max_hp, self.max_mp
        self.level += 1
        self.current_hp = min(self.max_hp, self.hp + self.max_hp - old_max_hp)
        self.current_mp = min(self.max_mp, self.mp + self.max_mp - old_max_mp)

    def receive_damage(self, amount: int) -> int:
        before = self.hp
        self.current_hp = max(0, before - max(0, amount))
        return before - self.current_hp

    def heal(self, amount: int) -> int:
        before = self.hp
        self.current_hp = min(self.max_hp, before + max(0, amount))
        return self.current_hp - before

    def restore_mp(self, amount: int) -> int:
        before = self.mp
        self.current_mp = min(self.max_mp, before + max(0, amount))
        return self.current_mp - before

    def spend_mp(self, amount: int) -> bool:
        if amount > self.mp:
            return False
        self.current_mp = self.mp - amount
        return True

    def restore(self) -> None:
        """Refill health and magic points and drop any status effect."""
        self.current_hp = self.max_hp
        self.current_mp = self.max_mp
        self.status_effect = None

    def change_class(self, class_def: ClassDef) -> bool:
        """Switch to ``class_def``, starting over at level 1 with full vitals.

        Rings and learned skills are kept. Returns False when the class is
        already the current one.
        """
        if class_def.id == self.class_def.id:
            return False
        self.class_def = class_def
        self.level = 1
        self.xp = 0
        self.current_hp = self.max_hp
        self.current_mp = self.max_mp
        return True

    def equip_ring(self, ring: RingKind) -> RingKind | None:
        return self.rings.equip(ring)

    def unequip_ring(self, ring: RingKind) -> bool:
        return self.rings.unequip(ring)

    def knows(self, skill_id: str) -> bool:
        return skill_id in self.skills
