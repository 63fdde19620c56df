from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from dirquest.domain.location import Distance


@dataclass
class ScriptedRandomizer:
    """Randomizer stub with fixed answers.

    ``appearances`` and ``ranges`` are consumed front to back; once empty,
    ``appear`` and 0 are returned. Damage, gold and experience pass through
    unchanged.
    """

    appear: bool = False
    appearances: List[bool] = field(default_factory=list)
    ranges: List[int] = field(default_factory=list)
    special: bool = False
    critical: bool = False
    flee: bool = False
    bribe: bool = False
    inflict: bool = False
    level_offset: int = 0
    range_calls: List[int] = field(default_factory=list)

    def should_enemy_appear(self, distance: Distance) -> bool:
        if self.appearances:
            return self.appearances.pop(0)
        return self.appear

    def enemy_level(self, base_level: int) -> int:
        return max(1, base_level + self.level_offset)

    def range(self, n: int) -> int:
        self.range_calls.append(n)
        value = self.ranges.pop(0) if self.ranges else 0
        assert 0 <= value < n, f"scripted range value {value} outside [0, {n})"
        return value

    def chance(self, numerator: int, denominator: int) -> bool:
        return self.special

    def damage(self, value: int) -> int:
        return value

    def is_critical(self) -> bool:
        return self.critical

    def flee_succeeds(self, player_speed: int, enemy_speed: int) -> bool:
        return self.flee

    def bribe_accepted(self, player_level: int, enemy_level: int) -> bool:
        return self.bribe

    def gold_gained(self, base: int) -> int:
        return base

    def xp_gained(self, base: int) -> int:
        return base

    def should_inflict(self) -> bool:
        return self.inflict
