"""Source of every probabilistic decision made by the engine.

Services never call ``random`` directly. They receive an object satisfying
:class:`Randomizer`, so tests can substitute a scripted implementation and
replay a fight move by move.
"""
from __future__ import annotations

from typing import Protocol

from dirquest.core.rng import RNG, RNGStatePayload
from dirquest.domain.location import Distance

APPEARANCE_CHANCE = {"near": 1 / 3, "mid": 1 / 2, "far": 2 / 3}
CRITICAL_ODDS = 20
INFLICT_ODDS = 5
JITTER_PERCENT = 20


class Randomizer(Protocol):
    def should_enemy_appear(self, distance: Distance) -> bool: ...

    def enemy_level(self, base_level: int) -> int: ...

    def range(self, n: int) -> int: ...

    def chance(self, numerator: int, denominator: int) -> bool: ...

    def damage(self, value: int) -> int: ...

    def is_critical(self) -> bool: ...

    def flee_succeeds(self, player_speed: int, enemy_speed: int) -> bool: ...

    def bribe_accepted(self, player_level: int, enemy_level: int) -> bool: ...

    def gold_gained(self, base: int) -> int: ...

    def xp_gained(self, base: int) -> int: ...

    def should_inflict(self) -> bool: ...


def enemy_appearance_chance(distance: Distance) -> float:
    """Probability of an encounter; never decreases as distance grows."""
    return APPEARANCE_CHANCE[distance.band]


def flee_chance(player_speed: int, enemy_speed: int) -> float:
    fastest = max(player_speed, enemy_speed, 1)
    return _clamp(0.5 + 0.5 * (player_speed - enemy_speed) / fastest, 0.1, 0.9)


def bribe_chance(player_level: int, enemy_level: int) -> float:
    return _clamp(0.5 + 0.1 * (player_level - enemy_level), 0.1, 0.9)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class SeededRandomizer:
    """Randomizer backed by a seeded :class:`RNG`."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = RNG(seed)

    def should_enemy_appear(self, distance: Distance) -> bool:
        return self._rng.random() < enemy_appearance_chance(distance)

    def enemy_level(self, base_level: int) -> int:
        return max(1, base_level + self._rng.randint(-1, 1))

    def range(self, n: int) -> int:
        if n <= 0:
            raise ValueError("range() requires a positive bound.")
        return self._rng.randint(0, n - 1)

    def chance(self, numerator: int, denominator: int) -> bool:
        return self._rng.randint(1, denominator) <= numerator

    def damage(self, value: int) -> int:
        return max(1, self._jitter(value))

    def is_critical(self) -> bool:
        return self.chance(1, CRITICAL_ODDS)

    def flee_succeeds(self, player_speed: int, enemy_speed: int) -> bool:
        return self._rng.random() < flee_chance(player_speed, enemy_speed)

    def bribe_accepted(self, player_level: int, enemy_level: int) -> bool:
        return self._rng.random() < bribe_chance(player_level, enemy_level)

    def gold_gained(self, base: int) -> int:
        return max(0, self._jitter(base))

    def xp_gained(self, base: int) -> int:
        return max(0, self._jitter(base))

    def should_inflict(self) -> bool:
        return self.chance(1, INFLICT_ODDS)

    def export_state(self) -> RNGStatePayload:
        return self._rng.export_state()

    def restore_state(self, payload: RNGStatePayload) -> None:
        self._rng.restore_state(payload)

    def _jitter(self, value: int) -> int:
        if value <= 0:
            return value
        spread = max(1, value * JITTER_PERCENT // 100)
        return value + self._rng.randint(-spread, spread)
