"""Deterministic reward and cost formulas for encounters."""
from __future__ import annotations

from dirquest.domain.entities import Character

# Higher tiers are worth more and cost more to bribe.
TIER_MULTIPLIER = {"player": 1, "common": 1, "rare": 2, "legendary": 3, "boss": 5}

# Minimum player level before a tier may be picked by the random spawner.
TIER_LEVEL_REQUIREMENT = {"common": 1, "rare": 5, "legendary": 10}

XP_PER_LEVEL = 25
GOLD_PER_LEVEL = 30
BRIBE_PER_LEVEL = 50


def tier_multiplier(enemy: Character) -> int:
    return TIER_MULTIPLIER.get(enemy.class_def.category, 1)


def tier_level_requirement(category: str) -> int:
    return TIER_LEVEL_REQUIREMENT.get(category, 1)


def base_xp_reward(enemy: Character) -> int:
    return enemy.level * XP_PER_LEVEL * tier_multiplier(enemy)


def base_gold_reward(enemy: Character) -> int:
    return enemy.level * GOLD_PER_LEVEL * tier_multiplier(enemy)


def bribe_cost(enemy: Character) -> int:
    return enemy.level * BRIBE_PER_LEVEL * tier_multiplier(enemy)


def skill_damage_base(attacker: Character, power: int) -> int:
    return max(1, attacker.strength * power // 100)


def random_spawn_level(player_level: int, distance_length: int) -> int:
    return max(player_level // 10 + distance_length - 1, 1)
