"""Shared type aliases for the core and domain layers."""
from typing import Literal

Category = Literal["player", "common", "rare", "legendary", "boss"]
RingKind = Literal["void", "attack", "speed", "evade", "ruling"]
StatusEffect = Literal["burn", "poison"]
NpcKind = Literal["gambler", "witch", "ghostly_maiden"]
SkillEffect = Literal["damage", "heal", "cure"]
ItemEffect = Literal["heal", "restore_mp", "cure", "passive", "ring"]
QuestKind = Literal["win_battles", "defeat_enemy", "find_item", "visit_tombstone", "reach_level"]
CombatResult = Literal["continue", "win", "disengage"]

__all__ = [
    "Category",
    "CombatResult",
    "ItemEffect",
    "NpcKind",
    "QuestKind",
    "RingKind",
    "SkillEffect",
    "StatusEffect",
]
