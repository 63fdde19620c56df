"""Gameplay facts broadcast to quests."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class BattleWon:
    enemy_name: str
    enemy_category: str
    enemy_level: int


@dataclass(frozen=True, slots=True)
class ItemAdded:
    item_id: str


@dataclass(frozen=True, slots=True)
class TombstoneFound:
    gold: int


@dataclass(frozen=True, slots=True)
class LevelUp:
    level: int


GameEvent = Union[BattleWon, ItemAdded, TombstoneFound, LevelUp]

__all__ = ["BattleWon", "GameEvent", "ItemAdded", "LevelUp", "TombstoneFound"]
