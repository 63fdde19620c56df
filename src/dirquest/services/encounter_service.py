"""Randomized encounter generation.

Each special spawn is a pure function of the player, the location and the
injected randomizer. :func:`generate_encounter` tries them in a fixed
priority order and falls back to :func:`spawn_random`.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, List, Tuple

from dirquest.core.randomizer import Randomizer
from dirquest.core.types import NpcKind
from dirquest.data.repositories import ClassesRepository
from dirquest.data.repositories.classes_repo import GUARDIAN_NAME
from dirquest.domain.combat_math import random_spawn_level, tier_level_requirement
from dirquest.domain.defs import ClassDef, StatDef
from dirquest.domain.encounter import NPC_KINDS, Encounter, InCombat, InNpcEncounter
from dirquest.domain.entities import Character
from dirquest.domain.location import Distance, Location
from dirquest.domain.quests import Quest, is_quest_active
from dirquest.domain.state import GameState
from dirquest.services.factories import create_enemy

logger = logging.getLogger(__name__)

SpawnSpec = Tuple[ClassDef, int]

GUARDIAN_QUEST = "Defeat the Guardian."
GUARDIAN_MIN_DISTANCE = 10
GUARDIAN_LEVEL_BONUS = 5
FINAL_BOSS_MIN_DISTANCE = 100
SHADOW_LEVEL_BONUS = 3
SPECIAL_SPAWN_ODDS = (1, 10)


def spawn_guardian(
    player: Character, location: Location, *, catalog: ClassesRepository, quests: Iterable[Quest]
) -> SpawnSpec | None:
    """The guardian roams far from home while its quest is open."""
    if is_quest_active(quests, GUARDIAN_QUEST) and location.distance.length > GUARDIAN_MIN_DISTANCE:
        return catalog.by_name(GUARDIAN_NAME), player.level + GUARDIAN_LEVEL_BONUS
    return None


def spawn_final_boss(player: Character, location: Location, *, catalog: ClassesRepository) -> SpawnSpec | None:
    """Gorthaur answers the ruling ring at the edge of the world."""
    if not player.rings.is_wearing("ruling") or location.distance.length < FINAL_BOSS_MIN_DISTANCE:
        return None
    base = catalog.first_player()
    class_def = dataclasses.replace(
        base,
        id="gorthaur",
        name="gorthaur",
        category="legendary",
        hp=StatDef(base.hp.base * 2, base.hp.growth),
        strength=StatDef(base.strength.base * 2, base.strength.growth),
    )
    return class_def, player.level


def spawn_shadow(player: Character, location: Location, *, randomizer: Randomizer) -> SpawnSpec | None:
    """The player's own shadow occasionally waits at home."""
    if not location.is_home or not randomizer.chance(*SPECIAL_SPAWN_ODDS):
        return None
    class_def = dataclasses.replace(player.class_def, id="shadow", name="shadow", category="rare")
    return class_def, player.level + SHADOW_LEVEL_BONUS


def spawn_dev(
    player: Character, location: Location, *, catalog: ClassesRepository, randomizer: Randomizer
) -> SpawnSpec | None:
    """A weakened developer hides in the game's own data directory."""
    if not location.is_data_dir or not randomizer.chance(*SPECIAL_SPAWN_ODDS):
        return None
    base = catalog.first_player()
    class_def = dataclasses.replace(
        base,
        id="dev",
        name="dev",
        category="rare",
        hp=StatDef(base.hp.base // 2, base.hp.growth),
        strength=StatDef(base.strength.base // 2, base.strength.growth),
        speed=StatDef(base.speed.base // 2, base.speed.growth),
    )
    return class_def, player.level


def enemy_families(catalog: ClassesRepository) -> Dict[str, List[ClassDef]]:
    families: Dict[str, List[ClassDef]] = {}
    for class_def in catalog.enemies():
        families.setdefault(class_def.family, []).append(class_def)
    return families


def spawn_random(
    player: Character, distance: Distance, *, catalog: ClassesRepository, randomizer: Randomizer
) -> SpawnSpec:
    """Pick a family uniformly, then its toughest variant the player has unlocked."""
    families = enemy_families(catalog)
    names = sorted(families)
    family = families[names[randomizer.range(len(names))]]
    eligible = [variant for variant in family if player.level >= tier_level_requirement(variant.category)]
    if eligible:
        class_def = max(eligible, key=lambda variant: variant.hp.base)
    else:
        class_def = family[0]
    return class_def, random_spawn_level(player.level, distance.length)


def generate_encounter(
    player: Character,
    location: Location,
    *,
    catalog: ClassesRepository,
    quests: Iterable[Quest],
    randomizer: Randomizer,
) -> SpawnSpec | None:
    """Decide whether an enemy appears and return its class and level."""
    if player.is_evading:
        return None
    if not randomizer.should_enemy_appear(location.distance):
        return None
    class_def, level = (
        spawn_guardian(player, location, catalog=catalog, quests=quests)
        or spawn_final_boss(player, location, catalog=catalog)
        or spawn_shadow(player, location, randomizer=randomizer)
        or spawn_dev(player, location, catalog=catalog, randomizer=randomizer)
        or spawn_random(player, location.distance, catalog=catalog, randomizer=randomizer)
    )
    return class_def, randomizer.enemy_level(level)


def spawn_npc(location: Location, *, randomizer: Randomizer) -> NpcKind | None:
    if not randomizer.should_enemy_appear(location.distance):
        return None
    return NPC_KINDS[randomizer.range(len(NPC_KINDS))]


class EncounterService:
    """Fills the encounter slot when the player arrives somewhere."""

    def __init__(self, *, classes_repo: ClassesRepository) -> None:
        self._classes_repo = classes_repo

    def spawn_enemy(self, state: GameState) -> Character | None:
        spec = generate_encounter(
            state.player,
            state.location,
            catalog=self._classes_repo,
            quests=state.quests,
            randomizer=state.randomizer,
        )
        if spec is None:
            return None
        class_def, level = spec
        return create_enemy(class_def, level)

    def roll_encounter(self, state: GameState) -> Encounter | None:
        """Create at most one encounter, preferring enemies over NPCs."""
        if state.encounter is not None:
            return None
        encounter: Encounter | None = None
        enemy = self.spawn_enemy(state)
        if enemy is not None:
            encounter = InCombat(enemy=enemy)
            logger.info("A level %d %s appears at %s", enemy.level, enemy.name, state.location.path)
        else:
            kind = spawn_npc(state.location, randomizer=state.randomizer)
            if kind is not None:
                encounter = InNpcEncounter(kind=kind)
                logger.info("Met a %s at %s", kind.replace("_", " "), state.location.path)
        if encounter is not None:
            state.enter_encounter(encounter)
        return encounter
