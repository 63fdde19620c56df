"""Combat verbs for the active encounter."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from dirquest.core.types import CombatResult
from dirquest.data.repositories import SkillsRepository
from dirquest.domain.combat_math import base_gold_reward, base_xp_reward, bribe_cost, skill_damage_base
from dirquest.domain.defs import SkillDef
from dirquest.domain.entities import Character
from dirquest.domain.events import BattleWon, GameEvent, LevelUp
from dirquest.domain.state import GameState
from dirquest.domain.status_effects import cure_status, inflict_status
from dirquest.services.death_service import DeathService
from dirquest.services.errors import (
    InsufficientGoldError,
    InsufficientResourcesError,
    InvalidActionError,
    SkillNotLearnedError,
    UnknownSkillError,
)
from dirquest.services.quest_service import QuestService, QuestUpdate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CombatEvent:
    """Base combat event."""


@dataclass(slots=True)
class StrikeResolvedEvent(CombatEvent):
    attacker_name: str
    target_name: str
    damage: int
    critical: bool
    target_hp: int


@dataclass(slots=True)
class StatusInflictedEvent(CombatEvent):
    target_name: str
    effect: str


@dataclass(slots=True)
class SkillUsedEvent(CombatEvent):
    skill_id: str
    skill_name: str
    effect_type: str
    amount: int


@dataclass(slots=True)
class FleeAttemptedEvent(CombatEvent):
    succeeded: bool


@dataclass(slots=True)
class BribeOfferedEvent(CombatEvent):
    cost: int
    accepted: bool


@dataclass(slots=True)
class CombatReport:
    """Outcome of one verb. Death is raised, never reported."""

    result: CombatResult
    events: List[CombatEvent] = field(default_factory=list)
    xp_gained: int = 0
    gold_gained: int = 0
    levels_gained: int = 0
    quest_updates: List[QuestUpdate] = field(default_factory=list)


class CombatService:
    """Resolves attack, flee, bribe and skill verbs against the enemy in the slot."""

    def __init__(
        self,
        *,
        skills_repo: SkillsRepository,
        quest_service: QuestService,
        death_service: DeathService,
    ) -> None:
        self._skills_repo = skills_repo
        self._quest_service = quest_service
        self._death_service = death_service

    # -----------------------
    # Player Actions
    # -----------------------
    def attack(self, state: GameState) -> CombatReport:
        """One exchange of blows; the faster side strikes first."""
        enemy = self._require_enemy(state)
        player = state.player
        events: List[CombatEvent] = []
        if player.speed >= enemy.speed:
            self._strike(state, player, enemy, player.strength, events)
            if not enemy.is_dead:
                self._enemy_strike(state, enemy, events)
        else:
            self._enemy_strike(state, enemy, events)
            if not player.is_dead:
                self._strike(state, player, enemy, player.strength, events)
        return self._settle_exchange(state, enemy, events)

    def flee(self, state: GameState) -> CombatReport:
        enemy = self._require_enemy(state)
        succeeded = state.randomizer.flee_succeeds(state.player.speed, enemy.speed)
        events: List[CombatEvent] = [FleeAttemptedEvent(succeeded=succeeded)]
        if succeeded:
            state.clear_encounter()
            logger.debug("Fled from %s", enemy.name)
            return CombatReport(result="disengage", events=events)
        self._enemy_strike(state, enemy, events)
        return self._settle_exchange(state, enemy, events)

    def bribe(self, state: GameState) -> CombatReport:
        enemy = self._require_enemy(state)
        cost = bribe_cost(enemy)
        if state.gold < cost:
            raise InsufficientGoldError(f"Bribing the {enemy.name} costs {cost} gold.")
        accepted = state.randomizer.bribe_accepted(state.player.level, enemy.level)
        events: List[CombatEvent] = [BribeOfferedEvent(cost=cost, accepted=accepted)]
        if accepted:
            state.gold -= cost
            state.clear_encounter()
            logger.debug("Bribed %s for %d gold", enemy.name, cost)
            return CombatReport(result="disengage", events=events)
        self._enemy_strike(state, enemy, events)
        return self._settle_exchange(state, enemy, events)

    def use_skill(self, state: GameState, skill_id: str) -> CombatReport:
        """Use a learned skill.

        Damage skills need an enemy. Heal and cure skills also work outside
        combat, in which case nobody strikes back.
        """
        skill = self._get_skill(skill_id)
        player = state.player
        if not player.knows(skill.id):
            raise SkillNotLearnedError(f"You have not learned {skill.name}.")
        enemy = state.enemy
        if skill.effect_type == "damage" and enemy is None:
            raise InvalidActionError(f"There is nothing to cast {skill.name} on.")
        if not player.spend_mp(skill.mp_cost):
            raise InsufficientResourcesError(f"{skill.name} needs {skill.mp_cost} MP.")

        events: List[CombatEvent] = []
        if skill.effect_type == "damage":
            assert enemy is not None
            amount = self._strike(state, player, enemy, skill_damage_base(player, skill.power), events)
        elif skill.effect_type == "heal":
            amount = player.heal(player.max_hp * skill.power // 100)
        else:
            amount = int(cure_status(player))
        events.insert(
            0,
            SkillUsedEvent(skill_id=skill.id, skill_name=skill.name, effect_type=skill.effect_type, amount=amount),
        )

        if enemy is None:
            return CombatReport(result="continue", events=events)
        if not enemy.is_dead:
            self._enemy_strike(state, enemy, events)
        return self._settle_exchange(state, enemy, events)

    # -----------------------
    # Helpers
    # -----------------------
    def _require_enemy(self, state: GameState) -> Character:
        enemy = state.enemy
        if enemy is None:
            raise InvalidActionError("There is no enemy here.")
        return enemy

    def _get_skill(self, skill_id: str) -> SkillDef:
        try:
            return self._skills_repo.get(skill_id)
        except KeyError as exc:
            raise UnknownSkillError(f"Unknown skill '{skill_id}'.") from exc

    def _strike(
        self,
        state: GameState,
        attacker: Character,
        target: Character,
        base_damage: int,
        events: List[CombatEvent],
    ) -> int:
        damage = state.randomizer.damage(base_damage)
        critical = state.randomizer.is_critical()
        if critical:
            damage *= 2
        dealt = target.receive_damage(damage)
        events.append(
            StrikeResolvedEvent(
                attacker_name=attacker.name,
                target_name=target.name,
                damage=dealt,
                critical=critical,
                target_hp=target.hp,
            )
        )
        return dealt

    def _enemy_strike(self, state: GameState, enemy: Character, events: List[CombatEvent]) -> None:
        player = state.player
        self._strike(state, enemy, player, enemy.strength, events)
        effect = enemy.class_def.inflicts
        if effect is None or player.is_dead or player.status_effect is not None:
            return
        if state.randomizer.should_inflict() and inflict_status(player, effect):
            events.append(StatusInflictedEvent(target_name=player.name, effect=effect))

    def _settle_exchange(self, state: GameState, enemy: Character, events: List[CombatEvent]) -> CombatReport:
        if state.player.is_dead:
            self._death_service.kill(state)
        if enemy.is_dead:
            return self._win(state, enemy, events)
        return CombatReport(result="continue", events=events)

    def _win(self, state: GameState, enemy: Character, events: List[CombatEvent]) -> CombatReport:
        player = state.player
        xp = state.randomizer.xp_gained(base_xp_reward(enemy))
        gold = state.randomizer.gold_gained(base_gold_reward(enemy))
        state.gold += gold
        levels = player.add_experience(xp)
        state.clear_encounter()
        logger.info("Defeated %s (+%d xp, +%d gold)", enemy.name, xp, gold)

        game_events: List[GameEvent] = [
            BattleWon(enemy_name=enemy.name, enemy_category=enemy.class_def.category, enemy_level=enemy.level)
        ]
        if levels:
            logger.info("%s reached level %d", player.name, player.level)
            game_events.append(LevelUp(level=player.level))
        return CombatReport(
            result="win",
            events=events,
            xp_gained=xp,
            gold_gained=gold,
            levels_gained=levels,
            quest_updates=self._quest_service.dispatch_all(state, game_events),
        )
