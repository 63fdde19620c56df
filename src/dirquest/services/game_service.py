"""Movement, inspection and explicit battle rolls."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from dirquest.domain.encounter import Encounter, InCombat
from dirquest.domain.entities import Character
from dirquest.domain.location import Location
from dirquest.domain.state import GameState
from dirquest.domain.status_effects import apply_status_tick
from dirquest.services.death_service import DeathService, TombstonePickup
from dirquest.services.encounter_service import EncounterService
from dirquest.services.errors import InvalidActionError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MoveReport:
    location: Location
    status_damage: int = 0
    rested: bool = False
    encounter: Encounter | None = None


class GameService:
    """Runs world actions in a fixed order: move, status tick, death, rest, encounter."""

    def __init__(self, *, encounter_service: EncounterService, death_service: DeathService) -> None:
        self._encounter_service = encounter_service
        self._death_service = death_service

    def move_to(self, state: GameState, destination: Location, *, force: bool = False) -> MoveReport:
        """Move the player to ``destination``.

        A forced move skips encounter generation and also walks away from a
        fight. Status effects tick either way, and a lethal tick raises
        CharacterDeadError after the death pipeline has run.
        """
        if state.enemy is not None and not force:
            raise InvalidActionError("You can't leave while in combat.")
        state.clear_encounter()
        state.location = destination
        report = MoveReport(location=destination)

        if state.player.status_effect is not None:
            report.status_damage = apply_status_tick(state.player)
            logger.debug("%s ticked for %d damage", state.player.status_effect, report.status_damage)
            self._death_service.check(state)

        if destination.is_home:
            state.player.restore()
            report.rested = True

        if not force:
            report.encounter = self._encounter_service.roll_encounter(state)
        return report

    def battle(self, state: GameState) -> Character | None:
        """Look for a fight at the current location without moving."""
        if state.encounter is not None:
            raise InvalidActionError("Already in an encounter.")
        enemy = self._encounter_service.spawn_enemy(state)
        if enemy is not None:
            state.enter_encounter(InCombat(enemy=enemy))
        return enemy

    def inspect(self, state: GameState) -> TombstonePickup:
        return self._death_service.collect_tombstones(state)
