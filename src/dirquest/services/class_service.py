"""Changing the player's class at home."""
from __future__ import annotations

import logging
from typing import List

from dirquest.data.repositories import ClassesRepository
from dirquest.domain.defs import ClassDef
from dirquest.domain.state import GameState
from dirquest.services.errors import InvalidActionError, UnknownClassError

logger = logging.getLogger(__name__)


class ClassService:
    def __init__(self, *, classes_repo: ClassesRepository) -> None:
        self._classes_repo = classes_repo

    def player_class_names(self) -> List[str]:
        """Options offered when no class name is given."""
        return [class_def.name for class_def in self._classes_repo.players()]

    def change_class(self, state: GameState, class_name: str) -> ClassDef:
        """Switch the player to ``class_name``; only allowed at home.

        Names are matched case-insensitively against player classes.
        """
        if not state.location.is_home:
            raise InvalidActionError("Class change is only allowed at home.")
        if state.enemy is not None:
            raise InvalidActionError("You can't change class while in combat.")
        lowered = class_name.lower()
        class_def = next(
            (candidate for candidate in self._classes_repo.players() if candidate.name == lowered),
            None,
        )
        if class_def is None:
            raise UnknownClassError(f"Unknown class name '{class_name}'.")
        if state.player.change_class(class_def):
            logger.info("Changed class to %s", class_def.name)
        return class_def
