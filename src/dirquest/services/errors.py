"""Service-layer exceptions."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dirquest.domain.tombstone import Tombstone


class GameError(Exception):
    """Base class for errors surfaced to the command layer."""


class InvalidActionError(GameError):
    """Raised when a verb does not fit the current encounter state."""


class UnknownSkillError(GameError):
    """Raised when a skill id is not in the catalog."""


class SkillNotLearnedError(GameError):
    """Raised when using a skill the character has not learned."""


class SkillAlreadyLearnedError(GameError):
    """Raised when learning a skill the character already knows."""


class SkillRequirementError(GameError):
    """Raised when a skill's prerequisites are not met."""


class InsufficientResourcesError(GameError):
    """Raised when a known skill cannot be paid for."""


class InsufficientGoldError(GameError):
    """Raised when a bribe or bet exceeds the carried gold."""


class UnknownClassError(GameError):
    """Raised when a class name does not match any player class."""


class CharacterDeadError(GameError):
    """Raised after the death pipeline has run.

    The caller is expected to finish its own reset work before reporting.
    """

    def __init__(self, tombstone: "Tombstone") -> None:
        super().__init__("You died.")
        self.tombstone = tombstone


class FactoryError(GameError):
    """Raised when a runtime entity cannot be created."""


class SaveLoadError(GameError):
    """Raised when save or load operations fail."""
