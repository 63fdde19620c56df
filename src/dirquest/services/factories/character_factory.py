"""Factory helpers for building characters from the class catalog."""
from __future__ import annotations

from dirquest.data.repositories import ClassesRepository
from dirquest.domain.defs import ClassDef
from dirquest.domain.entities import Character
from dirquest.services.errors import FactoryError


def create_player(class_id: str, classes_repo: ClassesRepository) -> Character:
    """Instantiate a fresh level 1 player of the requested class."""
    try:
        class_def = classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc
    if class_def.category != "player":
        raise FactoryError(f"Class '{class_id}' is not a player class.")
    return Character(class_def=class_def, level=1)


def create_enemy(class_def: ClassDef, level: int) -> Character:
    """Instantiate an enemy at full health."""
    if level < 1:
        raise FactoryError(f"Enemy level must be at least 1, got {level}.")
    return Character(class_def=class_def, level=level)
