"""Repository exports."""

from .classes_repo import ClassesRepository
from .items_repo import ItemsRepository
from .quests_repo import QuestsRepository
from .skills_repo import SkillsRepository

__all__ = [
    "ClassesRepository",
    "ItemsRepository",
    "QuestsRepository",
    "SkillsRepository",
]
