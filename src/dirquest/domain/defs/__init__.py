"""Domain definition exports."""

from .class_def import ClassDef, StatDef
from .item_def import ItemDef
from .quest_def import QuestDef
from .skill_def import SkillDef

__all__ = [
    "ClassDef",
    "ItemDef",
    "QuestDef",
    "SkillDef",
    "StatDef",
]
