"""Class catalog repository."""
from __future__ import annotations

from typing import Dict, List

from dirquest.core.types import Category
from dirquest.data.errors import DataReferenceError, DataValidationError
from dirquest.data.repositories.base import RepositoryBase
from dirquest.domain.defs import ClassDef, StatDef

VALID_CATEGORIES = {"player", "common", "rare", "legendary", "boss"}
ENEMY_CATEGORIES = ("common", "rare", "legendary")
VALID_STATUS_EFFECTS = {"burn", "poison"}
GUARDIAN_NAME = "guardian"


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads player and enemy archetypes and answers catalog queries."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            context = f"class '{raw_id}'"
            class_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                class_data,
                {"name", "category", "hp", "strength", "speed"},
                context,
                optional_fields={"mp", "inflicts"},
            )
            category = self._require_literal(class_data["category"], VALID_CATEGORIES, f"{context} category")
            inflicts = class_data.get("inflicts")
            if inflicts is not None:
                inflicts = self._require_literal(inflicts, VALID_STATUS_EFFECTS, f"{context} inflicts")
            mp_raw = class_data.get("mp", [0, 0])
            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"{context} name"),
                category=category,  # type: ignore[arg-type]
                hp=self._require_stat(class_data["hp"], f"{context} hp", minimum_base=1),
                strength=self._require_stat(class_data["strength"], f"{context} strength"),
                speed=self._require_stat(class_data["speed"], f"{context} speed"),
                mp=self._require_stat(mp_raw, f"{context} mp"),
                inflicts=inflicts,  # type: ignore[arg-type]
            )

        categories = {class_def.category for class_def in classes.values()}
        if "player" not in categories:
            raise DataReferenceError("classes.json must declare at least one player class.")
        if not categories.intersection(ENEMY_CATEGORIES):
            raise DataReferenceError("classes.json must declare at least one common, rare or legendary enemy.")
        if not any(class_def.name == GUARDIAN_NAME for class_def in classes.values()):
            raise DataReferenceError(f"classes.json must declare the '{GUARDIAN_NAME}' class.")
        return classes

    def by_category(self, category: Category) -> List[ClassDef]:
        return [class_def for class_def in self.in_file_order() if class_def.category == category]

    def players(self) -> List[ClassDef]:
        return self.by_category("player")

    def first_player(self) -> ClassDef:
        return self.players()[0]

    def enemies(self) -> List[ClassDef]:
        """Classes eligible for random spawns, in file order."""
        return [class_def for class_def in self.in_file_order() if class_def.category in ENEMY_CATEGORIES]

    def by_name(self, name: str) -> ClassDef:
        lowered = name.lower()
        for class_def in self.in_file_order():
            if class_def.name == lowered:
                return class_def
        raise KeyError(name)

    def _require_stat(self, value: object, context: str, *, minimum_base: int = 0) -> StatDef:
        if not isinstance(value, list) or len(value) != 2:
            raise DataValidationError(f"{context} must be a [base, growth] pair.")
        base = self._require_int(value[0], f"{context} base", minimum=minimum_base)
        growth = self._require_int(value[1], f"{context} growth", minimum=0)
        return StatDef(base=base, growth=growth)
