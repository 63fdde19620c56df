"""Snapshot and restore of the full game state."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from dirquest.core.randomizer import SeededRandomizer
from dirquest.data.repositories import ClassesRepository, ItemsRepository, QuestsRepository
from dirquest.data.repositories.classes_repo import VALID_CATEGORIES, VALID_STATUS_EFFECTS
from dirquest.data.repositories.items_repo import VALID_RINGS
from dirquest.domain.defs import ClassDef, StatDef
from dirquest.domain.encounter import NPC_KINDS, Encounter, InCombat, InNpcEncounter
from dirquest.domain.entities import Character, RingSlots
from dirquest.domain.location import Distance, Location
from dirquest.domain.quests import Quest
from dirquest.domain.state import GameState
from dirquest.domain.tombstone import TombstoneLedger
from dirquest.services.errors import SaveLoadError

SavePayload = Dict[str, Any]


class SaveService:
    """Converts runtime state to/from a validated, versioned payload.

    The payload only holds JSON-compatible values. Character classes are
    stored in full because spawned enemies and the player may carry
    variants that are not in the catalog.
    """

    SAVE_VERSION = 1

    def __init__(
        self,
        *,
        classes_repo: ClassesRepository,
        quests_repo: QuestsRepository,
        items_repo: ItemsRepository,
    ) -> None:
        self._classes_repo = classes_repo
        self._quests_repo = quests_repo
        self._items_repo = items_repo

    def serialize(self, state: GameState) -> SavePayload:
        """Return a JSON-serializable payload for disk persistence."""
        rng_state = None
        if isinstance(state.randomizer, SeededRandomizer):
            rng_state = state.randomizer.export_state()
        return {
            "save_version": self.SAVE_VERSION,
            "rng": rng_state,
            "state": {
                "seed": state.seed,
                "player": self._serialize_character(state.player),
                "home": self._serialize_location(state.home),
                "location": self._serialize_location(state.location),
                "gold": state.gold,
                "inventory": dict(sorted(state.inventory.items())),
                "quests": [
                    {"quest_id": quest.quest_id, "progress": quest.progress, "completed": quest.completed}
                    for quest in state.quests
                ],
                "tombstones": [
                    {"location_path": tombstone.location_path, "gold": tombstone.gold}
                    for tombstone in state.tombstones
                ],
                "encounter": self._serialize_encounter(state.encounter),
            },
        }

    def deserialize(self, payload: Mapping[str, Any]) -> GameState:
        """Rehydrate a GameState and its randomizer from a persisted payload."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        if payload.get("save_version") != self.SAVE_VERSION:
            raise SaveLoadError("Save format changed. Please start a new game.")
        state_payload = self._require_mapping(payload.get("state"), "state")

        seed = self._require_int(state_payload.get("seed"), "state.seed")
        randomizer = SeededRandomizer(seed)
        rng_payload = payload.get("rng")
        if rng_payload is not None:
            try:
                randomizer.restore_state(self._require_mapping(rng_payload, "rng"))
            except ValueError as exc:
                raise SaveLoadError(f"Invalid RNG state: {exc}") from exc

        state = GameState(
            seed=seed,
            randomizer=randomizer,
            player=self._deserialize_character(state_payload.get("player"), "state.player"),
            home=self._deserialize_location(state_payload.get("home"), "state.home"),
            location=self._deserialize_location(state_payload.get("location"), "state.location"),
            gold=self._require_int(state_payload.get("gold"), "state.gold", minimum=0),
            inventory=self._deserialize_inventory(state_payload.get("inventory")),
            quests=self._deserialize_quests(state_payload.get("quests")),
            tombstones=self._deserialize_tombstones(state_payload.get("tombstones")),
        )
        state.encounter = self._deserialize_encounter(state_payload.get("encounter"))
        return state

    # -----------------------
    # Serialization helpers
    # -----------------------
    @staticmethod
    def _serialize_class(class_def: ClassDef) -> Dict[str, Any]:
        return {
            "id": class_def.id,
            "name": class_def.name,
            "category": class_def.category,
            "hp": [class_def.hp.base, class_def.hp.growth],
            "strength": [class_def.strength.base, class_def.strength.growth],
            "speed": [class_def.speed.base, class_def.speed.growth],
            "mp": [class_def.mp.base, class_def.mp.growth],
            "inflicts": class_def.inflicts,
        }

    def _serialize_character(self, character: Character) -> Dict[str, Any]:
        return {
            "class": self._serialize_class(character.class_def),
            "level": character.level,
            "xp": character.xp,
            "hp": character.hp,
            "mp": character.mp,
            "rings": list(character.rings.slots),
            "status_effect": character.status_effect,
            "skills": sorted(character.skills),
        }

    @staticmethod
    def _serialize_location(location: Location) -> Dict[str, Any]:
        return {
            "path": location.path,
            "distance": location.distance.length,
            "is_home": location.is_home,
            "is_data_dir": location.is_data_dir,
        }

    def _serialize_encounter(self, encounter: Encounter | None) -> Dict[str, Any] | None:
        if isinstance(encounter, InCombat):
            return {"type": "combat", "enemy": self._serialize_character(encounter.enemy)}
        if isinstance(encounter, InNpcEncounter):
            return {"type": "npc", "kind": encounter.kind}
        return None

    # -----------------------
    # Deserialization helpers
    # -----------------------
    def _deserialize_class(self, value: object, context: str) -> ClassDef:
        data = self._require_mapping(value, context)
        category = self._require_str(data.get("category"), f"{context}.category")
        if category not in VALID_CATEGORIES:
            raise SaveLoadError(f"{context}.category '{category}' is invalid.")
        inflicts = data.get("inflicts")
        if inflicts is not None and inflicts not in VALID_STATUS_EFFECTS:
            raise SaveLoadError(f"{context}.inflicts '{inflicts}' is invalid.")
        return ClassDef(
            id=self._require_str(data.get("id"), f"{context}.id"),
            name=self._require_str(data.get("name"), f"{context}.name"),
            category=category,  # type: ignore[arg-type]
            hp=self._require_stat(data.get("hp"), f"{context}.hp"),
            strength=self._require_stat(data.get("strength"), f"{context}.strength"),
            speed=self._require_stat(data.get("speed"), f"{context}.speed"),
            mp=self._require_stat(data.get("mp"), f"{context}.mp"),
            inflicts=inflicts,
        )

    def _deserialize_character(self, value: object, context: str) -> Character:
        data = self._require_mapping(value, context)
        rings_raw = data.get("rings")
        if not isinstance(rings_raw, list) or any(ring is not None and ring not in VALID_RINGS for ring in rings_raw):
            raise SaveLoadError(f"{context}.rings is invalid.")
        status_effect = data.get("status_effect")
        if status_effect is not None and status_effect not in VALID_STATUS_EFFECTS:
            raise SaveLoadError(f"{context}.status_effect is invalid.")
        skills_raw = data.get("skills")
        if not isinstance(skills_raw, list) or not all(isinstance(skill, str) for skill in skills_raw):
            raise SaveLoadError(f"{context}.skills must be a list of strings.")
        try:
            return Character(
                class_def=self._deserialize_class(data.get("class"), f"{context}.class"),
                level=self._require_int(data.get("level"), f"{context}.level", minimum=1),
                xp=self._require_int(data.get("xp"), f"{context}.xp", minimum=0),
                current_hp=self._require_int(data.get("hp"), f"{context}.hp", minimum=1),
                current_mp=self._require_int(data.get("mp"), f"{context}.mp", minimum=0),
                rings=RingSlots(slots=list(rings_raw)),
                status_effect=status_effect,
                skills=set(skills_raw),
            )
        except ValueError as exc:
            raise SaveLoadError(f"{context} is invalid: {exc}") from exc

    def _deserialize_location(self, value: object, context: str) -> Location:
        data = self._require_mapping(value, context)
        return Location(
            path=self._require_str(data.get("path"), f"{context}.path"),
            distance=Distance(self._require_int(data.get("distance"), f"{context}.distance", minimum=0)),
            is_home=self._require_bool(data.get("is_home"), f"{context}.is_home"),
            is_data_dir=self._require_bool(data.get("is_data_dir"), f"{context}.is_data_dir"),
        )

    def _deserialize_inventory(self, value: object) -> Dict[str, int]:
        data = self._require_mapping(value, "state.inventory")
        inventory: Dict[str, int] = {}
        for item_id, quantity in data.items():
            if not self._items_repo.has(item_id):
                raise SaveLoadError(f"Unknown item '{item_id}' in inventory.")
            inventory[item_id] = self._require_int(quantity, f"state.inventory.{item_id}", minimum=1)
        return inventory

    def _deserialize_quests(self, value: object) -> List[Quest]:
        if not isinstance(value, list):
            raise SaveLoadError("state.quests must be a list.")
        saved: Dict[str, Mapping[str, Any]] = {}
        for index, entry in enumerate(value):
            data = self._require_mapping(entry, f"state.quests[{index}]")
            quest_id = self._require_str(data.get("quest_id"), f"state.quests[{index}].quest_id")
            if not self._quests_repo.has(quest_id):
                raise SaveLoadError(f"Unknown quest '{quest_id}'.")
            saved[quest_id] = data
        quests: List[Quest] = []
        for definition in self._quests_repo.in_file_order():
            data = saved.get(definition.quest_id, {"progress": 0, "completed": False})
            quests.append(
                Quest(
                    definition=definition,
                    progress=self._require_int(data.get("progress"), f"quest '{definition.quest_id}' progress", minimum=0),
                    completed=self._require_bool(data.get("completed"), f"quest '{definition.quest_id}' completed"),
                )
            )
        return quests

    def _deserialize_tombstones(self, value: object) -> TombstoneLedger:
        if not isinstance(value, list):
            raise SaveLoadError("state.tombstones must be a list.")
        ledger = TombstoneLedger()
        for index, entry in enumerate(value):
            data = self._require_mapping(entry, f"state.tombstones[{index}]")
            ledger.bury(
                self._require_str(data.get("location_path"), f"state.tombstones[{index}].location_path"),
                self._require_int(data.get("gold"), f"state.tombstones[{index}].gold", minimum=0),
            )
        return ledger

    def _deserialize_encounter(self, value: object) -> Encounter | None:
        if value is None:
            return None
        data = self._require_mapping(value, "state.encounter")
        encounter_type = data.get("type")
        if encounter_type == "combat":
            return InCombat(enemy=self._deserialize_character(data.get("enemy"), "state.encounter.enemy"))
        if encounter_type == "npc":
            kind = data.get("kind")
            if kind not in NPC_KINDS:
                raise SaveLoadError(f"Unknown NPC kind '{kind}'.")
            return InNpcEncounter(kind=kind)  # type: ignore[arg-type]
        raise SaveLoadError(f"Unknown encounter type '{encounter_type}'.")

    # -----------------------
    # Validation helpers
    # -----------------------
    @staticmethod
    def _require_mapping(value: object, context: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_bool(value: object, context: str) -> bool:
        if not isinstance(value, bool):
            raise SaveLoadError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _require_int(value: object, context: str, *, minimum: int | None = None) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise SaveLoadError(f"{context} must be an integer.")
        if minimum is not None and value < minimum:
            raise SaveLoadError(f"{context} must be >= {minimum}.")
        return value

    def _require_stat(self, value: object, context: str) -> StatDef:
        if not isinstance(value, list) or len(value) != 2:
            raise SaveLoadError(f"{context} must be a [base, growth] pair.")
        return StatDef(
            base=self._require_int(value[0], f"{context}[0]", minimum=0),
            growth=self._require_int(value[1], f"{context}[1]", minimum=0),
        )
