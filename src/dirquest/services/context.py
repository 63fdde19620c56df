"""Explicit construction of repositories, services and new games.

Initialization order matters: the class catalog is loaded and validated
before any service that can spawn an enemy is created.
"""
from __future__ import annotations

import secrets
from dataclasses import dataclass
from pathlib import Path

from dirquest.core.randomizer import Randomizer, SeededRandomizer
from dirquest.data.repositories import ClassesRepository, ItemsRepository, QuestsRepository, SkillsRepository
from dirquest.domain.location import Location
from dirquest.domain.state import GameState
from dirquest.services.class_service import ClassService
from dirquest.services.combat_service import CombatService
from dirquest.services.death_service import DeathService
from dirquest.services.encounter_service import EncounterService
from dirquest.services.factories import create_player
from dirquest.services.game_service import GameService
from dirquest.services.inventory_service import InventoryService
from dirquest.services.npc_service import NpcService
from dirquest.services.quest_service import QuestService
from dirquest.services.save_service import SaveService
from dirquest.services.skill_service import SkillService


@dataclass(slots=True)
class GameContext:
    classes_repo: ClassesRepository
    skills_repo: SkillsRepository
    items_repo: ItemsRepository
    quests_repo: QuestsRepository
    quest_service: QuestService
    death_service: DeathService
    encounter_service: EncounterService
    combat_service: CombatService
    skill_service: SkillService
    class_service: ClassService
    inventory_service: InventoryService
    npc_service: NpcService
    game_service: GameService
    save_service: SaveService


def build_context(base_path: Path | str | None = None) -> GameContext:
    classes_repo = ClassesRepository(base_path=base_path)
    classes_repo.all()
    skills_repo = SkillsRepository(base_path=base_path)
    items_repo = ItemsRepository(base_path=base_path)
    quests_repo = QuestsRepository(base_path=base_path)

    quest_service = QuestService(quests_repo=quests_repo)
    death_service = DeathService(quest_service=quest_service)
    encounter_service = EncounterService(classes_repo=classes_repo)
    inventory_service = InventoryService(items_repo=items_repo, quest_service=quest_service)
    return GameContext(
        classes_repo=classes_repo,
        skills_repo=skills_repo,
        items_repo=items_repo,
        quests_repo=quests_repo,
        quest_service=quest_service,
        death_service=death_service,
        encounter_service=encounter_service,
        combat_service=CombatService(
            skills_repo=skills_repo,
            quest_service=quest_service,
            death_service=death_service,
        ),
        skill_service=SkillService(skills_repo=skills_repo),
        class_service=ClassService(classes_repo=classes_repo),
        inventory_service=inventory_service,
        npc_service=NpcService(inventory_service=inventory_service),
        game_service=GameService(encounter_service=encounter_service, death_service=death_service),
        save_service=SaveService(classes_repo=classes_repo, quests_repo=quests_repo, items_repo=items_repo),
    )


def new_game(
    context: GameContext,
    *,
    class_id: str | None = None,
    seed: int | None = None,
    home: Location | None = None,
    randomizer: Randomizer | None = None,
) -> GameState:
    """Start a game at home with every quest open.

    ``class_id`` defaults to the first player class in the catalog.
    """
    if seed is None:
        seed = secrets.randbits(32)
    home = home or Location.home()
    player = create_player(class_id or context.classes_repo.first_player().id, context.classes_repo)
    return GameState(
        seed=seed,
        randomizer=randomizer or SeededRandomizer(seed),
        player=player,
        home=home,
        location=home,
        quests=context.quest_service.create_quests(),
    )
