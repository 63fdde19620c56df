from __future__ import annotations

import pytest

from dirquest.domain.combat_math import random_spawn_level
from dirquest.domain.encounter import InCombat, InNpcEncounter
from dirquest.domain.entities import Character
from dirquest.domain.location import Distance
from dirquest.services.encounter_service import (
    enemy_families,
    generate_encounter,
    spawn_dev,
    spawn_final_boss,
    spawn_guardian,
    spawn_npc,
    spawn_random,
    spawn_shadow,
)

from tests.helpers.game import get_context, make_enemy, make_state, place, start_fight
from tests.helpers.randomizers import ScriptedRandomizer

# Sorted family names: demon dragon ghost imp orc rat skeleton slime snake spider troll wolf zombie
ORC_FAMILY = 4
GHOST_FAMILY = 2


def _make_player(level: int = 1, class_id: str = "warrior") -> Character:
    return Character(class_def=get_context().classes_repo.get(class_id), level=level)


def _generate(player: Character, location, randomizer: ScriptedRandomizer, quests=None):
    context = get_context()
    return generate_encounter(
        player,
        location,
        catalog=context.classes_repo,
        quests=context.quest_service.create_quests() if quests is None else quests,
        randomizer=randomizer,
    )


@pytest.mark.parametrize(
    ("player_level", "distance", "expected"),
    [
        (0, 1, 1),
        (0, 2, 1),
        (0, 3, 2),
        (0, 10, 9),
        (5, 1, 1),
        (5, 2, 1),
        (5, 3, 2),
        (5, 10, 9),
        (10, 1, 1),
        (10, 2, 2),
        (10, 3, 3),
        (10, 10, 10),
    ],
)
def test_random_spawn_level_formula(player_level: int, distance: int, expected: int) -> None:
    assert random_spawn_level(player_level, distance) == expected


def test_evading_player_meets_no_enemy() -> None:
    player = _make_player()
    player.equip_ring("evade")

    result = _generate(player, place("/far/away", 50), ScriptedRandomizer(appear=True))

    assert result is None


def test_no_enemy_when_appearance_roll_fails() -> None:
    assert _generate(_make_player(), place("/tmp", 3), ScriptedRandomizer(appear=False)) is None


def test_guardian_waits_beyond_distance_ten_while_quest_open() -> None:
    player = _make_player(level=2)

    result = _generate(player, place("/a/b/c", 11), ScriptedRandomizer(appear=True))

    assert result is not None
    class_def, level = result
    assert class_def.id == "guardian"
    assert level == 7


def test_guardian_absent_at_distance_ten() -> None:
    result = spawn_guardian(
        _make_player(),
        place("/a", 10),
        catalog=get_context().classes_repo,
        quests=get_context().quest_service.create_quests(),
    )

    assert result is None


def test_guardian_absent_once_quest_completed() -> None:
    quests = get_context().quest_service.create_quests()
    for quest in quests:
        if quest.description == "Defeat the Guardian.":
            quest.completed = True

    result = spawn_guardian(_make_player(), place("/a", 40), catalog=get_context().classes_repo, quests=quests)

    assert result is None


def test_final_boss_needs_ruling_ring_and_distance() -> None:
    catalog = get_context().classes_repo
    player = _make_player(level=6)

    assert spawn_final_boss(player, place("/deep", 150), catalog=catalog) is None
    player.equip_ring("ruling")
    assert spawn_final_boss(player, place("/deep", 99), catalog=catalog) is None

    result = spawn_final_boss(player, place("/deep", 100), catalog=catalog)

    assert result is not None
    class_def, level = result
    assert class_def.name == "gorthaur"
    assert class_def.category == "legendary"
    assert class_def.hp.base == 100
    assert class_def.strength.base == 24
    assert level == 6


def test_guardian_takes_priority_over_final_boss() -> None:
    player = _make_player()
    player.equip_ring("ruling")

    result = _generate(player, place("/deep", 150), ScriptedRandomizer(appear=True))

    assert result is not None
    assert result[0].id == "guardian"


def test_final_boss_when_guardian_defeated() -> None:
    player = _make_player()
    player.equip_ring("ruling")
    quests = get_context().quest_service.create_quests()
    for quest in quests:
        if quest.quest_id == "defeat_guardian":
            quest.completed = True

    result = _generate(player, place("/deep", 150), ScriptedRandomizer(appear=True), quests=quests)

    assert result is not None
    assert result[0].name == "gorthaur"


def test_shadow_mirrors_player_at_home() -> None:
    player = _make_player(level=2, class_id="thief")

    result = spawn_shadow(player, place("/home/hero", 0, is_home=True), randomizer=ScriptedRandomizer(special=True))

    assert result is not None
    class_def, level = result
    assert class_def.name == "shadow"
    assert class_def.category == "rare"
    assert class_def.hp == player.class_def.hp
    assert level == 5


def test_shadow_needs_lucky_roll_and_home() -> None:
    player = _make_player()
    home = place("/home/hero", 0, is_home=True)

    assert spawn_shadow(player, home, randomizer=ScriptedRandomizer(special=False)) is None
    assert spawn_shadow(player, place("/tmp", 0), randomizer=ScriptedRandomizer(special=True)) is None


def test_dev_is_weakened_first_player_class() -> None:
    player = _make_player(level=3, class_id="mage")

    result = spawn_dev(
        player,
        place("/data", 2, is_data_dir=True),
        catalog=get_context().classes_repo,
        randomizer=ScriptedRandomizer(special=True),
    )

    assert result is not None
    class_def, level = result
    assert class_def.name == "dev"
    assert (class_def.hp.base, class_def.strength.base, class_def.speed.base) == (25, 6, 5)
    assert level == 3


def test_families_exclude_bosses() -> None:
    families = enemy_families(get_context().classes_repo)

    assert "guardian" not in families
    assert [variant.id for variant in families["orc"]] == ["orc", "orc_captain", "orc_warlord"]
    assert len(families) == 13


@pytest.mark.parametrize(
    ("player_level", "expected"),
    [(1, "orc"), (5, "orc_captain"), (9, "orc_captain"), (10, "orc_warlord")],
)
def test_random_spawn_picks_toughest_unlocked_variant(player_level: int, expected: str) -> None:
    result = spawn_random(
        _make_player(level=player_level),
        Distance(3),
        catalog=get_context().classes_repo,
        randomizer=ScriptedRandomizer(ranges=[ORC_FAMILY]),
    )

    assert result[0].id == expected


def test_random_spawn_falls_back_to_first_variant() -> None:
    class_def, level = spawn_random(
        _make_player(),
        Distance(3),
        catalog=get_context().classes_repo,
        randomizer=ScriptedRandomizer(ranges=[GHOST_FAMILY]),
    )

    assert class_def.id == "ghost"
    assert level == 2


def test_generated_level_is_jittered_and_positive() -> None:
    randomizer = ScriptedRandomizer(appear=True, ranges=[ORC_FAMILY], level_offset=-1)

    result = _generate(_make_player(), place("/tmp", 1), randomizer)

    assert result is not None
    assert result[1] == 1


def test_spawn_npc_picks_kind() -> None:
    randomizer = ScriptedRandomizer(appear=True, ranges=[2])

    assert spawn_npc(place("/tmp", 1), randomizer=randomizer) == "ghostly_maiden"
    assert randomizer.range_calls == [3]


def test_roll_encounter_fills_slot_with_enemy() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=True, ranges=[ORC_FAMILY]))
    state.location = place("/srv", 4)

    encounter = get_context().encounter_service.roll_encounter(state)

    assert isinstance(encounter, InCombat)
    assert state.enemy is encounter.enemy
    assert state.enemy.class_def.id == "orc"
    assert state.enemy.level == 3


def test_roll_encounter_offers_npc_when_no_enemy() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appearances=[False, True], ranges=[1]))
    state.location = place("/srv", 4)

    encounter = get_context().encounter_service.roll_encounter(state)

    assert isinstance(encounter, InNpcEncounter)
    assert state.npc == "witch"


def test_roll_encounter_can_produce_nothing() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=False))

    assert get_context().encounter_service.roll_encounter(state) is None
    assert state.encounter is None


def test_roll_encounter_keeps_existing_encounter() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=True))
    rat = start_fight(state, make_enemy("rat"))

    assert get_context().encounter_service.roll_encounter(state) is None
    assert state.enemy is rat


def test_evade_ring_wears_off_after_two_more_rings() -> None:
    player = _make_player()
    location = place("/home/hero/1", 1)
    assert _generate(player, location, ScriptedRandomizer(appear=True)) is not None

    player.equip_ring("evade")
    assert _generate(player, location, ScriptedRandomizer(appear=True)) is None

    player.equip_ring("void")
    assert _generate(player, location, ScriptedRandomizer(appear=True)) is None

    player.equip_ring("void")
    assert _generate(player, location, ScriptedRandomizer(appear=True)) is not None
