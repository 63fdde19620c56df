from __future__ import annotations

import copy
import json

import pytest

from dirquest.core.randomizer import SeededRandomizer
from dirquest.domain.encounter import InNpcEncounter
from dirquest.services.context import new_game
from dirquest.services.encounter_service import spawn_final_boss
from dirquest.services.errors import SaveLoadError
from dirquest.services.factories import create_enemy

from tests.helpers.game import get_context, make_enemy, make_state, meet, place, start_fight


def _save_service():
    return get_context().save_service


def _round_trip(state):
    payload = json.loads(json.dumps(_save_service().serialize(state)))
    return _save_service().deserialize(payload)


def _make_played_state():
    state = new_game(get_context(), class_id="mage", seed=42)
    state.location = place("/usr/share", 8)
    state.gold = 321
    state.inventory = {"potion": 2, "evade_ring": 1}
    state.player.add_experience(40)
    state.player.receive_damage(7)
    state.player.equip_ring("attack")
    state.player.status_effect = "burn"
    state.player.skills.update({"fireball", "heal"})
    state.quest("Win 10 battles.").progress = 4
    state.quest("Win a battle.").completed = True
    state.quest("Win a battle.").progress = 1
    state.tombstones.bury("/var/tmp", 55)
    return state


def test_round_trip_keeps_state() -> None:
    state = _make_played_state()
    start_fight(state, make_enemy("spider_queen", level=4))
    state.enemy.receive_damage(9)

    restored = _round_trip(state)

    assert restored.seed == 42
    assert restored.location == state.location
    assert restored.home == state.home
    assert restored.gold == 321
    assert restored.inventory == {"potion": 2, "evade_ring": 1}
    assert restored.player.class_def == state.player.class_def
    assert (restored.player.level, restored.player.xp) == (state.player.level, state.player.xp)
    assert restored.player.hp == state.player.hp
    assert restored.player.rings.slots == ["attack", None]
    assert restored.player.status_effect == "burn"
    assert restored.player.skills == {"fireball", "heal"}
    assert [(q.quest_id, q.progress, q.completed) for q in restored.quests] == [
        (q.quest_id, q.progress, q.completed) for q in state.quests
    ]
    assert [(t.location_path, t.gold) for t in restored.tombstones] == [("/var/tmp", 55)]
    assert restored.enemy is not None
    assert restored.enemy.class_def.inflicts == "poison"
    assert restored.enemy.hp == state.enemy.hp


def test_round_trip_continues_random_sequence() -> None:
    state = _make_played_state()
    assert isinstance(state.randomizer, SeededRandomizer)
    state.randomizer.range(100)

    restored = _round_trip(state)
    expected = [state.randomizer.range(1000) for _ in range(5)]

    assert [restored.randomizer.range(1000) for _ in range(5)] == expected


def test_variant_enemy_survives_round_trip() -> None:
    state = _make_played_state()
    state.player.equip_ring("ruling")
    spec = spawn_final_boss(state.player, place("/deep", 120), catalog=get_context().classes_repo)
    assert spec is not None
    start_fight(state, create_enemy(*spec))

    restored = _round_trip(state)

    assert restored.enemy is not None
    assert restored.enemy.name == "gorthaur"
    assert restored.enemy.class_def.hp.base == 100


def test_npc_encounter_round_trip() -> None:
    state = make_state()
    meet(state, "ghostly_maiden")

    restored = _round_trip(state)

    assert restored.encounter == InNpcEncounter(kind="ghostly_maiden")


def test_rejects_other_save_versions() -> None:
    payload = _save_service().serialize(make_state())
    payload["save_version"] = 0

    with pytest.raises(SaveLoadError):
        _save_service().deserialize(payload)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda state: state["quests"].append({"quest_id": "slay_everything", "progress": 0, "completed": False}),
        lambda state: state.update(encounter={"type": "npc", "kind": "bard"}),
        lambda state: state["player"].update(rings=["lava", None]),
        lambda state: state.update(inventory={"excalibur": 1}),
        lambda state: state.update(gold=-5),
        lambda state: state["player"]["class"].update(category="deity"),
    ],
)
def test_rejects_invalid_payloads(mutate) -> None:
    payload = copy.deepcopy(_save_service().serialize(make_state()))
    mutate(payload["state"])

    with pytest.raises(SaveLoadError):
        _save_service().deserialize(payload)


def test_non_mapping_payload_rejected() -> None:
    with pytest.raises(SaveLoadError):
        _save_service().deserialize([])  # type: ignore[arg-type]
