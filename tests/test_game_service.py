from __future__ import annotations

import pytest

from dirquest.domain.encounter import InCombat
from dirquest.domain.location import Location
from dirquest.services.errors import CharacterDeadError, InvalidActionError

from tests.helpers.game import get_context, make_enemy, make_state, meet, place, start_fight
from tests.helpers.randomizers import ScriptedRandomizer

ORC_FAMILY = 4


def _game():
    return get_context().game_service


def test_move_updates_location() -> None:
    state = make_state()
    destination = place("/srv", 3)

    report = _game().move_to(state, destination)

    assert state.location == destination
    assert report.encounter is None
    assert report.status_damage == 0
    assert report.rested is False


def test_move_can_start_a_fight() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=True, ranges=[ORC_FAMILY]))

    report = _game().move_to(state, place("/srv", 3))

    assert isinstance(report.encounter, InCombat)
    assert state.enemy is not None
    assert state.enemy.class_def.id == "orc"


def test_cannot_walk_away_from_a_fight() -> None:
    state = make_state()
    start = state.location
    start_fight(state, make_enemy("rat"))

    with pytest.raises(InvalidActionError):
        _game().move_to(state, place("/srv", 3))
    assert state.location == start
    assert state.enemy is not None


def test_leaving_npc_dismisses_it() -> None:
    state = make_state()
    meet(state, "gambler")

    _game().move_to(state, place("/srv", 3))

    assert state.encounter is None


def test_forced_move_leaves_combat_without_new_encounter() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=True))
    start_fight(state, make_enemy("rat"))

    report = _game().move_to(state, place("/srv", 3), force=True)

    assert state.encounter is None
    assert report.encounter is None


def test_status_ticks_on_move() -> None:
    state = make_state()
    state.player.status_effect = "poison"

    report = _game().move_to(state, place("/srv", 3))

    assert report.status_damage == 2
    assert state.player.hp == 48
    assert state.player.status_effect == "poison"


def test_arriving_home_rests_and_cures() -> None:
    state = make_state()
    state.location = place("/srv", 3)
    state.player.receive_damage(20)
    state.player.current_mp = 0
    state.player.status_effect = "burn"

    report = _game().move_to(state, state.home)

    assert report.rested is True
    assert report.status_damage == 5
    assert state.player.hp == state.player.max_hp
    assert state.player.mp == state.player.max_mp
    assert state.player.status_effect is None


def test_fatal_burn_on_forced_move_runs_death_pipeline() -> None:
    state = make_state()
    state.gold = 90
    state.player.receive_damage(state.player.hp - 3)
    state.player.status_effect = "burn"

    with pytest.raises(CharacterDeadError) as excinfo:
        _game().move_to(state, place("/mnt/lava", 9), force=True)

    assert excinfo.value.tombstone.location_path == "/mnt/lava"
    assert excinfo.value.tombstone.gold == 90
    assert state.location == state.home
    assert state.player.hp == state.player.max_hp
    assert state.player.status_effect is None
    assert state.gold == 0


def test_returning_to_grave_recovers_gold() -> None:
    state = make_state()
    state.gold = 90
    state.player.receive_damage(state.player.hp - 1)
    state.player.status_effect = "poison"
    with pytest.raises(CharacterDeadError):
        _game().move_to(state, place("/mnt/lava", 9))

    _game().move_to(state, place("/mnt/lava", 9))
    pickup = _game().inspect(state)

    assert pickup.gold == 90
    assert state.gold == 90 + 200
    assert state.quest("Visit the tombstone of a fallen hero.").completed


def test_battle_looks_for_a_fight() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=True, ranges=[ORC_FAMILY]))
    state.location = place("/srv", 3)

    enemy = _game().battle(state)

    assert enemy is not None
    assert state.enemy is enemy


def test_battle_can_find_nothing() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=False))

    assert _game().battle(state) is None
    assert state.encounter is None


def test_battle_rejected_during_encounter() -> None:
    state = make_state(randomizer=ScriptedRandomizer(appear=True))
    meet(state, "witch")

    with pytest.raises(InvalidActionError):
        _game().battle(state)


def test_home_location_defaults() -> None:
    home = Location.home()

    assert home.is_home
    assert home.distance.length == 0
    assert home.distance.band == "near"
