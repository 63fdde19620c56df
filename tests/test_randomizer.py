from __future__ import annotations

import pytest

from dirquest.core.randomizer import (
    SeededRandomizer,
    bribe_chance,
    enemy_appearance_chance,
    flee_chance,
)
from dirquest.domain.location import Distance


def test_appearance_chance_never_decreases_with_distance() -> None:
    chances = [enemy_appearance_chance(Distance(length)) for length in range(0, 40)]

    assert chances == sorted(chances)
    assert chances[0] > 0
    assert chances[-1] < 1


def test_flee_chance_rises_with_player_speed() -> None:
    assert flee_chance(5, 10) < flee_chance(10, 10) < flee_chance(20, 10)
    assert flee_chance(10, 10) == pytest.approx(0.5)


def test_flee_and_bribe_chances_are_clamped() -> None:
    assert flee_chance(0, 100) == pytest.approx(0.1)
    assert flee_chance(100, 0) == pytest.approx(0.9)
    assert bribe_chance(1, 50) == pytest.approx(0.1)
    assert bribe_chance(50, 1) == pytest.approx(0.9)


def test_bribe_chance_favors_higher_player_level() -> None:
    assert bribe_chance(3, 5) < bribe_chance(5, 5) < bribe_chance(7, 5)


def test_seeded_randomizer_is_deterministic() -> None:
    first = SeededRandomizer(2024)
    second = SeededRandomizer(2024)

    draws_a = [first.damage(50) for _ in range(10)]
    draws_b = [second.damage(50) for _ in range(10)]

    assert draws_a == draws_b


def test_enemy_level_stays_near_base_and_positive() -> None:
    randomizer = SeededRandomizer(5)

    for base in (1, 4, 12):
        for _ in range(50):
            level = randomizer.enemy_level(base)
            assert max(1, base - 1) <= level <= base + 1


def test_range_stays_in_bounds() -> None:
    randomizer = SeededRandomizer(8)

    values = {randomizer.range(3) for _ in range(200)}

    assert values == {0, 1, 2}


def test_range_rejects_non_positive_bound() -> None:
    with pytest.raises(ValueError):
        SeededRandomizer(1).range(0)


def test_damage_is_at_least_one() -> None:
    randomizer = SeededRandomizer(3)

    assert all(randomizer.damage(1) >= 1 for _ in range(50))
    assert all(40 <= randomizer.damage(50) <= 60 for _ in range(50))


def test_chance_extremes() -> None:
    randomizer = SeededRandomizer(11)

    assert all(randomizer.chance(10, 10) for _ in range(20))
    assert not any(randomizer.chance(0, 10) for _ in range(20))


def test_exported_state_replays_decisions() -> None:
    randomizer = SeededRandomizer(77)
    randomizer.range(10)
    payload = randomizer.export_state()
    expected = [randomizer.range(100) for _ in range(5)]

    replay = SeededRandomizer(0)
    replay.restore_state(payload)

    assert [replay.range(100) for _ in range(5)] == expected
