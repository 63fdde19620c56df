import pytest

from dirquest.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    floats_a = [rng_a.random() for _ in range(5)]
    floats_b = [rng_b.random() for _ in range(5)]

    assert ints_a == ints_b
    assert floats_a == floats_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_rng_state_restores_draw_sequence() -> None:
    rng = RNG(99)
    rng.randint(1, 6)
    payload = rng.export_state()
    expected = [rng.randint(1, 1000) for _ in range(5)]

    other = RNG(1)
    other.restore_state(payload)

    assert [other.randint(1, 1000) for _ in range(5)] == expected


def test_rng_restore_rejects_malformed_payload() -> None:
    with pytest.raises(ValueError):
        RNG(1).restore_state({"internal": []})
