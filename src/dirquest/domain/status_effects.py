"""Ongoing status effects that tick when a character changes location."""
from __future__ import annotations

from dirquest.domain.entities import Character

# Fraction of maximum health lost per tick, as a divisor.
TICK_DIVISORS = {"burn": 10, "poison": 20}


def status_tick_damage(character: Character) -> int:
    if character.status_effect is None:
        return 0
    return max(1, character.max_hp // TICK_DIVISORS[character.status_effect])


def apply_status_tick(character: Character) -> int:
    """Apply one tick of the active effect and return the damage dealt.

    The result can leave the character dead; running the death pipeline is
    the caller's job.
    """
    return character.receive_damage(status_tick_damage(character))


def inflict_status(character: Character, effect: str) -> bool:
    """Give ``character`` a status effect unless it already carries one."""
    if character.status_effect is not None:
        return False
    character.status_effect = effect  # type: ignore[assignment]
    return True


def cure_status(character: Character) -> bool:
    if character.status_effect is None:
        return False
    character.status_effect = None
    return True
