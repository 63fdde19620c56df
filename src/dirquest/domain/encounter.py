"""Encounter slot variants."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from dirquest.core.types import NpcKind
from dirquest.domain.entities import Character


@dataclass(slots=True)
class InCombat:
    enemy: Character


@dataclass(frozen=True, slots=True)
class InNpcEncounter:
    kind: NpcKind


Encounter = Union[InCombat, InNpcEncounter]

NPC_KINDS: tuple[NpcKind, ...] = ("gambler", "witch", "ghostly_maiden")
