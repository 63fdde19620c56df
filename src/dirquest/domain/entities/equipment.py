"""Ring equipment slots."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from dirquest.core.types import RingKind

RING_SLOT_COUNT = 2


@dataclass(slots=True)
class RingSlots:
    """Two ring slots that behave as a FIFO.

    Slot 0 holds the most recently equipped ring. Equipping pushes the
    current slot 0 ring into slot 1 and evicts whatever slot 1 held.
    """

    slots: List[RingKind | None] = field(default_factory=lambda: [None] * RING_SLOT_COUNT)

    def __post_init__(self) -> None:
        if len(self.slots) != RING_SLOT_COUNT:
            raise ValueError(f"Ring slots must hold exactly {RING_SLOT_COUNT} entries.")

    def equip(self, ring: RingKind) -> RingKind | None:
        """Equip ``ring`` and return the evicted ring, if any."""
        evicted = self.slots[-1]
        self.slots[1:] = self.slots[:-1]
        self.slots[0] = ring
        return evicted

    def unequip(self, ring: RingKind) -> bool:
        if ring not in self.slots:
            return False
        self.slots.remove(ring)
        self.slots.append(None)
        return True

    def worn(self) -> Tuple[RingKind, ...]:
        return tuple(ring for ring in self.slots if ring is not None)

    def is_wearing(self, ring: RingKind) -> bool:
        return ring in self.slots

    @property
    def is_evading(self) -> bool:
        return self.is_wearing("evade")
