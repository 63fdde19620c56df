"""Runtime entity exports."""

from .character import Character
from .equipment import RingSlots

__all__ = [
    "Character",
    "RingSlots",
]
