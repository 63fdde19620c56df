"""Tombstones left behind by fallen characters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass(frozen=True, slots=True)
class Tombstone:
    location_path: str
    gold: int


@dataclass(slots=True)
class TombstoneLedger:
    """Every tombstone in the world, in burial order."""

    tombstones: List[Tombstone] = field(default_factory=list)

    def bury(self, location_path: str, gold: int) -> Tombstone:
        tombstone = Tombstone(location_path=location_path, gold=max(0, gold))
        self.tombstones.append(tombstone)
        return tombstone

    def at(self, location_path: str) -> List[Tombstone]:
        return [tombstone for tombstone in self.tombstones if tombstone.location_path == location_path]

    def collect(self, location_path: str) -> List[Tombstone]:
        """Remove and return every tombstone at ``location_path``."""
        found = self.at(location_path)
        if found:
            self.tombstones = [t for t in self.tombstones if t.location_path != location_path]
        return found

    def __len__(self) -> int:
        return len(self.tombstones)

    def __iter__(self) -> Iterator[Tombstone]:
        return iter(self.tombstones)
