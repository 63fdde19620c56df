"""Location and distance values handed in by the navigation layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

DistanceBand = Literal["near", "mid", "far"]

NEAR_LIMIT = 5
MID_LIMIT = 10


@dataclass(frozen=True, order=True)
class Distance:
    """Remoteness from the home directory, compared by length only."""

    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("Distance length cannot be negative.")

    @property
    def band(self) -> DistanceBand:
        if self.length <= NEAR_LIMIT:
            return "near"
        if self.length <= MID_LIMIT:
            return "mid"
        return "far"


@dataclass(frozen=True)
class Location:
    """A visited place. Path semantics belong to the caller."""

    path: str
    distance: Distance = field(default_factory=lambda: Distance(0))
    is_home: bool = False
    is_data_dir: bool = False

    @classmethod
    def home(cls, path: str = "~") -> "Location":
        return cls(path=path, distance=Distance(0), is_home=True)
