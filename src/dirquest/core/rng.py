"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Any, Dict, List

RNGStatePayload = Dict[str, Any]


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def export_state(self) -> RNGStatePayload:
        """Return the generator state as a JSON-compatible mapping."""
        version, internal, gauss_next = self._random.getstate()
        return {"version": version, "internal": list(internal), "gauss_next": gauss_next}

    def restore_state(self, payload: RNGStatePayload) -> None:
        """Restore a state previously produced by export_state."""
        try:
            version = int(payload["version"])
            internal: List[int] = [int(value) for value in payload["internal"]]
            gauss_next = payload.get("gauss_next")
        except (KeyError, TypeError) as exc:
            raise ValueError("RNG payload is malformed.") from exc
        self._random.setstate((version, tuple(internal), gauss_next))
