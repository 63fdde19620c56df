"""Factory helpers for runtime entities."""

from .character_factory import create_enemy, create_player

__all__ = [
    "create_enemy",
    "create_player",
]
