"""Game models for Knossos simulation."""

from .deck import Deck
from .pawn import Pawn, PawnKind, Scout, Hero
from .player import Player
from .player_factory import PlayerFactory

__all__ = [
    "Deck",
    "Pawn",
    "PawnKind",
    "Scout",
    "Hero",
    "Player",
    "PlayerFactory",
]
