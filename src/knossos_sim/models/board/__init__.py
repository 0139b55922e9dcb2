"""Board models for Knossos simulation."""

from .position import Position, PlainPosition, FindingPosition
from .path import Path
from .board import Board
from .board_factory import BoardFactory

__all__ = [
    "Position",
    "PlainPosition",
    "FindingPosition",
    "Path",
    "Board",
    "BoardFactory",
]
