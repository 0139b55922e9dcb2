"""Knossos simulation data models."""

from . import findings
from . import cards
from . import board
from . import game

__all__ = ["findings", "cards", "board", "game"]
