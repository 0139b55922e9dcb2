"""Factory for the standard four-palace board."""

import random
from typing import Iterable, List, Optional, Sequence

from .board import Board
from .path import Path
from .position import FindingPosition, PlainPosition, Position
from ..cards.card_factory import CardFactory
from ..game.deck import Deck
from ...constants import PALACES, STANDARD_FINDING_SLOTS, STANDARD_PATH_SCORES


class BoardFactory:
    """Builds paths, decks and whole boards with the standard layout."""
    
    @staticmethod
    def create_path(palace: str,
                    scores: Sequence[int] = STANDARD_PATH_SCORES,
                    finding_slots: Iterable[int] = STANDARD_FINDING_SLOTS) -> Path:
        """Create a path whose finding slots sit at the given indices."""
        slot_indices = set(finding_slots)
        positions: List[Position] = []
        for index, score in enumerate(scores):
            if index in slot_indices:
                positions.append(FindingPosition(score=score))
            else:
                positions.append(PlainPosition(score=score))
        return Path(palace, positions)
    
    @staticmethod
    def create_standard_deck(palaces: Iterable[str] = PALACES,
                             rng: Optional[random.Random] = None) -> Deck:
        """An unshuffled deck holding the standard card set."""
        return Deck(CardFactory.standard_cards(palaces), rng=rng)
    
    @staticmethod
    def create_standard_board(palaces: Sequence[str] = PALACES,
                              rng: Optional[random.Random] = None) -> Board:
        """A board with one standard path per palace and the standard deck.
        
        The board and deck share `rng` so one seed reproduces a whole setup.
        Call `initialize_board()` before play.
        """
        rng = rng if rng is not None else random.Random()
        paths = [BoardFactory.create_path(palace) for palace in palaces]
        deck = BoardFactory.create_standard_deck(palaces, rng=rng)
        return Board(paths, deck, rng=rng)
