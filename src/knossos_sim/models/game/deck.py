"""Deck model: draw pile and discard pile."""

import random
from typing import Iterable, List, Optional

from ..cards.base_card import Card
from ..findings.catalog import generate_regular_findings
from ..findings.finding import Finding
from ...errors import EmptyDeckError, InvalidArgumentError
from ...utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class Deck:
    """Draw pile plus a LIFO discard pile.
    
    The top of the draw pile is the end of the list; `draw` pops from there.
    """
    
    def __init__(self, cards: Optional[Iterable[Card]] = None, rng: Optional[random.Random] = None):
        self._draw_pile: List[Card] = list(cards) if cards is not None else []
        self._discard_pile: List[Card] = []
        self._rng = rng if rng is not None else random.Random()
    
    @property
    def draw_pile(self) -> List[Card]:
        return self._draw_pile
    
    @property
    def discard_pile(self) -> List[Card]:
        return self._discard_pile
    
    @property
    def remaining_cards(self) -> int:
        """Number of cards left to draw."""
        return len(self._draw_pile)
    
    @property
    def discard_count(self) -> int:
        return len(self._discard_pile)
    
    def shuffle(self) -> None:
        """Shuffle the draw pile in place."""
        self._rng.shuffle(self._draw_pile)
    
    def draw(self) -> Card:
        """Remove and return the top card of the draw pile."""
        if not self._draw_pile:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._draw_pile.pop()
    
    def discard(self, card: Card) -> None:
        """Push a card onto the discard pile."""
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        self._discard_pile.append(card)
    
    def top_discard(self) -> Optional[Card]:
        """The most recently discarded card, if any."""
        return self._discard_pile[-1] if self._discard_pile else None
    
    def reshuffle_discards(self) -> int:
        """Move every discard back into the draw pile and shuffle.
        
        Returns:
            Number of cards moved.
        """
        moved = len(self._discard_pile)
        while self._discard_pile:
            self._draw_pile.append(self._discard_pile.pop())
        self.shuffle()
        logger.debug(f"Reshuffled {moved} discards into the draw pile")
        return moved
    
    def generate_regular_findings(self) -> List[Finding]:
        """Produce the regular finding catalog placed during board setup."""
        return generate_regular_findings()
    
    def __len__(self) -> int:
        return len(self._draw_pile)
    
    def __str__(self) -> str:
        return f"Deck ({self.remaining_cards} to draw, {self.discard_count} discarded)"
