"""Number card implementation."""

from dataclasses import dataclass
from typing import Optional

from .base_card import Card, CardKind
from ...constants import MIN_CARD_VALUE, MAX_CARD_VALUE
from ...errors import InvalidArgumentError


@dataclass(eq=False)
class NumberCard(Card):
    """Moves the acting pawn forward by its value."""
    value: int = MIN_CARD_VALUE
    
    def __post_init__(self) -> None:
        super().__post_init__()
        if not MIN_CARD_VALUE <= self.value <= MAX_CARD_VALUE:
            raise InvalidArgumentError(
                f"Number card value must be between {MIN_CARD_VALUE} and {MAX_CARD_VALUE}: {self.value}"
            )
    
    @property
    def kind(self) -> CardKind:
        return CardKind.NUMBER
    
    def is_playable(self, previous_card: Optional[Card]) -> bool:
        """Ranks on a path must not decrease.
        
        An untouched path accepts any number card. After a guide or monster
        card, no number card may be played on that path.
        """
        if previous_card is None:
            return True
        if isinstance(previous_card, NumberCard):
            return self.value >= previous_card.value
        return False
    
    def __str__(self) -> str:
        return f"{self.palace} {self.value}"
    
    def __repr__(self) -> str:
        return f"NumberCard(palace='{self.palace}', value={self.value})"
