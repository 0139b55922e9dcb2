"""Guide (Ariadne) card implementation."""

from dataclasses import dataclass
from typing import Optional

from .base_card import Card, CardKind
from ...constants import GUIDE_STEPS


@dataclass(eq=False)
class GuideCard(Card):
    """Moves the acting pawn a fixed number of steps. Always playable."""
    
    @property
    def kind(self) -> CardKind:
        return CardKind.GUIDE
    
    @property
    def steps(self) -> int:
        return GUIDE_STEPS
    
    def is_playable(self, previous_card: Optional[Card]) -> bool:
        return True
    
    def __str__(self) -> str:
        return f"{self.palace} Ariadne (+{self.steps})"
