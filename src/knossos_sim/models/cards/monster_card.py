"""Monster (Minotaur) card implementation."""

from dataclasses import dataclass
from typing import Optional

from .base_card import Card, CardKind
from ...constants import MONSTER_DAMAGE


@dataclass(eq=False)
class MonsterCard(Card):
    """Attacks the opponent's pawn on the same path. Always playable."""
    
    @property
    def kind(self) -> CardKind:
        return CardKind.MONSTER
    
    @property
    def damage(self) -> int:
        """Steps an unprotected pawn is pushed back."""
        return MONSTER_DAMAGE
    
    def is_playable(self, previous_card: Optional[Card]) -> bool:
        return True
    
    def __str__(self) -> str:
        return f"{self.palace} Minotaur"
