"""Base card class and the closed set of card kinds."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...errors import InvalidArgumentError


class CardKind(Enum):
    """Card variants. Resolution code must handle every member."""
    NUMBER = "number"
    GUIDE = "guide"
    MONSTER = "monster"


@dataclass(eq=False)
class Card(ABC):
    """Base class for all cards.
    
    Cards compare by identity: two copies of "Knossos 5" are distinct cards
    in a hand or pile.
    """
    palace: str
    
    def __post_init__(self) -> None:
        """Validate card data after creation."""
        if not self.palace:
            raise InvalidArgumentError("Card palace cannot be empty")
    
    @property
    @abstractmethod
    def kind(self) -> CardKind:
        pass
    
    @property
    def card_type(self) -> str:
        """Get the card type name."""
        return self.kind.value.title()
    
    def is_playable(self, previous_card: Optional["Card"]) -> bool:
        """Check if this card may follow `previous_card` on a path."""
        return True
    
    def __str__(self) -> str:
        return f"{self.palace} {self.card_type}"
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(palace='{self.palace}')"
