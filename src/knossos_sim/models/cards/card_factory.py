"""Factory for building the standard card set."""

from typing import Iterable, List

from .base_card import Card, CardKind
from .number_card import NumberCard
from .guide_card import GuideCard
from .monster_card import MonsterCard
from ...constants import (
    GUIDE_CARDS_PER_PALACE,
    MAX_CARD_VALUE,
    MIN_CARD_VALUE,
    MONSTER_CARDS_PER_PALACE,
    NUMBER_CARD_COPIES,
)


class CardFactory:
    """Creates card objects by kind and assembles the standard deck."""
    
    @staticmethod
    def create(kind: CardKind, palace: str, value: int = MIN_CARD_VALUE) -> Card:
        """Create a card of the given kind."""
        if kind is CardKind.NUMBER:
            return NumberCard(palace=palace, value=value)
        elif kind is CardKind.GUIDE:
            return GuideCard(palace=palace)
        elif kind is CardKind.MONSTER:
            return MonsterCard(palace=palace)
        else:
            raise ValueError(f"Unknown card kind: {kind}")
    
    @staticmethod
    def palace_cards(palace: str) -> List[Card]:
        """All cards belonging to one palace in the standard set."""
        cards: List[Card] = []
        for value in range(MIN_CARD_VALUE, MAX_CARD_VALUE + 1):
            for _ in range(NUMBER_CARD_COPIES):
                cards.append(NumberCard(palace=palace, value=value))
        cards.extend(GuideCard(palace=palace) for _ in range(GUIDE_CARDS_PER_PALACE))
        cards.extend(MonsterCard(palace=palace) for _ in range(MONSTER_CARDS_PER_PALACE))
        return cards
    
    @staticmethod
    def standard_cards(palaces: Iterable[str]) -> List[Card]:
        """The full, unshuffled standard card set for the given palaces."""
        cards: List[Card] = []
        for palace in palaces:
            cards.extend(CardFactory.palace_cards(palace))
        return cards
