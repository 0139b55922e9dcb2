"""Card models for Knossos Sim."""

from .base_card import Card, CardKind
from .number_card import NumberCard
from .guide_card import GuideCard
from .monster_card import MonsterCard
from .card_factory import CardFactory

__all__ = [
    "Card",
    "CardKind",
    "NumberCard",
    "GuideCard",
    "MonsterCard",
    "CardFactory",
]
