"""Message types consumed by whatever renders the game."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from ..models.cards.base_card import Card
from ..models.findings.finding import Finding
from ..models.game.player import Player

if TYPE_CHECKING:
    from .card_resolution import AttackOutcome


class MessageType(Enum):
    """Types of messages in the game message stream."""
    TURN_STARTED = "turn_started"
    PAWN_DEPLOYED = "pawn_deployed"
    CARD_PLAYED = "card_played"
    CARD_DISCARDED = "card_discarded"
    ATTACK_RESOLVED = "attack_resolved"
    FINDING_COLLECTED = "finding_collected"
    BOX_DESTROYED = "box_destroyed"
    PATH_COMPLETED = "path_completed"
    MOVE_REJECTED = "move_rejected"
    GAME_OVER = "game_over"


@dataclass
class GameMessage:
    """Base class for all game messages."""
    type: MessageType
    player: Optional[Player]
    text: str = ""


@dataclass
class TurnStartedMessage(GameMessage):
    """Whose turn it is and which cards they may choose from."""
    available_cards: List[Card] = field(default_factory=list)


@dataclass
class CardPlayedMessage(GameMessage):
    card: Optional[Card] = None
    palace: str = ""
    pawn_position: int = 0


@dataclass
class AttackResolvedMessage(GameMessage):
    """Result of a monster attack, including the no-effect outcomes."""
    outcome: Optional["AttackOutcome"] = None
    target_position: Optional[int] = None


@dataclass
class FindingMessage(GameMessage):
    finding: Optional[Finding] = None
    palace: str = ""


@dataclass
class MoveRejectedMessage(GameMessage):
    """An attempted action was refused; the same player acts again."""
    reason: str = ""


@dataclass
class GameOverMessage(GameMessage):
    """The game has ended. `winner` is None for a draw."""
    winner: Optional[Player] = None
    reason: str = ""
