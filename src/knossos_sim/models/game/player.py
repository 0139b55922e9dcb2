"""Player model for Knossos simulation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..cards.base_card import Card
from ..findings.finding import Finding
from .deck import Deck
from .pawn import Pawn, PawnKind
from ...errors import CardNotInHandError, InvalidArgumentError, InvalidStateError

if TYPE_CHECKING:
    from ..board.board import Board
    from ..board.path import Path
    from ...engine.card_resolution import CardResolution


@dataclass(eq=False)
class Player:
    """A player: hand of cards, owned pawns, score and collected findings."""
    name: str
    pawns: List[Pawn] = field(default_factory=list)
    hand: List[Card] = field(default_factory=list)
    score: int = 0
    findings: List[Finding] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate player data after creation."""
        if not self.name:
            raise InvalidArgumentError("Player name cannot be empty")
        if self.score < 0:
            raise InvalidArgumentError(f"Player score cannot be negative: {self.score}")

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def card_at(self, index: int) -> Card:
        """Get the card at `index` in hand."""
        if index < 0 or index >= len(self.hand):
            raise InvalidArgumentError(
                f"Invalid card index {index}; {self.name} holds {len(self.hand)} cards"
            )
        return self.hand[index]

    def has_card(self, card: Card) -> bool:
        return any(c is card for c in self.hand)

    def remove_from_hand(self, card: Card) -> None:
        """Take a specific card out of the hand."""
        for i, held in enumerate(self.hand):
            if held is card:
                del self.hand[i]
                return
        raise CardNotInHandError(f"{card} is not in {self.name}'s hand")

    def draw_card(self, deck: Deck) -> Card:
        """Draw one card from the deck into the hand."""
        if deck is None:
            raise InvalidArgumentError("Deck cannot be None")
        card = deck.draw()
        self.hand.append(card)
        return card

    def pawn_on_path(self, path: "Path") -> Optional[Pawn]:
        """The player's pawn assigned to `path`, if any."""
        for pawn in self.pawns:
            if pawn.path is path:
                return pawn
        return None

    def has_available_pawn(self, path: "Path") -> bool:
        """True if the player has a pawn on `path` that has not reached its end."""
        if path is None:
            raise InvalidArgumentError("Path cannot be None")
        return any(
            pawn.path is path and pawn.position < path.length
            for pawn in self.pawns
        )

    def unassigned_pawns(self, kind: Optional[PawnKind] = None) -> List[Pawn]:
        """Pawns not yet on any path, optionally filtered by kind."""
        return [
            pawn for pawn in self.pawns
            if pawn.path is None and (kind is None or pawn.kind is kind)
        ]

    def assign_pawn(self, pawn: Pawn, path: "Path") -> None:
        """Put one of the player's idle pawns onto a path."""
        if pawn is None:
            raise InvalidArgumentError("Pawn cannot be None")
        if path is None:
            raise InvalidArgumentError("Path cannot be None")
        if not any(p is pawn for p in self.pawns):
            raise InvalidArgumentError(f"{pawn} does not belong to {self.name}")
        if pawn.path is not None:
            raise InvalidStateError(f"{pawn} is already on a path")
        if self.pawn_on_path(path) is not None:
            raise InvalidStateError(f"{self.name} already has a pawn on {path.palace_name}")
        pawn.assign_path(path)

    def add_score(self, points: int) -> None:
        """Add points; a negative amount subtracts but never below zero."""
        self.score = max(0, self.score + points)

    def collect_finding(self, finding: Finding) -> None:
        """Keep a finding and score its value."""
        if finding is None:
            raise InvalidArgumentError("Finding cannot be None")
        self.findings.append(finding)
        self.add_score(finding.value)

    def play_card(self, card: Card, path_index: int, board: "Board",
                  opponent: Optional["Player"] = None) -> "CardResolution":
        """Play a card from hand on a path.

        Delegates to the engine's single resolution function, so rules are
        identical whether a card is played here or through the controller.
        Without an opponent a monster card finds no target.
        """
        from ...engine.card_resolution import resolve_card
        return resolve_card(self, card, path_index, board, opponent)

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the player's current state."""
        return {
            "name": self.name,
            "score": self.score,
            "hand_size": self.hand_size,
            "findings": len(self.findings),
            "pawns_on_board": sum(1 for pawn in self.pawns if pawn.path is not None),
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.score} points, {self.hand_size} cards in hand)"

    def __repr__(self) -> str:
        return self.__str__()
