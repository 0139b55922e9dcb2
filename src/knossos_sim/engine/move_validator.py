"""Move validation for card plays."""

from typing import List, Optional, Tuple

from ..models.board.board import Board
from ..models.cards.base_card import Card
from ..models.cards.number_card import NumberCard
from ..models.game.pawn import Pawn
from ..models.game.player import Player
from ..errors import InvalidArgumentError, InvalidStateError


class MoveValidator:
    """Checks whether a card may be played with a pawn on its current path."""

    def __init__(self, board: Board):
        self.board = board

    def valid_move(self, pawn: Optional[Pawn], card: Optional[Card]) -> bool:
        """True if `card` may follow the last card played on the pawn's path."""
        if pawn is None or card is None:
            raise InvalidArgumentError("Pawn and card cannot be None")
        if pawn.path is None:
            raise InvalidStateError(f"{pawn.name} is not on a path")

        path_index = self.board.get_path_index(pawn.path)
        previous_card = self.board.get_last_played_card(path_index)
        return card.is_playable(previous_card)

    def rejection_reason(self, card: Card, path_index: int) -> str:
        """Human-readable explanation of why `card` is illegal on a path."""
        previous_card = self.board.get_last_played_card(path_index)
        palace = self.board.path_at(path_index).palace_name
        if isinstance(card, NumberCard) and isinstance(previous_card, NumberCard):
            return (
                f"{card} cannot follow {previous_card} on {palace}: "
                f"values must not decrease"
            )
        if isinstance(card, NumberCard) and previous_card is not None:
            return f"{card} cannot follow {previous_card} on {palace}: only a number card may precede it"
        return f"{card} cannot be played on {palace}"

    def legal_plays(self, player: Player) -> List[Tuple[int, int]]:
        """All (card_index, path_index) pairs the player could play right now.

        Only paths where the player has a pawn that has not yet reached the
        end are considered.
        """
        plays: List[Tuple[int, int]] = []
        for path_index, path in enumerate(self.board.paths):
            if not player.has_available_pawn(path):
                continue
            previous_card = self.board.get_last_played_card(path_index)
            for card_index, card in enumerate(player.hand):
                if card.is_playable(previous_card):
                    plays.append((card_index, path_index))
        return plays

    def has_legal_play(self, player: Player) -> bool:
        return bool(self.legal_plays(player))
