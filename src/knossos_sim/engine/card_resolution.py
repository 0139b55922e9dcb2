"""Card resolution: the one place where card effects are applied.

Both the turn controller and `Player.play_card` go through `resolve_card`.
Effects are looked up by `CardKind`; the table is checked at import so a new
card kind cannot be added without an effect.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ..constants import CHECKPOINT
from ..errors import (
    CardNotInHandError,
    IllegalMoveError,
    InvalidArgumentError,
    InvalidStateError,
)
from ..models.board.board import Board
from ..models.board.path import Path
from ..models.cards.base_card import Card, CardKind
from ..models.cards.guide_card import GuideCard
from ..models.cards.monster_card import MonsterCard
from ..models.cards.number_card import NumberCard
from ..models.game.pawn import Pawn
from ..models.game.player import Player
from ..utils.logging_config import get_game_logger
from .move_validator import MoveValidator

logger = get_game_logger(__name__)


class AttackOutcome(Enum):
    """What a monster attack did. Only HIT changes the board."""
    HIT = "hit"
    NO_TARGET = "no_target"
    AT_START = "at_start"
    PAST_CHECKPOINT = "past_checkpoint"
    BLOCKED_BY_HERO = "blocked_by_hero"

    @property
    def description(self) -> str:
        return _ATTACK_DESCRIPTIONS[self]


_ATTACK_DESCRIPTIONS = {
    AttackOutcome.HIT: "Attack successful, the pawn is pushed back",
    AttackOutcome.NO_TARGET: "There is no opposing pawn on the path",
    AttackOutcome.AT_START: "Cannot attack, the opponent is at the start",
    AttackOutcome.PAST_CHECKPOINT: "Cannot attack, the opponent is past the checkpoint",
    AttackOutcome.BLOCKED_BY_HERO: "Theseus blocks the attack",
}


@dataclass
class CardResolution:
    """Everything a resolved card did."""
    player: Player
    card: Card
    path_index: int
    pawn: Pawn
    steps_moved: int = 0
    attack_outcome: Optional[AttackOutcome] = None
    target: Optional[Pawn] = None

    @property
    def is_attack(self) -> bool:
        return self.attack_outcome is not None

    def describe(self) -> str:
        if self.attack_outcome is not None:
            return f"{self.player.name} played {self.card}: {self.attack_outcome.description}"
        return f"{self.player.name} played {self.card}: {self.pawn.name} moves to {self.pawn.position}"


def resolve_attack(monster: MonsterCard, opponent: Optional[Player],
                   path: Path) -> Tuple[AttackOutcome, Optional[Pawn]]:
    """Attack the opponent's pawn on `path`.

    Pawns at the start, at or past the checkpoint, and heroes are untouched.
    Anyone else is pushed back by the monster's damage, with no floor.
    """
    target = opponent.pawn_on_path(path) if opponent is not None else None
    if target is None:
        return AttackOutcome.NO_TARGET, None
    if target.position >= CHECKPOINT:
        return AttackOutcome.PAST_CHECKPOINT, target
    if target.position == 0:
        return AttackOutcome.AT_START, target
    if target.is_immune_to_attack:
        return AttackOutcome.BLOCKED_BY_HERO, target

    target.move(-monster.damage)
    return AttackOutcome.HIT, target


def _apply_number(resolution: CardResolution, path: Path, opponent: Optional[Player]) -> None:
    card: NumberCard = resolution.card  # type: ignore[assignment]
    resolution.pawn.move(card.value)
    resolution.steps_moved = card.value


def _apply_guide(resolution: CardResolution, path: Path, opponent: Optional[Player]) -> None:
    card: GuideCard = resolution.card  # type: ignore[assignment]
    resolution.pawn.move(card.steps)
    resolution.steps_moved = card.steps


def _apply_monster(resolution: CardResolution, path: Path, opponent: Optional[Player]) -> None:
    card: MonsterCard = resolution.card  # type: ignore[assignment]
    outcome, target = resolve_attack(card, opponent, path)
    resolution.attack_outcome = outcome
    resolution.target = target


CARD_EFFECTS: Dict[CardKind, Callable[[CardResolution, Path, Optional[Player]], None]] = {
    CardKind.NUMBER: _apply_number,
    CardKind.GUIDE: _apply_guide,
    CardKind.MONSTER: _apply_monster,
}

_unhandled = set(CardKind) - set(CARD_EFFECTS)
if _unhandled:
    raise RuntimeError(f"No effect registered for card kinds: {sorted(k.value for k in _unhandled)}")


def resolve_card(player: Player, card: Card, path_index: int, board: Board,
                 opponent: Optional[Player] = None) -> CardResolution:
    """Validate and resolve one card play.

    Every check runs before anything is mutated, so a rejected play leaves
    hand, deck and board untouched.

    Args:
        player: The acting player
        card: A card currently in the player's hand
        path_index: Index of the target path on the board
        board: The board being played on
        opponent: The other player, target of monster attacks

    Returns:
        CardResolution describing the movement or attack that happened

    Raises:
        InvalidArgumentError: card is None or the path index is out of range
        CardNotInHandError: the player does not hold the card
        InvalidStateError: the player has no pawn on the path, or it has
            already reached the end
        IllegalMoveError: the card may not follow the path's last played card
    """
    if card is None:
        raise InvalidArgumentError("Card cannot be None")
    path = board.path_at(path_index)
    if not player.has_card(card):
        raise CardNotInHandError(f"{card} is not in {player.name}'s hand")
    pawn = player.pawn_on_path(path)
    if pawn is None:
        raise InvalidStateError(f"{player.name} has no pawn on the path to {path.palace_name}")
    if pawn.has_finished():
        raise InvalidStateError(f"{pawn.name} has already reached the end of the path to {path.palace_name}")

    validator = MoveValidator(board)
    if not validator.valid_move(pawn, card):
        raise IllegalMoveError(validator.rejection_reason(card, path_index))

    player.remove_from_hand(card)
    resolution = CardResolution(player=player, card=card, path_index=path_index, pawn=pawn)
    CARD_EFFECTS[card.kind](resolution, path, opponent)

    board.deck.discard(card)
    board.set_last_played_card(path_index, card)
    logger.debug(resolution.describe())
    return resolution
