"""Turn controller: the game's state machine.

The controller owns whose turn it is and drives every rule-bearing action.
It does no I/O; a caller supplies hand and path indices and reads back
`TurnResult` objects and the message log.
"""

import random
import threading
from enum import Enum
from typing import Dict, List, Optional

from ..constants import STARTING_HAND_SIZE
from ..errors import EmptyDeckError, GameRuleError, InvalidArgumentError, InvalidStateError
from ..models.board.board import Board
from ..models.board.path import Path
from ..models.board.position import FindingPosition
from ..models.cards.base_card import Card
from ..models.game.pawn import Pawn, PawnKind
from ..models.game.player import Player
from ..utils.logging_config import get_game_logger
from .action_result import TurnResult, TurnResultType
from .card_resolution import CardResolution, resolve_card
from .game_messages import (
    AttackResolvedMessage,
    CardPlayedMessage,
    FindingMessage,
    GameMessage,
    GameOverMessage,
    MessageType,
    MoveRejectedMessage,
    TurnStartedMessage,
)
from .move_validator import MoveValidator

logger = get_game_logger(__name__)


class TurnPhase(Enum):
    """States of the turn state machine."""
    UNINITIALIZED = "uninitialized"
    PLAYER_ONE_TURN = "player_one_turn"
    PLAYER_TWO_TURN = "player_two_turn"
    GAME_OVER = "game_over"


class GameOutcome(Enum):
    """Final result of a finished game."""
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"


class ScoreCheck(Enum):
    """Which player, if any, has reached a score threshold."""
    PLAYER_ONE = 1
    PLAYER_TWO = 2
    DRAW = 0


class TurnController:
    """Orchestrates turns between two players on one board.

    Usage:
        controller = TurnController(board, player1, player2, rng=random.Random(7))
        controller.setup_board()
        controller.deal_hands()
        controller.random_start()
        controller.deploy_pawn(path_index=0)
        result = controller.turn(card_index=2, path_index=0)
    """

    def __init__(self, board: Board, player1: Player, player2: Player,
                 rng: Optional[random.Random] = None):
        if board is None or player1 is None or player2 is None:
            raise InvalidArgumentError("Board and both players are required")
        if player1 is player2:
            raise InvalidArgumentError("A game needs two distinct players")
        self.board = board
        self.player1 = player1
        self.player2 = player2
        self._rng = rng if rng is not None else random.Random()
        self._current_player: Optional[Player] = None
        self._game_over = False
        self._excavated_this_turn = False
        self._position_points: Optional[Dict[str, int]] = None
        self.turn_number = 0
        self.validator = MoveValidator(board)
        self.messages: List[GameMessage] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_player(self) -> Optional[Player]:
        return self._current_player

    @property
    def players(self) -> List[Player]:
        return [self.player1, self.player2]

    @property
    def phase(self) -> TurnPhase:
        if self._game_over:
            return TurnPhase.GAME_OVER
        if self._current_player is None:
            return TurnPhase.UNINITIALIZED
        if self._current_player is self.player1:
            return TurnPhase.PLAYER_ONE_TURN
        return TurnPhase.PLAYER_TWO_TURN

    def opponent_of(self, player: Player) -> Player:
        if player is self.player1:
            return self.player2
        if player is self.player2:
            return self.player1
        raise InvalidArgumentError(f"{player} is not part of this game")

    def drain_messages(self) -> List[GameMessage]:
        """Return and clear the pending message log."""
        pending = self.messages
        self.messages = []
        return pending

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def setup_board(self) -> None:
        """Shuffle the deck and distribute findings."""
        self.board.initialize_board()

    def deal_hands(self, hand_size: int = STARTING_HAND_SIZE) -> None:
        """Deal starting hands one card at a time, alternating players.

        Nothing is dealt unless the draw pile covers every hand.
        """
        if hand_size < 0:
            raise InvalidArgumentError(f"Hand size cannot be negative: {hand_size}")
        needed = hand_size * len(self.players)
        if self.board.deck.remaining_cards < needed:
            raise EmptyDeckError(
                f"Dealing {hand_size} cards each needs {needed} cards; "
                f"only {self.board.deck.remaining_cards} left to draw"
            )
        for _ in range(hand_size):
            for player in self.players:
                player.draw_card(self.board.deck)
        logger.debug(f"Dealt {hand_size} cards to each player")

    def random_start(self) -> Player:
        """Pick the starting player, each with probability 1/2. Runs once per game."""
        with self._lock:
            if self._current_player is not None or self._game_over:
                raise InvalidStateError("The starting player has already been chosen")
            self._current_player = self.player1 if self._rng.random() < 0.5 else self.player2
            self.turn_number = 1
            logger.info(f"{self._current_player.name} starts the game")
            self._announce_turn()
            return self._current_player

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def deploy_pawn(self, path_index: int, kind: PawnKind = PawnKind.SCOUT) -> TurnResult:
        """Put one of the current player's idle pawns on a path. Does not end the turn.

        The deployed pawn is in the result data under "pawn".
        """
        with self._lock:
            player = self._require_active_player()
            path = self.board.path_at(path_index)
            idle = player.unassigned_pawns(kind)
            if not idle:
                raise InvalidStateError(f"{player.name} has no idle {kind.value} pawn")
            pawn = idle[0]
            player.assign_pawn(pawn, path)
            self.messages.append(GameMessage(
                type=MessageType.PAWN_DEPLOYED,
                player=player,
                text=f"{player.name} sends {pawn.name} towards {path.palace_name}",
            ))
            logger.debug(f"{player.name} deployed {pawn.name} on {path.palace_name}")
            return TurnResult.success_result(
                "deploy_pawn", TurnResultType.PAWN_DEPLOYED,
                pawn=pawn, path_index=path_index,
            )

    def valid_move(self, pawn: Optional[Pawn], card: Optional[Card]) -> bool:
        """True if `card` may be played with `pawn` on the pawn's current path."""
        return self.validator.valid_move(pawn, card)

    def turn(self, card_index: int, path_index: int) -> TurnResult:
        """Play the card at `card_index` on the path at `path_index`.

        On success the card is resolved, a replacement card is drawn and the
        turn passes to the other player unless the game has ended. Rule
        violations raise before any state changes; the same player may retry.
        """
        with self._lock:
            player = self._require_active_player()
            card = player.card_at(card_index)
            resolution = resolve_card(
                player, card, path_index, self.board, self.opponent_of(player)
            )
            self._record_play(resolution)
            return self._finish_turn(
                player,
                "play_card",
                TurnResultType.CARD_PLAYED,
                card=card,
                path_index=path_index,
                steps_moved=resolution.steps_moved,
                attack_outcome=resolution.attack_outcome,
                pawn_position=resolution.pawn.position,
            )

    def attempt_turn(self, card_index: int, path_index: int) -> TurnResult:
        """Like `turn`, but rule violations come back as a failed result."""
        try:
            return self.turn(card_index, path_index)
        except GameRuleError as e:
            self.messages.append(MoveRejectedMessage(
                type=MessageType.MOVE_REJECTED,
                player=self._current_player,
                text=f"Cannot play this card: {e}",
                reason=str(e),
            ))
            logger.info(f"Move rejected: {e}")
            return TurnResult.failure_result("play_card", str(e))

    def pass_turn(self, card_index: int) -> TurnResult:
        """Discard a card instead of playing it, draw a replacement and end the turn."""
        with self._lock:
            player = self._require_active_player()
            card = player.card_at(card_index)
            player.remove_from_hand(card)
            self.board.deck.discard(card)
            self.messages.append(GameMessage(
                type=MessageType.CARD_DISCARDED,
                player=player,
                text=f"{player.name} discards {card}",
            ))
            return self._finish_turn(player, "discard_card", TurnResultType.CARD_DISCARDED, card=card)

    def excavate(self, path_index: int) -> TurnResult:
        """Interact with the finding slot under the current player's pawn.

        A scout opens the slot and collects its finding; a hero destroys it.
        Allowed once per turn and does not end the turn.
        """
        with self._lock:
            player = self._require_active_player()
            if self._excavated_this_turn:
                raise InvalidStateError(f"{player.name} has already excavated this turn")
            path = self.board.path_at(path_index)
            pawn = player.pawn_on_path(path)
            if pawn is None:
                raise InvalidStateError(f"{player.name} has no pawn on the path to {path.palace_name}")
            slot = path.get_position(pawn.position)
            if not isinstance(slot, FindingPosition):
                raise InvalidArgumentError(
                    f"Position {pawn.position} on {path.palace_name} has no finding slot"
                )

            if pawn.kind is PawnKind.HERO:
                if not pawn.destroy_box(slot):
                    raise InvalidStateError(f"{pawn.name} has no destroys left")
                self._excavated_this_turn = True
                self.messages.append(FindingMessage(
                    type=MessageType.BOX_DESTROYED,
                    player=player,
                    text=f"{pawn.name} smashes the box at {path.palace_name}:{pawn.position}",
                    palace=path.palace_name,
                ))
                return TurnResult.success_result(
                    "excavate", TurnResultType.BOX_DESTROYED,
                    path_index=path_index, position=pawn.position,
                )

            finding = pawn.open_box(slot)
            self._excavated_this_turn = True
            if finding is None:
                return TurnResult.success_result(
                    "excavate", TurnResultType.NOTHING_FOUND,
                    path_index=path_index, position=pawn.position,
                )
            player.collect_finding(finding)
            self.messages.append(FindingMessage(
                type=MessageType.FINDING_COLLECTED,
                player=player,
                text=f"{player.name} uncovers {finding}",
                finding=finding,
                palace=path.palace_name,
            ))
            logger.info(f"{player.name} collected {finding} on {path.palace_name}")
            return TurnResult.success_result(
                "excavate", TurnResultType.FINDING_COLLECTED,
                path_index=path_index, position=pawn.position, finding=finding,
            )

    def next_turn(self) -> Player:
        """Hand the turn to the other player."""
        with self._lock:
            if self._current_player is None:
                raise InvalidStateError("No player has been chosen to start")
            self._current_player = self.opponent_of(self._current_player)
            self._excavated_this_turn = False
            self.turn_number += 1
            self._announce_turn()
            return self._current_player

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------

    def is_game_over(self) -> bool:
        """Every path completed, or nothing left to draw."""
        return self.board.all_paths_completed() or self.board.deck.remaining_cards == 0

    def winner(self) -> GameOutcome:
        """Compare scores of a finished game."""
        if not self.is_game_over():
            raise InvalidStateError("The game is not over yet")
        if self.player1.score > self.player2.score:
            return GameOutcome.PLAYER_ONE_WINS
        if self.player2.score > self.player1.score:
            return GameOutcome.PLAYER_TWO_WINS
        return GameOutcome.DRAW

    def winning_player(self) -> Optional[Player]:
        """The winning player, or None for a draw."""
        outcome = self.winner()
        if outcome is GameOutcome.PLAYER_ONE_WINS:
            return self.player1
        if outcome is GameOutcome.PLAYER_TWO_WINS:
            return self.player2
        return None

    def count_score(self, threshold: int) -> ScoreCheck:
        """Which player has reached `threshold`; player1 is checked first."""
        if threshold < 0:
            raise InvalidArgumentError(f"Score threshold cannot be negative: {threshold}")
        if self.player1.score >= threshold:
            return ScoreCheck.PLAYER_ONE
        if self.player2.score >= threshold:
            return ScoreCheck.PLAYER_TWO
        return ScoreCheck.DRAW

    def settle_scores(self) -> Dict[str, int]:
        """Award each revealed pawn the score of the square it stands on.

        Pawns past the end score the last square. Points are added once;
        later calls return the same awards. A game that ends through a turn
        is settled before its winner is announced.

        Returns:
            Points awarded per player name.
        """
        with self._lock:
            if not self.is_game_over():
                raise InvalidStateError("Scores are settled only once the game is over")
            if self._position_points is None:
                self._position_points = self._award_position_points()
            return dict(self._position_points)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _award_position_points(self) -> Dict[str, int]:
        awarded: Dict[str, int] = {}
        for player in self.players:
            points = 0
            for pawn in player.pawns:
                if pawn.path is None or pawn.is_hidden:
                    continue
                index = min(max(pawn.position, 0), pawn.path.length - 1)
                points += pawn.path.positions[index].score
            player.add_score(points)
            awarded[player.name] = points
        logger.info(f"Position scores settled: {awarded}")
        return awarded

    def _require_active_player(self) -> Player:
        if self._game_over:
            raise InvalidStateError("The game is over")
        if self._current_player is None:
            raise InvalidStateError("No player has been chosen to start")
        return self._current_player

    def _record_play(self, resolution: CardResolution) -> None:
        player = resolution.player
        path = self.board.path_at(resolution.path_index)
        if resolution.attack_outcome is not None:
            target = resolution.target
            self.messages.append(AttackResolvedMessage(
                type=MessageType.ATTACK_RESOLVED,
                player=player,
                text=resolution.describe(),
                outcome=resolution.attack_outcome,
                target_position=target.position if target is not None else None,
            ))
        else:
            self.messages.append(CardPlayedMessage(
                type=MessageType.CARD_PLAYED,
                player=player,
                text=resolution.describe(),
                card=resolution.card,
                palace=path.palace_name,
                pawn_position=resolution.pawn.position,
            ))
        logger.info(resolution.describe())
        self._refresh_completion(path)

    def _refresh_completion(self, path: Path) -> None:
        """Mark `path` completed once every pawn on it has reached the end."""
        if path.is_completed:
            return
        pawns = [pawn for player in self.players for pawn in player.pawns if pawn.path is path]
        if pawns and all(pawn.position >= path.length for pawn in pawns):
            path.mark_completed()
            self.messages.append(GameMessage(
                type=MessageType.PATH_COMPLETED,
                player=self._current_player,
                text=f"The path to {path.palace_name} is completed",
            ))
            logger.info(f"Path to {path.palace_name} completed")

    def _draw_replacement(self, player: Player) -> Optional[Card]:
        """Draw one card, reshuffling discards when the draw pile is empty."""
        deck = self.board.deck
        try:
            return player.draw_card(deck)
        except EmptyDeckError:
            if deck.discard_count == 0:
                logger.info("Draw pile and discards are both empty; no card drawn")
                return None
            deck.reshuffle_discards()
            return player.draw_card(deck)

    def _finish_turn(self, player: Player, action: str, result_type: TurnResultType,
                     **data) -> TurnResult:
        drawn = self._draw_replacement(player)
        if self.is_game_over():
            self._end_game()
            return TurnResult.success_result(action, result_type, game_over=True, drawn=drawn, **data)
        self.next_turn()
        return TurnResult.success_result(action, result_type, drawn=drawn, **data)

    def _end_game(self) -> None:
        self._game_over = True
        self.settle_scores()
        outcome = self.winner()
        winner = self.winning_player()
        if winner is None:
            text = "It's a draw!"
        else:
            text = f"{winner.name} has won the game!"
        reason = "all paths completed" if self.board.all_paths_completed() else "the deck is empty"
        self.messages.append(GameOverMessage(
            type=MessageType.GAME_OVER,
            player=self._current_player,
            text=text,
            winner=winner,
            reason=reason,
        ))
        logger.info(f"Game over ({reason}): {outcome.value}")

    def _announce_turn(self) -> None:
        player = self._current_player
        self.messages.append(TurnStartedMessage(
            type=MessageType.TURN_STARTED,
            player=player,
            text=f"Turn: {player.name}",
            available_cards=list(player.hand),
        ))
