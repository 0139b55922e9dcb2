"""Builders for boards, players and controllers used across the tests."""

import random
from typing import List, Optional, Sequence

from knossos_sim.constants import STANDARD_PATH_SCORES
from knossos_sim.engine.turn_controller import TurnController
from knossos_sim.models.board.board import Board
from knossos_sim.models.board.board_factory import BoardFactory
from knossos_sim.models.board.path import Path
from knossos_sim.models.cards.base_card import Card
from knossos_sim.models.cards.number_card import NumberCard
from knossos_sim.models.game.deck import Deck
from knossos_sim.models.game.pawn import Hero, Scout
from knossos_sim.models.game.player import Player

PALACE_NAMES = ("Knossos", "Malia", "Phaistos", "Zakros")


class FixedRandom:
    """Stand-in random source whose random() always returns `value`."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def create_test_path(palace: str = "Knossos", finding_slots: Sequence[int] = range(1, 10)) -> Path:
    """A 10-position path with the standard scores."""
    return BoardFactory.create_path(palace, STANDARD_PATH_SCORES, finding_slots)


def filler_cards(count: int, palace: str = "Malia") -> List[Card]:
    """Number cards to pad a draw pile."""
    return [NumberCard(palace=palace, value=(i % 10) + 1) for i in range(count)]


def create_test_board(num_paths: int = 2, cards: Optional[List[Card]] = None,
                      seed: int = 0) -> Board:
    """An uninitialized board with `num_paths` standard paths and the given draw pile."""
    rng = random.Random(seed)
    paths = [create_test_path(PALACE_NAMES[i]) for i in range(num_paths)]
    deck = Deck(cards if cards is not None else filler_cards(20), rng=rng)
    return Board(paths, deck, rng=rng)


def create_test_player(name: str, hand: Optional[List[Card]] = None) -> Player:
    """A player owning one scout and one hero."""
    return Player(name=name, pawns=[Scout(), Hero()], hand=list(hand or []))


def create_test_controller(hand1: Optional[List[Card]] = None,
                           hand2: Optional[List[Card]] = None,
                           deck_cards: Optional[List[Card]] = None,
                           num_paths: int = 2,
                           first: int = 1) -> TurnController:
    """A started controller where player `first` (1 or 2) moves first.

    Board setup is skipped so no findings are placed and the draw pile keeps
    the exact order given.
    """
    board = create_test_board(num_paths, deck_cards)
    player1 = create_test_player("Player 1", hand1)
    player2 = create_test_player("Player 2", hand2)
    rng = FixedRandom(0.0 if first == 1 else 0.9)
    controller = TurnController(board, player1, player2, rng=rng)
    controller.random_start()
    return controller
