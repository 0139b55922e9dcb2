"""Convenience wiring of a complete, ready-to-play game."""

import random
from typing import Optional, Tuple

from ..config import GameConfig
from ..models.board.board_factory import BoardFactory
from ..models.game.player_factory import PlayerFactory
from ..utils.logging_config import setup_logging
from .turn_controller import TurnController


def create_game(config: Optional[GameConfig] = None,
                player_names: Tuple[str, str] = ("Player 1", "Player 2"),
                start: bool = True) -> TurnController:
    """Apply the log level, build the standard board and players, set up and deal.
    
    Args:
        config: Game settings (defaults to `GameConfig()`)
        player_names: Names for player1 and player2
        start: Also pick the starting player
    
    Returns:
        A controller ready for the first turn (or for `random_start` when
        `start` is False)
    """
    config = config or GameConfig()
    setup_logging(config.log_level)
    rng = random.Random(config.seed)
    board = BoardFactory.create_standard_board(config.palaces, rng=rng)
    player1 = PlayerFactory.create_standard_player(player_names[0])
    player2 = PlayerFactory.create_standard_player(player_names[1])
    
    controller = TurnController(board, player1, player2, rng=rng)
    controller.setup_board()
    controller.deal_hands(config.hand_size)
    if start:
        controller.random_start()
    return controller
