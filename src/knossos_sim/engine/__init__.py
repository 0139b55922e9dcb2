"""Engine package for game rules and turn flow."""

from .move_validator import MoveValidator
from .card_resolution import AttackOutcome, CardResolution, resolve_card, resolve_attack
from .turn_controller import TurnController, TurnPhase, GameOutcome, ScoreCheck
from .action_result import TurnResult, TurnResultType
from .game_setup import create_game

__all__ = [
    'MoveValidator',
    'AttackOutcome',
    'CardResolution',
    'resolve_card',
    'resolve_attack',
    'TurnController',
    'TurnPhase',
    'GameOutcome',
    'ScoreCheck',
    'TurnResult',
    'TurnResultType',
    'create_game',
]
