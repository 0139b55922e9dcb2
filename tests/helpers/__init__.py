"""Test helper utilities for Knossos simulation tests."""

from .game_builders import (
    FixedRandom,
    PALACE_NAMES,
    create_test_path,
    filler_cards,
    create_test_board,
    create_test_player,
    create_test_controller,
)

__all__ = [
    'FixedRandom',
    'PALACE_NAMES',
    'create_test_path',
    'filler_cards',
    'create_test_board',
    'create_test_player',
    'create_test_controller',
]
