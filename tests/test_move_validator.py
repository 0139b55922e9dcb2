"""Tests for move validation."""

import pytest
from knossos_sim.engine.move_validator import MoveValidator
from knossos_sim.errors import InvalidArgumentError, InvalidStateError
from knossos_sim.models.cards import GuideCard, MonsterCard, NumberCard
from knossos_sim.models.game import Scout

from tests.helpers import create_test_board, create_test_player


@pytest.fixture
def board():
    return create_test_board()


@pytest.fixture
def validator(board):
    return MoveValidator(board)


def place_pawn(board, path_index=0):
    pawn = Scout()
    pawn.assign_path(board.path_at(path_index))
    return pawn


def test_any_card_on_untouched_path(board, validator):
    pawn = place_pawn(board)

    assert validator.valid_move(pawn, NumberCard(palace="Knossos", value=5))
    assert validator.valid_move(pawn, GuideCard(palace="Knossos"))
    assert validator.valid_move(pawn, MonsterCard(palace="Knossos"))


def test_number_after_number(board, validator):
    """Test ranks on a path must not decrease."""
    pawn = place_pawn(board)
    board.set_last_played_card(0, NumberCard(palace="Knossos", value=5))

    assert not validator.valid_move(pawn, NumberCard(palace="Knossos", value=3))
    assert validator.valid_move(pawn, NumberCard(palace="Knossos", value=5))
    assert validator.valid_move(pawn, NumberCard(palace="Knossos", value=8))


def test_last_played_card_is_per_path(board, validator):
    board.set_last_played_card(0, NumberCard(palace="Knossos", value=9))
    pawn = place_pawn(board, 1)

    assert validator.valid_move(pawn, NumberCard(palace="Malia", value=2))


def test_number_after_special_card(board, validator):
    pawn = place_pawn(board)
    board.set_last_played_card(0, GuideCard(palace="Knossos"))

    assert not validator.valid_move(pawn, NumberCard(palace="Knossos", value=10))
    assert validator.valid_move(pawn, MonsterCard(palace="Knossos"))


def test_invalid_inputs(board, validator):
    with pytest.raises(InvalidArgumentError):
        validator.valid_move(None, GuideCard(palace="Knossos"))
    with pytest.raises(InvalidArgumentError):
        validator.valid_move(place_pawn(board), None)
    with pytest.raises(InvalidStateError, match="not on a path"):
        validator.valid_move(Scout(), GuideCard(palace="Knossos"))


def test_rejection_reason(board, validator):
    board.set_last_played_card(0, NumberCard(palace="Knossos", value=5))

    reason = validator.rejection_reason(NumberCard(palace="Knossos", value=3), 0)

    assert "Knossos 3 cannot follow Knossos 5" in reason
    assert "must not decrease" in reason


class TestLegalPlays:
    """Tests for listing the plays available to a player."""

    def test_only_paths_with_a_pawn(self, board, validator):
        hand = [NumberCard(palace="Knossos", value=2), GuideCard(palace="Malia")]
        player = create_test_player("Ariadne", hand)
        player.assign_pawn(player.pawns[0], board.path_at(1))

        assert validator.legal_plays(player) == [(0, 1), (1, 1)]
        assert validator.has_legal_play(player)

    def test_respects_last_played_card(self, board, validator):
        hand = [NumberCard(palace="Knossos", value=2), NumberCard(palace="Knossos", value=7)]
        player = create_test_player("Ariadne", hand)
        player.assign_pawn(player.pawns[0], board.path_at(0))
        board.set_last_played_card(0, NumberCard(palace="Knossos", value=6))

        assert validator.legal_plays(player) == [(1, 0)]

    def test_no_pawn_no_plays(self, validator):
        player = create_test_player("Ariadne", [GuideCard(palace="Knossos")])

        assert validator.legal_plays(player) == []
        assert not validator.has_legal_play(player)
