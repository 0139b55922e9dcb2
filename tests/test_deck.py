"""Tests for deck functionality."""

import random

import pytest
from knossos_sim.errors import EmptyDeckError, EmptyResourceError, GameRuleError, InvalidArgumentError
from knossos_sim.models.cards import NumberCard
from knossos_sim.models.game import Deck

from tests.helpers import filler_cards


def test_deck_creation():
    """Test basic deck creation."""
    cards = filler_cards(5)
    deck = Deck(cards)

    assert deck.remaining_cards == 5
    assert len(deck) == 5
    assert deck.discard_count == 0
    assert deck.top_discard() is None


def test_empty_deck_creation():
    deck = Deck()

    assert deck.remaining_cards == 0


def test_draw_takes_from_the_top():
    """Test the top of the draw pile is the end of the list."""
    cards = filler_cards(3)
    deck = Deck(cards)

    assert deck.draw() is cards[2]
    assert deck.draw() is cards[1]
    assert deck.remaining_cards == 1


def test_draw_exactly_n_cards():
    """Test N cards give N draws and the next draw raises."""
    deck = Deck(filler_cards(4))

    for _ in range(4):
        deck.draw()

    with pytest.raises(EmptyDeckError):
        deck.draw()


def test_empty_deck_error_hierarchy():
    """Test EmptyDeckError is catchable as a resource and rule error."""
    assert issubclass(EmptyDeckError, EmptyResourceError)
    assert issubclass(EmptyDeckError, GameRuleError)


def test_discard_pile_is_lifo():
    deck = Deck()
    first = NumberCard(palace="Knossos", value=3)
    second = NumberCard(palace="Knossos", value=7)

    deck.discard(first)
    deck.discard(second)

    assert deck.discard_count == 2
    assert deck.top_discard() is second


def test_discard_none_rejected():
    with pytest.raises(InvalidArgumentError):
        Deck().discard(None)


def test_reshuffle_restores_discard_count():
    """Test reshuffling moves exactly the discarded cards back."""
    deck = Deck(filler_cards(6), rng=random.Random(3))
    for _ in range(6):
        deck.discard(deck.draw())

    moved = deck.reshuffle_discards()

    assert moved == 6
    assert deck.remaining_cards == 6
    assert deck.discard_count == 0


def test_shuffle_is_reproducible_with_seed():
    """Test the same seed gives the same order."""
    cards = filler_cards(20)
    deck_a = Deck(cards, rng=random.Random(42))
    deck_b = Deck(cards, rng=random.Random(42))

    deck_a.shuffle()
    deck_b.shuffle()

    assert [id(c) for c in deck_a.draw_pile] == [id(c) for c in deck_b.draw_pile]
    assert sorted(id(c) for c in deck_a.draw_pile) == sorted(id(c) for c in cards)


def test_generate_regular_findings():
    """Test the deck hands out the regular catalog for board setup."""
    findings = Deck().generate_regular_findings()

    assert len(findings) == 16
