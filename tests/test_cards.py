"""Tests for card models and the card factory."""

import pytest
from knossos_sim.errors import InvalidArgumentError
from knossos_sim.models.cards import (
    Card,
    CardFactory,
    CardKind,
    GuideCard,
    MonsterCard,
    NumberCard,
)


class TestNumberCard:
    """Tests for number cards."""

    def test_value_bounds(self):
        assert NumberCard(palace="Knossos", value=1).value == 1
        assert NumberCard(palace="Knossos", value=10).value == 10

        with pytest.raises(InvalidArgumentError, match="between 1 and 10"):
            NumberCard(palace="Knossos", value=0)

        with pytest.raises(InvalidArgumentError, match="between 1 and 10"):
            NumberCard(palace="Knossos", value=11)

    def test_palace_required(self):
        with pytest.raises(InvalidArgumentError, match="palace cannot be empty"):
            NumberCard(palace="", value=4)

    def test_playable_on_untouched_path(self):
        assert NumberCard(palace="Knossos", value=1).is_playable(None)
        assert NumberCard(palace="Knossos", value=10).is_playable(None)

    @pytest.mark.parametrize("value,previous,expected", [
        (3, 5, False),
        (5, 5, True),
        (8, 5, True),
        (1, 10, False),
    ])
    def test_values_must_not_decrease(self, value, previous, expected):
        card = NumberCard(palace="Knossos", value=value)
        previous_card = NumberCard(palace="Knossos", value=previous)

        assert card.is_playable(previous_card) is expected

    def test_not_playable_after_guide_or_monster(self):
        card = NumberCard(palace="Knossos", value=10)

        assert not card.is_playable(GuideCard(palace="Knossos"))
        assert not card.is_playable(MonsterCard(palace="Knossos"))

    def test_string_form(self):
        assert str(NumberCard(palace="Knossos", value=5)) == "Knossos 5"


class TestSpecialCards:
    """Tests for guide and monster cards."""

    @pytest.mark.parametrize("previous", [
        None,
        NumberCard(palace="Malia", value=9),
        GuideCard(palace="Malia"),
        MonsterCard(palace="Malia"),
    ])
    def test_always_playable(self, previous):
        assert GuideCard(palace="Malia").is_playable(previous)
        assert MonsterCard(palace="Malia").is_playable(previous)

    def test_kinds_and_strengths(self):
        guide = GuideCard(palace="Zakros")
        monster = MonsterCard(palace="Zakros")

        assert guide.kind == CardKind.GUIDE
        assert guide.steps == 2
        assert monster.kind == CardKind.MONSTER
        assert monster.damage == 2
        assert str(guide) == "Zakros Ariadne (+2)"
        assert str(monster) == "Zakros Minotaur"

    def test_card_type_name(self):
        assert NumberCard(palace="Zakros", value=2).card_type == "Number"
        assert GuideCard(palace="Zakros").card_type == "Guide"


def test_base_card_is_abstract():
    """Test only concrete card kinds can be built."""
    with pytest.raises(TypeError):
        Card(palace="Knossos")


def test_cards_compare_by_identity():
    """Test two copies of the same card are distinct."""
    a = NumberCard(palace="Knossos", value=5)
    b = NumberCard(palace="Knossos", value=5)

    assert a != b
    assert [a].count(b) == 0


class TestCardFactory:
    """Tests for the card factory."""

    def test_create_by_kind(self):
        assert isinstance(CardFactory.create(CardKind.NUMBER, "Malia", 7), NumberCard)
        assert CardFactory.create(CardKind.NUMBER, "Malia", 7).value == 7
        assert isinstance(CardFactory.create(CardKind.GUIDE, "Malia"), GuideCard)
        assert isinstance(CardFactory.create(CardKind.MONSTER, "Malia"), MonsterCard)

    def test_palace_cards(self):
        """Test each palace has two of every number, three guides and two monsters."""
        cards = CardFactory.palace_cards("Phaistos")
        numbers = [c for c in cards if isinstance(c, NumberCard)]

        assert len(cards) == 25
        assert len(numbers) == 20
        assert sorted(c.value for c in numbers) == sorted(list(range(1, 11)) * 2)
        assert sum(isinstance(c, GuideCard) for c in cards) == 3
        assert sum(isinstance(c, MonsterCard) for c in cards) == 2
        assert all(c.palace == "Phaistos" for c in cards)

    def test_standard_cards(self):
        cards = CardFactory.standard_cards(["Knossos", "Malia", "Phaistos", "Zakros"])

        assert len(cards) == 100
        assert {c.palace for c in cards} == {"Knossos", "Malia", "Phaistos", "Zakros"}
