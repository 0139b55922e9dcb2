"""Rule constants shared across the engine."""

from typing import Tuple

# Board layout
PALACES: Tuple[str, ...] = ("Knossos", "Malia", "Phaistos", "Zakros")
STANDARD_PATH_SCORES: Tuple[int, ...] = (-20, -15, -10, 5, 10, 15, 30, 35, 40, 50)
STANDARD_FINDING_SLOTS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9)
RARE_FINDING_OFFSETS: Tuple[int, ...] = (2, 4, 6, 8, 9)

# Findings
RARE_FINDING_VALUE = 25
RARE_FINDING_NAMES = {
    "Knossos": "Ring of Minos",
    "Malia": "Malia Bee Pendant",
    "Phaistos": "Phaistos Disc",
    "Zakros": "Zakros Rhyton",
}
STATUE_COUNT = 10
STATUE_VALUE = 10
FRESCO_VALUES: Tuple[int, ...] = (20, 20, 15, 15, 15, 20)

# Cards
MIN_CARD_VALUE = 1
MAX_CARD_VALUE = 10
NUMBER_CARD_COPIES = 2
GUIDE_CARDS_PER_PALACE = 3
MONSTER_CARDS_PER_PALACE = 2
GUIDE_STEPS = 2
MONSTER_DAMAGE = 2

# Pawns
CHECKPOINT = 7
HERO_DESTROY_LIMIT = 3
SCOUTS_PER_PLAYER = 3
HEROES_PER_PLAYER = 1

# Turn flow
STARTING_HAND_SIZE = 8
