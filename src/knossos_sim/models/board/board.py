"""Board model: paths, the shared deck and per-path last played cards."""

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .path import Path
from .position import FindingPosition
from ..cards.base_card import Card
from ..findings.catalog import create_rare_findings
from ..findings.finding import Finding, RareFinding
from ..game.deck import Deck
from ...constants import RARE_FINDING_OFFSETS
from ...errors import InvalidArgumentError, InvalidStateError
from ...utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class Board:
    """Aggregates the paths and the deck, and owns one-time setup."""

    def __init__(self, paths: Sequence[Path], deck: Deck,
                 rare_findings: Optional[Dict[str, RareFinding]] = None,
                 rng: Optional[random.Random] = None):
        if not paths:
            raise InvalidArgumentError("Board needs at least one path")
        if deck is None:
            raise InvalidArgumentError("Deck cannot be None")
        self._paths: List[Path] = list(paths)
        self._deck = deck
        if rare_findings is None:
            rare_findings = create_rare_findings(path.palace_name for path in self._paths)
        self._rare_findings = dict(rare_findings)
        self._rng = rng if rng is not None else random.Random()
        self._last_played_cards: List[Optional[Card]] = [None] * len(self._paths)
        self._initialized = False

    @property
    def paths(self) -> List[Path]:
        return self._paths

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def rare_findings(self) -> Dict[str, RareFinding]:
        return self._rare_findings

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize_board(self) -> None:
        """Shuffle the deck and distribute findings. Runs once per game."""
        if self._initialized:
            raise InvalidStateError("Board has already been initialized")
        self._deck.shuffle()
        self.add_findings_to_paths()
        self._initialized = True
        logger.info(
            f"Board ready: {len(self._paths)} paths, {len(self.placed_findings())} findings, "
            f"{self._deck.remaining_cards} cards to draw"
        )

    def add_findings_to_paths(self) -> None:
        """Place each palace's rare finding, then the regular catalog."""
        self._place_rare_findings()
        self._place_regular_findings(self._deck.generate_regular_findings())

    def _place_rare_findings(self) -> None:
        for path in self._paths:
            rare_finding = self._rare_findings.get(path.palace_name)
            if rare_finding is None:
                logger.warning(f"No rare finding defined for {path.palace_name}")
                continue

            offset = self._rng.choice(RARE_FINDING_OFFSETS)
            position = path.positions[offset] if offset < path.length else None
            if len(path.empty_slot_indices()) < 2:
                logger.warning(
                    f"{path.palace_name} has too few free finding slots; "
                    f"{rare_finding.name} is not placed"
                )
            elif isinstance(position, FindingPosition) and position.is_empty:
                position.set_finding(rare_finding)
                logger.debug(f"Placed {rare_finding.name} on {path.palace_name} at {offset}")
            else:
                # The chosen offset cannot hold it; the palace goes without its rare finding.
                logger.warning(
                    f"Offset {offset} on {path.palace_name} is not a free finding slot; "
                    f"{rare_finding.name} is not placed"
                )

    def _place_regular_findings(self, findings: Sequence[Finding]) -> None:
        """Sample empty slots without replacement.

        A path's last empty slot is never used, so setup alone cannot leave
        a path fully stocked (and therefore completed).
        """
        for finding in findings:
            candidates = self._open_slots()
            if not candidates:
                raise InvalidStateError(
                    f"No free finding slot left for {finding.name}; board is too small"
                )
            path_index, slot_index = self._rng.choice(candidates)
            slot = self._paths[path_index].positions[slot_index]
            slot.set_finding(finding)
            logger.debug(
                f"Placed {finding.name} on {self._paths[path_index].palace_name} at {slot_index}"
            )

    def _open_slots(self) -> List[Tuple[int, int]]:
        slots: List[Tuple[int, int]] = []
        for path_index, path in enumerate(self._paths):
            empty = path.empty_slot_indices()
            if len(empty) > 1:
                slots.extend((path_index, slot_index) for slot_index in empty)
        return slots

    def placed_findings(self) -> List[Finding]:
        """Every finding currently sitting on the board."""
        return [
            slot.finding
            for path in self._paths
            for slot in path.finding_slots()
            if slot.finding is not None
        ]

    def get_path(self, palace: str) -> Optional[Path]:
        """Look a path up by palace name, ignoring case."""
        if not palace:
            return None
        for path in self._paths:
            if path.palace_name.lower() == palace.lower():
                return path
        return None

    def path_at(self, path_index: int) -> Path:
        self._check_path_index(path_index)
        return self._paths[path_index]

    def get_path_index(self, path: Path) -> int:
        for i, candidate in enumerate(self._paths):
            if candidate is path:
                return i
        raise InvalidArgumentError("Path not found on board")

    def get_last_played_card(self, path_index: int) -> Optional[Card]:
        self._check_path_index(path_index)
        return self._last_played_cards[path_index]

    def set_last_played_card(self, path_index: int, card: Card) -> None:
        self._check_path_index(path_index)
        self._last_played_cards[path_index] = card

    def all_paths_completed(self) -> bool:
        return all(path.is_completed for path in self._paths)

    def _check_path_index(self, path_index: int) -> None:
        if path_index < 0 or path_index >= len(self._paths):
            raise InvalidArgumentError(
                f"Invalid path index {path_index}; board has {len(self._paths)} paths"
            )

    def __str__(self) -> str:
        return f"Board ({len(self._paths)} paths, {self._deck})"
