"""Game configuration, overridable from the environment."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import PALACES, STARTING_HAND_SIZE
from .errors import InvalidArgumentError
from .utils.logging_config import LOG_LEVELS


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game.
    
    `seed` makes board setup, shuffles and the starting player reproducible.
    """
    hand_size: int = STARTING_HAND_SIZE
    seed: Optional[int] = None
    palaces: Tuple[str, ...] = PALACES
    log_level: str = "INFO"
    
    def __post_init__(self) -> None:
        if self.hand_size < 0:
            raise InvalidArgumentError(f"Hand size cannot be negative: {self.hand_size}")
        if not self.palaces:
            raise InvalidArgumentError("At least one palace is required")
        if len(set(p.lower() for p in self.palaces)) != len(self.palaces):
            raise InvalidArgumentError(f"Palace names must be unique: {self.palaces}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise InvalidArgumentError(f"Unknown log level: {self.log_level}")
    
    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config from KNOSSOS_* environment variables."""
        hand_size = os.getenv('KNOSSOS_HAND_SIZE')
        seed = os.getenv('KNOSSOS_SEED')
        try:
            return cls(
                hand_size=int(hand_size) if hand_size else STARTING_HAND_SIZE,
                seed=int(seed) if seed else None,
                log_level=os.getenv('KNOSSOS_LOG_LEVEL', 'INFO'),
            )
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid KNOSSOS_* setting: {e}") from e
