"""Pawn models: scouts that open boxes and heroes that destroy them."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TYPE_CHECKING

from ...constants import HERO_DESTROY_LIMIT
from ...errors import InvalidArgumentError
from ..board.position import FindingPosition
from ..findings.finding import Finding, Fresco

if TYPE_CHECKING:
    from ..board.path import Path


class PawnKind(Enum):
    """Pawn variants. Rule code must handle every member."""
    SCOUT = "scout"
    HERO = "hero"


class Pawn(ABC):
    """Base class for pawns. Starts hidden at position 0 with no path."""
    
    @property
    @abstractmethod
    def kind(self) -> PawnKind:
        pass
    
    def __init__(self, name: str = ""):
        self.name = name or self.__class__.__name__
        self._hidden = True
        self._position = 0
        self._path: Optional["Path"] = None
    
    @property
    def is_hidden(self) -> bool:
        return self._hidden
    
    @property
    def position(self) -> int:
        return self._position
    
    @property
    def path(self) -> Optional["Path"]:
        return self._path
    
    @property
    def is_immune_to_attack(self) -> bool:
        return False
    
    def reveal(self) -> None:
        self._hidden = False
    
    def move(self, steps: int) -> None:
        """Shift the pawn by `steps`; negative values move it back. No clamping."""
        self._position += steps
        if self._hidden:
            self.reveal()
    
    def assign_path(self, path: "Path") -> None:
        """Put the pawn on a path."""
        if path is None:
            raise InvalidArgumentError("Path cannot be None")
        self._path = path
    
    def has_finished(self) -> bool:
        """True once the pawn has reached or passed the end of its path."""
        return self._path is not None and self._position >= self._path.length
    
    @abstractmethod
    def open_box(self, slot: Optional[FindingPosition]) -> Optional[Finding]:
        """Reveal and take the finding in `slot`. Returns None if not allowed."""
        pass
    
    @abstractmethod
    def destroy_box(self, slot: Optional[FindingPosition]) -> bool:
        """Destroy the finding in `slot`. Returns False if not allowed."""
        pass
    
    def __str__(self) -> str:
        where = self._path.palace_name if self._path is not None else "off board"
        return f"{self.name} @ {where}:{self._position}"
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._position}, hidden={self._hidden})"


class Scout(Pawn):
    """An archaeologist. Opens finding slots, never destroys them."""
    
    kind = PawnKind.SCOUT
    
    def __init__(self, name: str = "Archaeologist"):
        super().__init__(name)
    
    def open_box(self, slot: Optional[FindingPosition]) -> Optional[Finding]:
        if slot is None:
            raise InvalidArgumentError("Finding position cannot be None")
        finding = slot.take_finding()
        if isinstance(finding, Fresco):
            finding.photograph()
        return finding
    
    def destroy_box(self, slot: Optional[FindingPosition]) -> bool:
        if slot is None:
            raise InvalidArgumentError("Finding position cannot be None")
        return False


class Hero(Pawn):
    """Theseus. Destroys a limited number of finding slots; cannot be attacked."""
    
    kind = PawnKind.HERO
    
    def __init__(self, name: str = "Theseus", destroy_limit: int = HERO_DESTROY_LIMIT):
        super().__init__(name)
        self._remaining_destroys = destroy_limit
    
    @property
    def remaining_destroys(self) -> int:
        return self._remaining_destroys
    
    @property
    def is_immune_to_attack(self) -> bool:
        return True
    
    def open_box(self, slot: Optional[FindingPosition]) -> Optional[Finding]:
        if slot is None:
            raise InvalidArgumentError("Finding position cannot be None")
        return None
    
    def destroy_box(self, slot: Optional[FindingPosition]) -> bool:
        if slot is None:
            raise InvalidArgumentError("Finding position cannot be None")
        if self._remaining_destroys <= 0:
            return False
        self._remaining_destroys -= 1
        slot.clear()
        return True
