"""Board positions: plain squares and finding slots."""

from dataclasses import dataclass, field
from typing import Optional

from ..findings.finding import Finding
from ...errors import InvalidArgumentError, InvalidStateError


@dataclass(eq=False)
class Position:
    """A square on a path, worth `score` points to a pawn ending there."""
    score: int
    
    @property
    def is_finding_slot(self) -> bool:
        return False
    
    def __str__(self) -> str:
        return f"[{self.score}]"


@dataclass(eq=False)
class PlainPosition(Position):
    """A square without a finding slot."""
    pass


@dataclass(eq=False)
class FindingPosition(Position):
    """A square holding at most one finding.
    
    The slot starts empty. Once a finding has been placed it stays until it is
    cleared (collected or destroyed); a used slot never receives a new finding.
    """
    finding: Optional[Finding] = field(default=None, init=False)
    was_filled: bool = field(default=False, init=False)
    
    @property
    def is_finding_slot(self) -> bool:
        return True
    
    @property
    def is_occupied(self) -> bool:
        """True while a finding is present in the slot."""
        return self.finding is not None
    
    @property
    def is_empty(self) -> bool:
        """True if the slot has never held a finding."""
        return not self.was_filled
    
    def set_finding(self, finding: Finding) -> None:
        """Place a finding into a never-used slot."""
        if finding is None:
            raise InvalidArgumentError("Finding cannot be None")
        if self.was_filled:
            raise InvalidStateError("Finding slot has already been used")
        self.finding = finding
        self.was_filled = True
    
    def reveal_finding(self) -> Optional[Finding]:
        """Return the finding without removing it."""
        return self.finding
    
    def take_finding(self) -> Optional[Finding]:
        """Remove and return the finding, leaving the slot cleared."""
        finding = self.finding
        self.finding = None
        return finding
    
    def clear(self) -> None:
        """Destroy whatever finding the slot holds."""
        self.finding = None
    
    def __str__(self) -> str:
        if self.finding is not None:
            return f"[{self.score} ?]"
        return f"[{self.score} _]"
