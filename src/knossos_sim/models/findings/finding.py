"""Finding tokens collected by players for points."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from ...errors import InvalidArgumentError


class FindingKind(Enum):
    """Kinds of findings that can sit in a finding slot."""
    RARE = "rare"
    STATUE = "statue"
    FRESCO = "fresco"


@dataclass(eq=False)
class Finding(ABC):
    """Base class for all findings."""
    name: str
    value: int
    
    def __post_init__(self) -> None:
        """Validate finding data after creation."""
        if not self.name:
            raise InvalidArgumentError("Finding name cannot be empty")
        if self.value < 0:
            raise InvalidArgumentError(f"Finding value cannot be negative: {self.value}")
    
    @property
    @abstractmethod
    def kind(self) -> FindingKind:
        pass
    
    def __str__(self) -> str:
        return f"{self.name} ({self.value})"


@dataclass(eq=False)
class RareFinding(Finding):
    """The single rare treasure hidden in each palace."""
    palace: str = ""
    
    @property
    def kind(self) -> FindingKind:
        return FindingKind.RARE


@dataclass(eq=False)
class Statue(Finding):
    """A snake goddess statue. Plentiful, fixed value."""
    
    @property
    def kind(self) -> FindingKind:
        return FindingKind.STATUE


@dataclass(eq=False)
class Fresco(Finding):
    """A wall fresco. Once photographed it stays photographed."""
    photographed: bool = field(default=False, init=False)
    
    @property
    def kind(self) -> FindingKind:
        return FindingKind.FRESCO
    
    def photograph(self) -> None:
        """Mark the fresco as photographed."""
        self.photographed = True
    
    def __str__(self) -> str:
        marker = " [photographed]" if self.photographed else ""
        return f"{self.name} ({self.value}){marker}"
