"""Path model: the ordered squares leading to one palace."""

from typing import List, Sequence, Tuple

from .position import Position, FindingPosition
from ...errors import InvalidArgumentError


class Path:
    """An ordered, fixed-length sequence of positions for one palace."""
    
    def __init__(self, palace_name: str, positions: Sequence[Position]):
        if not palace_name:
            raise InvalidArgumentError("Palace name cannot be empty")
        if not positions:
            raise InvalidArgumentError(f"Path to {palace_name} needs at least one position")
        self._palace_name = palace_name
        self._positions: Tuple[Position, ...] = tuple(positions)
        self._completed = False
    
    @property
    def palace_name(self) -> str:
        return self._palace_name
    
    @property
    def positions(self) -> Tuple[Position, ...]:
        return self._positions
    
    @property
    def length(self) -> int:
        """Number of positions on the path."""
        return len(self._positions)
    
    def get_position(self, index: int) -> Position:
        """Get the position at `index`."""
        if index < 0 or index >= len(self._positions):
            raise InvalidArgumentError(
                f"Invalid position index {index} for path to {self._palace_name} "
                f"(length {len(self._positions)})"
            )
        return self._positions[index]
    
    def finding_slots(self) -> List[FindingPosition]:
        """All finding slots along the path, in order."""
        return [p for p in self._positions if isinstance(p, FindingPosition)]
    
    def empty_slot_indices(self) -> List[int]:
        """Indices of finding slots that have never held a finding."""
        return [
            i for i, p in enumerate(self._positions)
            if isinstance(p, FindingPosition) and p.is_empty
        ]
    
    @property
    def all_findings_present(self) -> bool:
        """True if the path has finding slots and every one holds a finding."""
        slots = self.finding_slots()
        return bool(slots) and all(slot.is_occupied for slot in slots)
    
    @property
    def is_completed(self) -> bool:
        """Completed when marked by the controller or fully stocked with findings."""
        return self._completed or self.all_findings_present
    
    def mark_completed(self) -> None:
        self._completed = True
    
    def __str__(self) -> str:
        return f"Path to {self._palace_name} ({self.length} positions)"
    
    def __repr__(self) -> str:
        return f"Path(palace_name='{self._palace_name}', length={self.length}, completed={self.is_completed})"
