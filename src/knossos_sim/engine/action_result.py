"""Structured results returned by turn controller operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class TurnResultType(Enum):
    """Types of turn results."""
    # Card actions
    CARD_PLAYED = "card_played"
    CARD_DISCARDED = "card_discarded"
    
    # Board actions
    PAWN_DEPLOYED = "pawn_deployed"
    FINDING_COLLECTED = "finding_collected"
    BOX_DESTROYED = "box_destroyed"
    NOTHING_FOUND = "nothing_found"
    
    # Errors
    ACTION_FAILED = "action_failed"


@dataclass
class TurnResult:
    """Structured result from executing a player action."""
    success: bool
    action: str
    result_type: TurnResultType
    data: Dict[str, Any] = field(default_factory=dict)
    error_message: Optional[str] = None
    game_over: bool = False
    
    @classmethod
    def success_result(cls, action: str, result_type: TurnResultType,
                       game_over: bool = False, **data) -> 'TurnResult':
        """Create a successful result."""
        return cls(
            success=True,
            action=action,
            result_type=result_type,
            data=data,
            game_over=game_over
        )
    
    @classmethod
    def failure_result(cls, action: str, error_message: str) -> 'TurnResult':
        """Create a failed result."""
        return cls(
            success=False,
            action=action,
            result_type=TurnResultType.ACTION_FAILED,
            error_message=error_message
        )
