"""Exception hierarchy for rule violations raised by the engine."""


class GameRuleError(Exception):
    """Base class for every error the rules engine raises."""
    pass


class InvalidArgumentError(GameRuleError, ValueError):
    """Raised for missing or out-of-range references (card, pawn, path, slot)."""
    pass


class InvalidStateError(GameRuleError):
    """Raised when an operation's preconditions are not met."""
    pass


class EmptyResourceError(GameRuleError):
    """Raised when a resource pile has nothing left to take."""
    pass


class EmptyDeckError(EmptyResourceError):
    """Raised when drawing from an empty draw pile."""
    pass


class IllegalMoveError(InvalidArgumentError):
    """Raised when a card may not follow the path's last played card."""
    pass


class CardNotInHandError(InvalidArgumentError, InvalidStateError):
    """Raised when a player acts with a card they do not hold."""
    pass
