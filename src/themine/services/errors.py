"""Service-layer exceptions."""


class GameError(Exception):
    """Base class for gameplay errors."""


class OutOfBoundsError(GameError):
    """Raised when a move targets a cell outside the board."""


class InvalidStateTransitionError(GameError):
    """Raised when an operation is not allowed in the current game status."""


class ValidationError(GameError):
    """Raised when player-supplied input (a score name) is rejected."""
