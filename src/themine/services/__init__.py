"""Service layer exports."""

from .board_generator import BoardGenerator
from .errors import GameError, InvalidStateTransitionError, OutOfBoundsError, ValidationError
from .game_service import (
    GameEvent,
    GameResetEvent,
    GameService,
    GameWonEvent,
    MetalCollectedEvent,
    MonsterMovedEvent,
    MoveBlockedEvent,
    MoveResult,
    PlayerCaughtEvent,
    PlayerMovedEvent,
    ScoreSubmittedEvent,
    TickResult,
    TileRevealedEvent,
)
from .monster_ai import MonsterAI, MonsterMove, MonsterTickResult
from .reveal_service import RevealEngine
from .score_service import ScoreRecorder, ScoreSubmission
from .controllers import GameSession, SessionView

__all__ = [
    "BoardGenerator",
    "GameError",
    "GameEvent",
    "GameResetEvent",
    "GameService",
    "GameSession",
    "GameWonEvent",
    "InvalidStateTransitionError",
    "MetalCollectedEvent",
    "MonsterAI",
    "MonsterMove",
    "MonsterMovedEvent",
    "MonsterTickResult",
    "MoveBlockedEvent",
    "MoveResult",
    "OutOfBoundsError",
    "PlayerCaughtEvent",
    "PlayerMovedEvent",
    "RevealEngine",
    "ScoreRecorder",
    "ScoreSubmission",
    "ScoreSubmittedEvent",
    "SessionView",
    "TickResult",
    "TileRevealedEvent",
    "ValidationError",
]
