"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .game_controller import EventListener, GameSession, SessionView

__all__ = [
    "EventListener",
    "GameSession",
    "SessionView",
]
