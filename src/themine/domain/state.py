"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from themine.core.types import Position
from themine.domain.board import Board
from themine.domain.rules import START
from themine.domain.score import PendingScore


class GameStatus(Enum):
    PLAYING = "playing"
    CAUGHT = "caught"
    WON = "won"


@dataclass
class GameState:
    """Authoritative state of one round."""

    board: Board
    start_time: float
    status: GameStatus = GameStatus.PLAYING
    player: Position = START
    metal_count: int = 0
    pending_score: PendingScore | None = None
    name_entry: str = ""
    round_id: int = 0

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING
