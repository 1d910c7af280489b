"""Round lifecycle: moves, monster ticks, win/caught transitions and resets."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List

from themine.core.rng import RNG
from themine.core.types import Position
from themine.domain.rules import METALS, STEP_ORDER, MAX_NAME_LENGTH
from themine.domain.score import PendingScore
from themine.domain.state import GameState, GameStatus
from themine.domain.tile import Dirt, Empty, TileContent
from themine.services.board_generator import BoardGenerator
from themine.services.errors import (
    InvalidStateTransitionError,
    OutOfBoundsError,
    ValidationError,
)
from themine.services.monster_ai import MonsterAI
from themine.services.reveal_service import RevealEngine
from themine.services.score_service import ScoreRecorder, ScoreSubmission

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(slots=True)
class GameEvent:
    """Base class for game events."""


@dataclass(slots=True)
class TileRevealedEvent(GameEvent):
    position: Position
    content: TileContent


@dataclass(slots=True)
class MoveBlockedEvent(GameEvent):
    position: Position
    content: TileContent


@dataclass(slots=True)
class MetalCollectedEvent(GameEvent):
    position: Position
    metal_count: int


@dataclass(slots=True)
class PlayerMovedEvent(GameEvent):
    origin: Position
    destination: Position


@dataclass(slots=True)
class GameWonEvent(GameEvent):
    pending_score: PendingScore


@dataclass(slots=True)
class MonsterMovedEvent(GameEvent):
    origin: Position
    destination: Position


@dataclass(slots=True)
class PlayerCaughtEvent(GameEvent):
    position: Position


@dataclass(slots=True)
class GameResetEvent(GameEvent):
    round_id: int


@dataclass(slots=True)
class ScoreSubmittedEvent(GameEvent):
    submission: ScoreSubmission


@dataclass(slots=True)
class MoveResult:
    """Result returned after applying a player move."""

    events: List[GameEvent] = field(default_factory=list)
    moved: bool = False


@dataclass(slots=True)
class TickResult:
    events: List[GameEvent] = field(default_factory=list)
    caught: bool = False


class GameService:
    """Application service that owns the rules of a round."""

    def __init__(
        self,
        rng: RNG,
        *,
        clock: Clock = time.time,
        generator: BoardGenerator | None = None,
        reveal_engine: RevealEngine | None = None,
        monster_ai: MonsterAI | None = None,
        score_recorder: ScoreRecorder | None = None,
    ) -> None:
        self._rng = rng
        self._clock = clock
        self._generator = generator or BoardGenerator(rng)
        self._reveal_engine = reveal_engine or RevealEngine(rng)
        self._monster_ai = monster_ai or MonsterAI()
        self._score_recorder = score_recorder

    @property
    def score_recorder(self) -> ScoreRecorder | None:
        return self._score_recorder

    def new_game(self, *, round_id: int = 0) -> GameState:
        """Create a fresh round: new board, player on the start tile, clock started."""
        state = GameState(
            board=self._generator.generate(),
            start_time=self._clock(),
            round_id=round_id,
        )
        logger.info("Round %d started (seed=%d)", round_id, self._rng.seed)
        return state

    def reset_game(self, state: GameState) -> GameState:
        """Discard the round in any status and return a replacement state."""
        logger.info("Round %d reset from %s", state.round_id, state.status.value)
        return self.new_game(round_id=state.round_id + 1)

    def elapsed(self, state: GameState) -> float:
        if state.pending_score is not None:
            return state.pending_score.time
        return self._clock() - state.start_time

    def move(self, state: GameState, dx: int, dy: int) -> MoveResult:
        """
        Attempt to step the player by (dx, dy).

        Entering unexplored dirt reveals it first. Stone or a monster blocks the
        step but the tile stays uncovered. Picking up the last metal wins the
        round within this same call.
        """
        if (dx, dy) not in STEP_ORDER:
            raise ValueError(f"Move must be a unit step, got {(dx, dy)}.")
        self._require_status(state, GameStatus.PLAYING, "move")
        target = (state.player[0] + dx, state.player[1] + dy)
        if not state.board.in_bounds(target):
            raise OutOfBoundsError(f"Target {target} is outside the board.")

        result = MoveResult()
        board = state.board
        tile = board[target]
        if isinstance(tile.content, Dirt) and not tile.explored:
            tile = tile.with_content(self._reveal_engine.reveal())
            result.events.append(TileRevealedEvent(target, tile.content))

        if tile.is_obstruction:
            board[target] = tile.mark_explored()
            result.events.append(MoveBlockedEvent(target, tile.content))
            logger.debug("Move to %s blocked by %s", target, tile.kind.value)
            return result

        if tile.has_metal:
            tile = tile.with_content(Empty(has_metal=False))
            state.metal_count += 1
            result.events.append(MetalCollectedEvent(target, state.metal_count))
        board[target] = tile.mark_explored()
        result.events.append(PlayerMovedEvent(state.player, target))
        state.player = target
        result.moved = True

        if state.metal_count >= METALS:
            result.events.append(self._win(state))
        return result

    def tick(self, state: GameState) -> TickResult:
        """Advance every monster one step; a monster landing on the player ends the round."""
        self._require_status(state, GameStatus.PLAYING, "tick")
        ai_result = self._monster_ai.tick(state.board, state.player)
        result = TickResult(
            events=[MonsterMovedEvent(move.origin, move.destination) for move in ai_result.moves],
        )
        if ai_result.caught:
            state.status = GameStatus.CAUGHT
            result.caught = True
            result.events.append(PlayerCaughtEvent(state.player))
            logger.info("Round %d: player caught at %s", state.round_id, state.player)
        return result

    def set_name_entry(self, state: GameState, text: str) -> None:
        self._require_status(state, GameStatus.WON, "set_name_entry")
        state.name_entry = text

    def submit_score(self, state: GameState, name: str | None = None) -> ScoreSubmittedEvent:
        """Validate the name and hand the pending score to the recorder.

        When ``name`` is omitted the in-progress name entry is used. A rejected
        name leaves the pending score and the draft untouched.
        """
        self._require_status(state, GameStatus.WON, "submit_score")
        if state.pending_score is None:
            raise InvalidStateTransitionError("No pending score to submit.")
        if self._score_recorder is None:
            raise InvalidStateTransitionError("No score recorder configured.")
        clean_name = self.validate_name(state.name_entry if name is None else name)

        submission = self._score_recorder.record(state.pending_score, clean_name)
        state.pending_score = None
        state.name_entry = ""
        return ScoreSubmittedEvent(submission)

    @staticmethod
    def validate_name(name: str) -> str:
        clean_name = name.strip()
        if not clean_name:
            raise ValidationError("Name cannot be empty.")
        if len(clean_name) > MAX_NAME_LENGTH:
            raise ValidationError(f"Name must be at most {MAX_NAME_LENGTH} characters.")
        return clean_name

    def _win(self, state: GameState) -> GameWonEvent:
        now = self._clock()
        pending = PendingScore(
            time=now - state.start_time,
            date=datetime.fromtimestamp(now, timezone.utc).isoformat(),
        )
        state.status = GameStatus.WON
        state.pending_score = pending
        logger.info("Round %d won in %.2fs", state.round_id, pending.time)
        return GameWonEvent(pending)

    @staticmethod
    def _require_status(state: GameState, status: GameStatus, operation: str) -> None:
        if state.status is not status:
            raise InvalidStateTransitionError(
                f"Cannot {operation} while {state.status.value}; requires {status.value}."
            )
