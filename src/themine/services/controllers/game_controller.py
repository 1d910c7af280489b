"""UI-agnostic session controller that serializes player input against the monster tick."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Sequence

from themine.core.timers import RepeatingTimer, TimerFactory, TimerHandle, one_shot_timer
from themine.core.types import Position
from themine.domain.board import Board
from themine.domain.rules import CAUGHT_RESET_SECONDS, TICK_SECONDS
from themine.domain.score import PendingScore, ScoreRecord
from themine.domain.state import GameState, GameStatus
from themine.services.errors import InvalidStateTransitionError, OutOfBoundsError
from themine.services.game_service import (
    GameEvent,
    GameResetEvent,
    GameService,
    MoveResult,
    ScoreSubmittedEvent,
    TickResult,
)

logger = logging.getLogger(__name__)

EventListener = Callable[[Sequence[GameEvent]], None]


@dataclass(frozen=True, slots=True)
class SessionView:
    """Read-only copy of the session for rendering."""

    board: Board
    player: Position
    status: GameStatus
    metal_count: int
    elapsed: float
    pending_score: PendingScore | None
    name_entry: str
    round_id: int
    top_scores: List[ScoreRecord]


class GameSession:
    """
    Owns the single authoritative GameState and the timers that act on it.

    Responsibilities:
    - Serialize moves, resets, score submissions and monster ticks behind one lock
    - Run the monster tick while the round is playing
    - Schedule the automatic reset after a capture, and cancel it on manual reset
    - Treat moves off the board and commands in the wrong status as no-ops

    Non-responsibilities (handled by presentation layer):
    - Rendering the board
    - Reading keys or prompting for a name
    """

    def __init__(
        self,
        service: GameService,
        *,
        listener: EventListener | None = None,
        ticker_factory: TimerFactory = RepeatingTimer,
        timer_factory: TimerFactory = one_shot_timer,
        tick_seconds: float = TICK_SECONDS,
        reset_seconds: float = CAUGHT_RESET_SECONDS,
    ) -> None:
        self._service = service
        self._listener = listener
        self._ticker_factory = ticker_factory
        self._timer_factory = timer_factory
        self._tick_seconds = tick_seconds
        self._reset_seconds = reset_seconds
        self._lock = threading.RLock()
        self._ticker: TimerHandle | None = None
        self._reset_timer: TimerHandle | None = None
        if service.score_recorder is not None:
            service.score_recorder.load()
        self._state = service.new_game()

    @property
    def state(self) -> GameState:
        return self._state

    def start(self) -> None:
        """Begin ticking monsters; idempotent."""
        with self._lock:
            if self._ticker is None:
                self._ticker = self._ticker_factory(self._tick_seconds, self.tick)
                self._ticker.start()

    def stop(self) -> None:
        """Cancel every pending timer."""
        with self._lock:
            if self._ticker is not None:
                self._ticker.cancel()
                self._ticker = None
            self._cancel_reset_timer()

    def move(self, dx: int, dy: int) -> MoveResult:
        with self._lock:
            try:
                result = self._service.move(self._state, dx, dy)
            except (OutOfBoundsError, InvalidStateTransitionError) as exc:
                logger.debug("Ignored move %s: %s", (dx, dy), exc)
                return MoveResult()
        self._notify(result.events)
        return result

    def tick(self) -> TickResult:
        with self._lock:
            if not self._state.is_playing:
                return TickResult()
            result = self._service.tick(self._state)
            if result.caught:
                self._schedule_auto_reset(self._state.round_id)
        self._notify(result.events)
        return result

    def reset(self) -> GameResetEvent:
        with self._lock:
            self._cancel_reset_timer()
            self._state = self._service.reset_game(self._state)
            event = GameResetEvent(self._state.round_id)
        self._notify([event])
        return event

    def set_name_entry(self, text: str) -> None:
        with self._lock:
            try:
                self._service.set_name_entry(self._state, text)
            except InvalidStateTransitionError as exc:
                logger.debug("Ignored name entry: %s", exc)

    def submit_score(self, name: str | None = None) -> ScoreSubmittedEvent | None:
        """Submit the pending score; ValidationError propagates for inline display."""
        with self._lock:
            try:
                event = self._service.submit_score(self._state, name)
            except InvalidStateTransitionError as exc:
                logger.debug("Ignored score submission: %s", exc)
                return None
        self._notify([event])
        return event

    def snapshot(self) -> SessionView:
        with self._lock:
            state = self._state
            recorder = self._service.score_recorder
            return SessionView(
                board=state.board.copy(),
                player=state.player,
                status=state.status,
                metal_count=state.metal_count,
                elapsed=self._service.elapsed(state),
                pending_score=state.pending_score,
                name_entry=state.name_entry,
                round_id=state.round_id,
                top_scores=recorder.top() if recorder is not None else [],
            )

    def _schedule_auto_reset(self, round_id: int) -> None:
        self._cancel_reset_timer()
        self._reset_timer = self._timer_factory(
            self._reset_seconds, lambda: self._auto_reset(round_id)
        )
        self._reset_timer.start()

    def _auto_reset(self, round_id: int) -> None:
        with self._lock:
            # A manual reset already replaced this round.
            if self._state.round_id != round_id or self._state.status is not GameStatus.CAUGHT:
                return
            self._reset_timer = None
            logger.info("Round %d auto-reset after capture", round_id)
            self._state = self._service.reset_game(self._state)
            event = GameResetEvent(self._state.round_id)
        self._notify([event])

    def _cancel_reset_timer(self) -> None:
        if self._reset_timer is not None:
            self._reset_timer.cancel()
            self._reset_timer = None

    def _notify(self, events: Sequence[GameEvent]) -> None:
        if self._listener is not None and events:
            self._listener(events)
