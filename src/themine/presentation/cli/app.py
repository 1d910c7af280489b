"""Console-driven game loop."""
from __future__ import annotations

import secrets
import threading
from typing import Sequence

from themine.core.rng import RNG
from themine.core.types import GlyphMode
from themine.data.score_store import JsonScoreStore
from themine.domain.state import GameStatus
from themine.presentation.cli import config
from themine.presentation.cli.keys import parse_line
from themine.presentation.cli.render import render_scores, render_screen
from themine.services import (
    GameEvent,
    GameResetEvent,
    GameService,
    GameSession,
    MonsterMovedEvent,
    PlayerCaughtEvent,
    ScoreRecorder,
    ValidationError,
)

_MAX_RANDOM_SEED = 2**31 - 1
_HELP = "Move with w/a/s/d (several per line is fine), r to restart, q to quit."
# Timer-thread redraws and the input loop both write the board.
_PRINT_LOCK = threading.Lock()


def main() -> None:
    """Start the interactive console session."""
    options = config.load_config()
    glyphs: GlyphMode = "ascii" if options["glyphs"] == "ascii" else "emoji"
    session = _build_session(glyphs)
    print(_HELP)
    _print_screen(session, glyphs)
    session.start()
    try:
        _run_loop(session, glyphs)
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        session.stop()


def _build_session(glyphs: GlyphMode) -> GameSession:
    seed = secrets.randbelow(_MAX_RANDOM_SEED)
    recorder = ScoreRecorder(JsonScoreStore(config.get_scores_path()))
    service = GameService(RNG(seed), score_recorder=recorder)

    def on_events(events: Sequence[GameEvent]) -> None:
        # Ticks and the auto-reset arrive from timer threads; only redraw for those.
        if any(isinstance(event, (MonsterMovedEvent, PlayerCaughtEvent, GameResetEvent)) for event in events):
            _print_screen(session, glyphs)

    session = GameSession(service, listener=on_events)
    return session


def _run_loop(session: GameSession, glyphs: GlyphMode) -> None:
    while True:
        line = input("> ")
        for command in parse_line(line):
            if command.command_type == "quit":
                return
            if command.command_type == "reset":
                session.reset()
            elif command.command_type == "move" and command.vector is not None:
                session.move(*command.vector)
            elif command.command_type == "enter":
                _handle_enter(session)
        _print_screen(session, glyphs)


def _handle_enter(session: GameSession) -> None:
    status = session.snapshot().status
    if status is GameStatus.CAUGHT:
        session.reset()
    elif status is GameStatus.WON:
        _prompt_score(session)
        session.reset()


def _prompt_score(session: GameSession) -> None:
    while session.snapshot().pending_score is not None:
        name = input("Your name (blank to skip): ")
        if not name.strip():
            return
        session.set_name_entry(name)
        try:
            event = session.submit_score()
        except ValidationError as exc:
            print(f"  {exc}")
            continue
        if event is None:
            return
        submission = event.submission
        if not submission.persisted:
            print("  Score kept for this session only; it could not be saved.")
        for line in render_scores(session.snapshot().top_scores):
            print(line)


def _print_screen(session: GameSession, glyphs: GlyphMode) -> None:
    screen = render_screen(session.snapshot(), glyphs)
    with _PRINT_LOCK:
        print()
        print(screen)
