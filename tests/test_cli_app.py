from __future__ import annotations

from pathlib import Path

from themine.data.score_store import InMemoryScoreStore
from themine.domain.state import GameStatus
from themine.domain.tile import Monster, Tile
from themine.presentation.cli import app
from themine.services import GameService, GameSession
from themine.services.score_service import ScoreRecorder
from tests.helpers.builders import FakeClock, ScriptedRNG, TimerRecorder

_WINNING_PATH = [(1, 0)] * 9 + [(-1, 0)] * 7 + [(0, 1), (-1, 0), (-1, 0)]


def _scripted_input(monkeypatch, lines: list[str]) -> None:
    remaining = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(remaining))


def _build_session(store: InMemoryScoreStore) -> GameSession:
    service = GameService(ScriptedRNG(), clock=FakeClock(), score_recorder=ScoreRecorder(store))
    return GameSession(service, ticker_factory=TimerRecorder(), timer_factory=TimerRecorder())


def test_main_runs_until_quit(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setenv("THEMINE_HOME", str(tmp_path))
    _scripted_input(monkeypatch, ["d", "q"])

    app.main()

    out = capsys.readouterr().out
    assert "w/a/s/d" in out
    assert "Metal" in out


def test_blank_name_after_win_skips_score_and_starts_over(monkeypatch, capsys) -> None:
    store = InMemoryScoreStore()
    session = _build_session(store)
    for dx, dy in _WINNING_PATH:
        session.move(dx, dy)
    assert session.state.status is GameStatus.WON
    _scripted_input(monkeypatch, ["", "x" * 25, "Ada"])

    app._handle_enter(session)

    # The blank first answer skips submission entirely.
    assert store.load() == []
    assert session.state.status is GameStatus.PLAYING


def test_invalid_name_is_reported_and_reprompted(monkeypatch, capsys) -> None:
    store = InMemoryScoreStore()
    session = _build_session(store)
    for dx, dy in _WINNING_PATH:
        session.move(dx, dy)
    _scripted_input(monkeypatch, ["x" * 25, "Ada"])

    app._handle_enter(session)

    out = capsys.readouterr().out
    assert "at most 20 characters" in out
    assert "High Scores" in out
    assert [record.name for record in store.load()] == ["Ada"]
    assert session.state.round_id == 1


def test_enter_while_caught_resets(monkeypatch) -> None:
    session = _build_session(InMemoryScoreStore())
    session.state.board[(0, 1)] = Tile(Monster(), explored=True, visible=True)
    session.tick()

    app._handle_enter(session)

    assert session.state.status is GameStatus.PLAYING
    assert session.state.round_id == 1


class _CountingLock:
    def __init__(self) -> None:
        self.entered = 0

    def __enter__(self) -> None:
        self.entered += 1

    def __exit__(self, *exc_info) -> None:
        return None


def test_input_loop_and_timer_redraws_share_the_print_lock(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setenv("THEMINE_HOME", str(tmp_path))
    lock = _CountingLock()
    monkeypatch.setattr(app, "_PRINT_LOCK", lock)
    session = app._build_session("ascii")

    app._print_screen(session, "ascii")
    # A reset notifies the listener, the same path the tick and auto-reset timers use.
    session.reset()

    assert lock.entered == 2
    assert capsys.readouterr().out.count("Metal 0/12") == 2
