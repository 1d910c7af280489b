"""Cancellable timers used to drive the monster tick and the auto-reset."""
from __future__ import annotations

import threading
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """Minimal interface shared by threading.Timer and RepeatingTimer."""

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


class RepeatingTimer(threading.Thread):
    """Calls ``function`` every ``interval`` seconds until cancelled."""

    def __init__(self, interval: float, function: Callable[[], None]) -> None:
        super().__init__(name="themine-ticker", daemon=True)
        self.interval = interval
        self.function = function
        self._finished = threading.Event()

    def cancel(self) -> None:
        self._finished.set()

    def run(self) -> None:
        while not self._finished.wait(self.interval):
            self.function()


def one_shot_timer(interval: float, function: Callable[[], None]) -> TimerHandle:
    """Return a daemon threading.Timer so pending resets never block exit."""
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


__all__ = ["RepeatingTimer", "TimerFactory", "TimerHandle", "one_shot_timer"]
