"""Scheduler backed by a Textual app's timers.

Delays go through App.set_timer; frames through App.call_after_refresh,
so a reveal tick is painted before the transcript scrolls.
"""

import time
from collections.abc import Callable
from typing import Any

from textual.app import App
from textual.timer import Timer

from ..timing import Scheduler, TimerHandle


class _TextualHandle(TimerHandle):
    """Wraps a Textual Timer, or guards a refresh callback."""

    def __init__(self) -> None:
        self._timer: Timer | None = None
        self._cancelled = False
        self._done = False

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done


class TextualScheduler(Scheduler):
    """Runs engine callbacks on the Textual message loop."""

    def __init__(self, app: App) -> None:
        self._app = app

    def _wrap(
        self,
        handle: _TextualHandle,
        callback: Callable[..., Any],
        args: tuple[Any, ...]
    ) -> Callable[[], None]:
        def _run() -> None:
            if handle.cancelled or handle.done:
                return
            handle._done = True
            handle._timer = None
            callback(*args)
        return _run

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        handle = _TextualHandle()
        run = self._wrap(handle, callback, args)
        if delay_ms <= 0:
            self._app.call_later(run)
        else:
            handle._timer = self._app.set_timer(delay_ms / 1000, run)
        return handle

    def call_next_frame(
        self,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        handle = _TextualHandle()
        self._app.call_after_refresh(self._wrap(handle, callback, args))
        return handle

    def now(self) -> float:
        return time.monotonic() * 1000

    @property
    def scheduler_type(self) -> str:
        return "textual"
