"""Scheduler backed by the running asyncio event loop."""

import asyncio
import time
from collections.abc import Callable
from typing import Any

from .base import Scheduler, TimerHandle

# Roughly one display refresh at 60 Hz
FRAME_INTERVAL_MS = 1000 / 60


class _AsyncioHandle(TimerHandle):
    """Wraps asyncio.TimerHandle and records completion."""

    def __init__(self) -> None:
        self._handle: asyncio.TimerHandle | None = None
        self._cancelled = False
        self._done = False

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done


class AsyncioScheduler(Scheduler):
    """Schedules callbacks with loop.call_later.

    Must be created while an event loop is running, or given one.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        frame_interval_ms: float = FRAME_INTERVAL_MS
    ) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._frame_interval_ms = frame_interval_ms

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        handle = _AsyncioHandle()

        def _run() -> None:
            if handle.cancelled:
                return
            handle._done = True
            callback(*args)

        handle._handle = self._loop.call_later(max(0.0, delay_ms) / 1000, _run)
        return handle

    def call_next_frame(
        self,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        return self.call_later(self._frame_interval_ms, callback, *args)

    def now(self) -> float:
        return time.monotonic() * 1000

    @property
    def scheduler_type(self) -> str:
        return "asyncio"
