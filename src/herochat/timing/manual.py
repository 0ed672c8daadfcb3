"""Virtual-clock scheduler for deterministic runs.

Nothing happens until the clock is advanced. Used by the test suite and
by the headless `herochat replay` command, where the whole conversation
is fast-forwarded instead of waited for.
"""

import heapq
import itertools
from collections.abc import Callable
from typing import Any

from .base import Scheduler, TimerHandle

DEFAULT_FRAME_INTERVAL_MS = 16.0
DEFAULT_IDLE_LIMIT_MS = 10 * 60 * 1000


class _ManualHandle(TimerHandle):
    def __init__(self, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self._callback = callback
        self._args = args
        self._cancelled = False
        self._done = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    def _run(self) -> None:
        self._done = True
        self._callback(*self._args)


class ManualScheduler(Scheduler):
    """Scheduler driven by an explicit virtual clock.

    Callbacks due at the same instant run in scheduling order. A callback
    that schedules another one for a time inside the window being advanced
    sees it run within the same advance() call.

    Example:
        scheduler = ManualScheduler()
        scheduler.call_later(100, print, "tick")
        scheduler.advance(99)   # nothing
        scheduler.advance(1)    # prints "tick"
    """

    def __init__(self, frame_interval_ms: float = DEFAULT_FRAME_INTERVAL_MS) -> None:
        self._now = 0.0
        self._frame_interval_ms = frame_interval_ms
        self._queue: list[tuple[float, int, _ManualHandle]] = []
        self._sequence = itertools.count()

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        handle = _ManualHandle(callback, args)
        due = self._now + max(0.0, delay_ms)
        heapq.heappush(self._queue, (due, next(self._sequence), handle))
        return handle

    def call_next_frame(
        self,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        return self.call_later(self._frame_interval_ms, callback, *args)

    def now(self) -> float:
        return self._now

    @property
    def scheduler_type(self) -> str:
        return "manual"

    @property
    def frame_interval_ms(self) -> float:
        return self._frame_interval_ms

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that are not cancelled."""
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def next_due(self) -> float | None:
        """Virtual time of the next live callback, or None when idle."""
        self._drop_cancelled()
        if not self._queue:
            return None
        return self._queue[0][0]

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)

    def advance(self, ms: float) -> int:
        """Move the clock forward by ms, running everything that falls due.

        Returns:
            Number of callbacks that ran
        """
        if ms < 0:
            raise ValueError(f"Cannot advance by a negative amount: {ms}")
        target = self._now + ms
        ran = 0
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0][0] > target:
                break
            due, _, handle = heapq.heappop(self._queue)
            self._now = due
            handle._run()
            ran += 1
        self._now = target
        return ran

    def run_until_idle(self, limit_ms: float = DEFAULT_IDLE_LIMIT_MS) -> float:
        """Run callbacks until nothing is pending.

        Args:
            limit_ms: Maximum virtual time to spend

        Returns:
            Virtual milliseconds that elapsed

        Raises:
            RuntimeError: If work is still pending after limit_ms
        """
        start = self._now
        deadline = start + limit_ms
        while True:
            due = self.next_due()
            if due is None:
                return self._now - start
            if due > deadline:
                raise RuntimeError(
                    f"Scheduler still busy after {limit_ms:.0f} ms of virtual time "
                    f"({self.pending} callbacks pending)"
                )
            self.advance(due - self._now)
