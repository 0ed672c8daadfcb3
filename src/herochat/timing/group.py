"""Arena of timers that are cancelled together.

Components that own several pending callbacks (thinking delay, stage
rotation, scroll catch-ups) register them in a TimerGroup and drop the
whole group on a phase change or teardown.
"""

from collections.abc import Callable
from typing import Any

from .base import Scheduler, TimerHandle


class TimerGroup:
    """A set of timers scheduled through one Scheduler.

    Example:
        group = TimerGroup(scheduler)
        group.call_later(800, show_indicator)
        group.call_later(7500, deliver_reply)
        group.cancel_all()  # neither callback will run
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handles: list[TimerHandle] = []
        self._closed = False

    def call_later(
        self,
        delay_ms: float,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        """Schedule a delayed callback owned by this group."""
        handle = self._scheduler.call_later(delay_ms, callback, *args)
        self._track(handle)
        return handle

    def call_next_frame(
        self,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        """Schedule a per-frame callback owned by this group."""
        handle = self._scheduler.call_next_frame(callback, *args)
        self._track(handle)
        return handle

    def _track(self, handle: TimerHandle) -> None:
        if self._closed:
            handle.cancel()
            return
        # Forget handles that already ran or were cancelled
        self._handles = [h for h in self._handles if not (h.done or h.cancelled)]
        self._handles.append(handle)

    def cancel_all(self) -> int:
        """Cancel every pending timer. Returns how many were still pending."""
        pending = 0
        for handle in self._handles:
            if not (handle.done or handle.cancelled):
                pending += 1
            handle.cancel()
        self._handles.clear()
        return pending

    def close(self) -> None:
        """Cancel everything and refuse new timers from now on."""
        self.cancel_all()
        self._closed = True

    @property
    def pending(self) -> int:
        """Number of timers that have neither run nor been cancelled."""
        return sum(1 for h in self._handles if not (h.done or h.cancelled))

    @property
    def closed(self) -> bool:
        return self._closed
