"""Character-by-character text reveal.

Hides the reveal loop: one timer per character, generation checks so a
late tick from an abandoned reveal is dropped, and the exactly-once
completion callback.
"""

from collections.abc import Callable
from typing import Any

from ..timing import Scheduler, TimerHandle
from .models import StreamCursor

DEFAULT_CADENCE_MS = 25.0

TickCallback = Callable[[str], Any]
CompleteCallback = Callable[[], Any]


class TextStreamer:
    """Reveals one source string at a constant cadence.

    At most one reveal is in flight. Starting a new one, or cancelling,
    discards the current reveal without calling its completion callback.

    Example:
        streamer = TextStreamer(scheduler, cadence_ms=25)
        streamer.start("Hello", on_complete=done, on_tick=render)
    """

    def __init__(self, scheduler: Scheduler, cadence_ms: float = DEFAULT_CADENCE_MS) -> None:
        if cadence_ms < 0:
            raise ValueError(f"cadence_ms must be >= 0, got {cadence_ms}")
        self._scheduler = scheduler
        self._cadence_ms = cadence_ms
        self._cursor: StreamCursor | None = None
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._tick_count = 0
        self._on_tick: TickCallback | None = None
        self._on_complete: CompleteCallback | None = None

    @property
    def cadence_ms(self) -> float:
        return self._cadence_ms

    @property
    def cursor(self) -> StreamCursor | None:
        """Cursor of the reveal in flight, None when idle."""
        return self._cursor

    @property
    def active(self) -> bool:
        return self._cursor is not None

    @property
    def prefix(self) -> str:
        return self._cursor.prefix if self._cursor is not None else ""

    @property
    def tick_count(self) -> int:
        """Ticks of the current (or last finished) reveal."""
        return self._tick_count

    def start(
        self,
        text: str,
        on_complete: CompleteCallback,
        on_tick: TickCallback | None = None,
    ) -> StreamCursor:
        """Begin revealing text from the empty prefix.

        Args:
            text: Source text, revealed one character per tick
            on_complete: Called exactly once after the full text is shown
            on_tick: Called with the new prefix after every tick

        Returns:
            The cursor of the new reveal
        """
        self.cancel()
        self._generation += 1
        self._tick_count = 0
        self._cursor = StreamCursor(text=text, cadence_ms=self._cadence_ms)
        self._on_tick = on_tick
        self._on_complete = on_complete
        if text:
            self._schedule(self._generation, self._cadence_ms)
        else:
            self._schedule(self._generation, 0)
        return self._cursor

    def cancel(self) -> bool:
        """Abandon the reveal in flight. Returns True if one was running."""
        was_active = self._cursor is not None
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._cursor = None
        self._on_tick = None
        self._on_complete = None
        # Any tick already queued for the old generation becomes a no-op
        self._generation += 1
        return was_active

    def _schedule(self, generation: int, delay_ms: float) -> None:
        self._timer = self._scheduler.call_later(delay_ms, self._tick, generation)

    def _tick(self, generation: int) -> None:
        if generation != self._generation or self._cursor is None:
            return
        cursor = self._cursor
        if not cursor.finished:
            prefix = cursor.step()
            self._tick_count += 1
            if self._on_tick is not None:
                self._on_tick(prefix)
            # on_tick may have restarted or cancelled the reveal
            if generation != self._generation:
                return
        if cursor.finished:
            self._finish()
        else:
            self._schedule(generation, self._cadence_ms)

    def _finish(self) -> None:
        on_complete = self._on_complete
        self._timer = None
        self._cursor = None
        self._on_tick = None
        self._on_complete = None
        self._generation += 1
        if on_complete is not None:
            on_complete()
