"""Keeps the transcript viewport pinned to its newest content.

Hides the scroll scheduling policy:
- at most one scroll per animation frame, however many reveal ticks arrive
- two trailing catch-up scrolls after structural changes (new message,
  suggestions appearing), because their layout settles a little later
- no pinning while the visitor has scrolled up to read
"""

from collections.abc import Sequence
from typing import Protocol

from ..engine import ConversationPhase, EngineListener, Message, Role
from ..engine.config import LOG_COMPONENT_SCROLL
from ..engine.debug import DebugLogMixin
from ..timing import Scheduler, TimerGroup, TimerHandle

DEFAULT_CATCH_UP_DELAYS_MS = (50.0, 150.0)
DEFAULT_RELEASE_DISTANCE = 2.0


class ScrollViewport(Protocol):
    """The scrollable transcript area of a renderer."""

    def scroll_to_bottom(self) -> None:
        """Jump to the end of the content."""


class ScrollSynchronizer(EngineListener, DebugLogMixin):
    """Engine listener that scrolls a viewport to the bottom.

    Scrolls run on the frame after the change that requested them, so a
    revealed character is painted before the viewport moves.
    """

    def __init__(
        self,
        viewport: ScrollViewport,
        scheduler: Scheduler,
        catch_up_delays_ms: Sequence[float] = DEFAULT_CATCH_UP_DELAYS_MS,
        release_distance: float = DEFAULT_RELEASE_DISTANCE,
    ) -> None:
        self._viewport = viewport
        self._scheduler = scheduler
        self._catch_up_delays_ms = tuple(catch_up_delays_ms)
        self._release_distance = release_distance
        self._frame: TimerHandle | None = None
        self._catch_ups = TimerGroup(scheduler)
        self._pinned = True
        self._scroll_count = 0
        self._requests = 0

    @property
    def pinned(self) -> bool:
        return self._pinned

    @property
    def scroll_count(self) -> int:
        """Number of scroll_to_bottom() calls applied."""
        return self._scroll_count

    @property
    def requests(self) -> int:
        """Number of scroll requests received, coalesced or not."""
        return self._requests

    @property
    def frame_pending(self) -> bool:
        return self._frame is not None and not (self._frame.done or self._frame.cancelled)

    def request_scroll(self, catch_up: bool = False) -> None:
        """Ask for the viewport to be pinned to the bottom.

        Args:
            catch_up: Also schedule the trailing catch-up scrolls,
                      replacing any earlier ones
        """
        self._requests += 1
        if not self._pinned or self._catch_ups.closed:
            return
        if not self.frame_pending:
            self._frame = self._scheduler.call_next_frame(self._flush)
        if catch_up and self._catch_up_delays_ms:
            self._catch_ups.cancel_all()
            for delay in self._catch_up_delays_ms:
                self._catch_ups.call_later(delay, self._flush)

    def user_scrolled(self, distance_from_bottom: float) -> None:
        """Report a manual scroll by the visitor.

        Args:
            distance_from_bottom: How far the viewport now is from the end
        """
        if distance_from_bottom > self._release_distance:
            if self._pinned:
                self._pinned = False
                self._cancel_pending()
                self._debug("debug", LOG_COMPONENT_SCROLL, "Released: visitor scrolled up")
        elif not self._pinned:
            self._pinned = True
            self._debug("debug", LOG_COMPONENT_SCROLL, "Pinned again at the bottom")

    def repin(self) -> None:
        """Pin again and scroll, e.g. after the visitor asked something."""
        self._pinned = True
        self.request_scroll(catch_up=True)

    def detach(self) -> None:
        """Cancel every pending scroll."""
        self._cancel_pending()
        self._catch_ups.close()

    def _cancel_pending(self) -> None:
        if self._frame is not None:
            self._frame.cancel()
            self._frame = None
        self._catch_ups.cancel_all()

    def _flush(self) -> None:
        self._frame = None
        if not self._pinned:
            return
        self._scroll_count += 1
        self._viewport.scroll_to_bottom()

    # ============================================
    # Engine events
    # ============================================

    def on_message_appended(self, message: Message) -> None:
        if message.role is Role.USER:
            self.repin()
        else:
            self.request_scroll(catch_up=True)

    def on_stream_tick(self, message_id: str, prefix: str) -> None:
        self.request_scroll()

    def on_phase_changed(self, old: ConversationPhase, new: ConversationPhase) -> None:
        self.request_scroll(catch_up=True)

    def on_suggestions_changed(self, suggestions: Sequence[str]) -> None:
        self.request_scroll(catch_up=True)

    def on_thinking_stage(self, stage: str | None) -> None:
        self.request_scroll(catch_up=True)

    def on_unmounted(self) -> None:
        self.detach()
