"""Floating input for narrow viewports.

Hides when the secondary input appears and how it feeds the engine:
- visibility is a pure function of viewport width and scroll offset
- scroll events are throttled to one recomputation per animation frame
- submissions go through the engine's own submit(), so both inputs
  share one transcript
- typing cancels the scripted demo before the keystroke is accepted
"""

from collections.abc import Callable
from typing import Any, Protocol

from ..engine import ConversationEngine
from ..engine.config import LOG_COMPONENT_SURFACE
from ..engine.debug import DebugLogMixin
from ..timing import Scheduler, TimerHandle

# Material UI "md" breakpoint, in CSS pixels
DEFAULT_BREAKPOINT = 900
# Scroll distance past which the primary input is considered out of view
DEFAULT_SCROLL_THRESHOLD = 300
# Share of the viewport height taken by the hero section
DEFAULT_HERO_RATIO = 0.8


class DemoSequence(Protocol):
    """A scripted sequence that writes into the transcript on its own."""

    @property
    def active(self) -> bool: ...

    def cancel(self) -> bool: ...


def floating_input_visible(
    viewport_width: float,
    scroll_offset: float,
    viewport_height: float | None = None,
    breakpoint: float = DEFAULT_BREAKPOINT,
    threshold: float = DEFAULT_SCROLL_THRESHOLD,
    hero_ratio: float = DEFAULT_HERO_RATIO,
) -> bool:
    """Whether the floating input should be shown.

    Never on viewports at least `breakpoint` wide. Below it, shown once the
    page has scrolled past min(threshold, viewport_height * hero_ratio).
    """
    if viewport_width >= breakpoint:
        return False
    limit = threshold
    if viewport_height is not None:
        limit = min(threshold, viewport_height * hero_ratio)
    return scroll_offset > limit


class ResponsiveInputSurface(DebugLogMixin):
    """Secondary input control mirroring the primary one."""

    def __init__(
        self,
        engine: ConversationEngine,
        scheduler: Scheduler,
        demo: DemoSequence | None = None,
        breakpoint: float = DEFAULT_BREAKPOINT,
        threshold: float = DEFAULT_SCROLL_THRESHOLD,
        hero_ratio: float = DEFAULT_HERO_RATIO,
        on_visibility_changed: Callable[[bool], Any] | None = None,
    ) -> None:
        self._engine = engine
        self._scheduler = scheduler
        self._demo = demo
        self._breakpoint = breakpoint
        self._threshold = threshold
        self._hero_ratio = hero_ratio
        self._on_visibility_changed = on_visibility_changed
        self._width: float | None = None
        self._height: float | None = None
        self._offset = 0.0
        self._visible = False
        self._frame: TimerHandle | None = None
        self._recomputations = 0
        self._draft = ""
        self._detached = False

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def recomputations(self) -> int:
        """How many times visibility was evaluated."""
        return self._recomputations

    @property
    def enabled(self) -> bool:
        """Whether the control accepts a submission right now."""
        return self._engine.input_enabled

    # ============================================
    # Viewport metrics
    # ============================================

    def on_scroll(self, offset: float) -> None:
        """Record a scroll position; recomputed on the next frame."""
        if self._detached:
            return
        self._offset = offset
        if self._frame is None:
            self._frame = self._scheduler.call_next_frame(self._on_frame)

    def on_resize(self, width: float, height: float | None = None) -> None:
        """Record new viewport dimensions and recompute immediately."""
        if self._detached:
            return
        self._width = width
        self._height = height
        self._recompute()

    def _on_frame(self) -> None:
        self._frame = None
        self._recompute()

    def _recompute(self) -> None:
        self._recomputations += 1
        if self._width is None:
            visible = False
        else:
            visible = floating_input_visible(
                self._width,
                self._offset,
                self._height,
                breakpoint=self._breakpoint,
                threshold=self._threshold,
                hero_ratio=self._hero_ratio,
            )
        if visible != self._visible:
            self._visible = visible
            self._debug("debug", LOG_COMPONENT_SURFACE,
                        f"Floating input {'shown' if visible else 'hidden'}")
            if self._on_visibility_changed is not None:
                self._on_visibility_changed(visible)

    # ============================================
    # Input
    # ============================================

    def type_text(self, value: str) -> None:
        """Accept the current content of the floating input.

        A running demo sequence is cancelled first, so the transcript only
        ever has one source of truth.
        """
        if value and self._demo is not None and self._demo.active:
            self._demo.cancel()
            self._debug("info", LOG_COMPONENT_SURFACE, "Typing cancelled the demo sequence")
        self._draft = value

    def submit(self, text: str | None = None) -> bool:
        """Send the draft (or text) through the engine's submit entry point.

        Returns:
            True if the engine accepted the question
        """
        if text is not None:
            self.type_text(text)
        accepted = self._engine.submit(self._draft)
        if accepted:
            self._draft = ""
        return accepted

    def detach(self) -> None:
        """Stop reacting to viewport events."""
        self._detached = True
        if self._frame is not None:
            self._frame.cancel()
            self._frame = None
