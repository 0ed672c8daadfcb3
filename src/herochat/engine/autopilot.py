"""Scripted auto-send demo.

When the visitor leaves the hero chat alone, the autopilot asks one of
the visible suggestions on their behalf so the page keeps demonstrating
itself. It stops for good as soon as the visitor starts typing into the
floating input.
"""

import random

from ..playbook import AutoPilotSettings
from ..timing import Scheduler, TimerGroup
from .config import LOG_COMPONENT_AUTOPILOT, LOG_PREVIEW_LENGTH
from .debug import DebugLogMixin, truncate
from .listeners import EngineListener
from .machine import ConversationEngine
from .models import ConversationPhase


class AutoPilot(EngineListener, DebugLogMixin):
    """Picks a random visible suggestion after an idle period.

    The first pick waits `first_delay_ms` (only the welcome is on screen),
    later ones `repeat_delay_ms`. Two automatic picks are never closer
    than `min_gap_ms`.
    """

    def __init__(
        self,
        engine: ConversationEngine,
        scheduler: Scheduler,
        settings: AutoPilotSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._engine = engine
        self._scheduler = scheduler
        self._settings = settings or engine.playbook.autopilot
        self._rng = rng or random.Random()
        self._timers = TimerGroup(scheduler)
        self._enabled = self._settings.enabled
        self._last_auto_send: float | None = None
        self._auto_sent = 0
        engine.add_listener(self)
        if engine.phase is ConversationPhase.AWAITING_USER_INPUT:
            self._arm()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def active(self) -> bool:
        """True until the demo is cancelled, including while its own reply plays."""
        return self._enabled

    @property
    def armed(self) -> bool:
        """True while an automatic pick is scheduled."""
        return self._enabled and self._timers.pending > 0

    @property
    def auto_sent(self) -> int:
        return self._auto_sent

    def cancel(self) -> bool:
        """Stop the demo for the rest of the session.

        Returns:
            True if the demo was still running
        """
        was_active = self.active
        self._enabled = False
        self._timers.cancel_all()
        if was_active:
            self._debug("info", LOG_COMPONENT_AUTOPILOT, "Demo cancelled by the visitor")
        return was_active

    def detach(self) -> None:
        """Unsubscribe from the engine and drop pending timers."""
        self._engine.remove_listener(self)
        self._timers.close()
        self._enabled = False

    def on_phase_changed(self, old: ConversationPhase, new: ConversationPhase) -> None:
        if new is ConversationPhase.AWAITING_USER_INPUT:
            self._arm()
        else:
            self._timers.cancel_all()

    def on_unmounted(self) -> None:
        self._timers.cancel_all()

    def _arm(self, delay_ms: float | None = None) -> None:
        if not self._enabled:
            return
        self._timers.cancel_all()
        if delay_ms is None:
            only_welcome = len(self._engine.transcript) == 1
            delay_ms = self._settings.first_delay_ms if only_welcome else self._settings.repeat_delay_ms
        self._timers.call_later(delay_ms, self._fire)

    def _fire(self) -> None:
        if not self._enabled or self._engine.phase is not ConversationPhase.AWAITING_USER_INPUT:
            return
        now = self._scheduler.now()
        if self._last_auto_send is not None:
            elapsed = now - self._last_auto_send
            if elapsed < self._settings.min_gap_ms:
                self._arm(self._settings.min_gap_ms - elapsed)
                return
        suggestions = self._engine.suggestions
        if not suggestions:
            return
        choice = self._rng.choice(suggestions)
        self._last_auto_send = now
        self._auto_sent += 1
        self._debug("info", LOG_COMPONENT_AUTOPILOT,
                    f"Auto-sending '{truncate(choice, LOG_PREVIEW_LENGTH)}'")
        self._engine.pick_suggestion(choice)
