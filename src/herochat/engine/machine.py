"""Conversation state machine.

Hides the scripted flow of the hero chat:
- welcome → suggestions → question → thinking → reply → suggestions
- which actions are accepted in which phase
- every timer the flow needs, grouped so a phase change drops them all

The engine is the only owner of the transcript, the phase and the
suggestion sets. Everything else observes it through EngineListener.
"""

import random
from collections.abc import Sequence
from functools import partial

from ..playbook import AnswerTable, Playbook, SuggestionSelector
from ..streaming import TextStreamer
from ..timing import Scheduler, TimerGroup
from .config import (
    LOG_COMPONENT_ENGINE,
    LOG_COMPONENT_STREAM,
    LOG_PREVIEW_LENGTH,
    MESSAGE_ID_FORMAT,
    WELCOME_MESSAGE_ID,
)
from .debug import DebugLogMixin, truncate
from .listeners import EngineListener
from .models import ConversationPhase, EngineSnapshot, Message, Role

Phase = ConversationPhase


class ConversationEngine(DebugLogMixin):
    """Scripted chat demo engine, independent of any rendering framework.

    Example:
        engine = ConversationEngine(CONSTRAINTS_PLAYBOOK, scheduler, rng=random.Random(1))
        engine.add_listener(renderer)
        engine.mount()
        ...
        engine.submit("Show me optimization opportunities")
        ...
        engine.unmount()

    Invalid actions (empty text, input while busy, stale suggestion
    picks, anything after unmount) are ignored and reported by a False
    return value; the engine has no error state.
    """

    def __init__(
        self,
        playbook: Playbook,
        scheduler: Scheduler,
        rng: random.Random | None = None,
    ) -> None:
        self._playbook = playbook
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        timings = playbook.timings
        self._selector = SuggestionSelector(
            playbook.suggestion_pool,
            rng=self._rng,
            count=timings.suggestion_count,
        )
        self._answers = AnswerTable(playbook, self._selector)
        self._streamer = TextStreamer(scheduler, cadence_ms=timings.cadence_ms)
        self._phase_timers = TimerGroup(scheduler)
        self._listeners: list[EngineListener] = []
        self._mounted = False
        self._reset()

    def _reset(self) -> None:
        self._transcript: list[Message] = []
        self._phase = Phase.IDLE
        self._suggestions: tuple[str, ...] = ()
        self._pending_suggestions: tuple[str, ...] = ()
        self._last_question: str | None = None
        self._streaming_message_id: str | None = None
        self._thinking_stage: str | None = None
        self._stage_index = 0
        self._message_sequence = 0

    # ============================================
    # Listeners
    # ============================================

    def add_listener(self, listener: EngineListener) -> None:
        """Subscribe to engine events."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: EngineListener) -> None:
        """Unsubscribe from engine events."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: str, *args: object) -> None:
        for listener in list(self._listeners):
            getattr(listener, event)(*args)

    # ============================================
    # Render target
    # ============================================

    @property
    def playbook(self) -> Playbook:
        return self._playbook

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def phase(self) -> ConversationPhase:
        return self._phase

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._transcript)

    @property
    def suggestions(self) -> tuple[str, ...]:
        """The visible suggestion set; empty unless awaiting input."""
        return self._suggestions

    @property
    def last_question(self) -> str | None:
        return self._last_question

    @property
    def streaming_message_id(self) -> str | None:
        return self._streaming_message_id

    @property
    def streamed_text(self) -> str:
        """Visible prefix of the message being streamed, '' when none is."""
        if self._streaming_message_id is None:
            return ""
        return self._streamer.prefix

    @property
    def thinking_stage(self) -> str | None:
        return self._thinking_stage

    @property
    def is_typing(self) -> bool:
        return self._phase.is_streaming

    @property
    def is_loading(self) -> bool:
        return self._phase is Phase.THINKING

    @property
    def show_suggestions(self) -> bool:
        return self._phase is Phase.AWAITING_USER_INPUT and bool(self._suggestions)

    @property
    def input_enabled(self) -> bool:
        return self._mounted and self._phase.accepts_input

    @property
    def thinking_indicator_visible(self) -> bool:
        return self._phase is Phase.THINKING and self._thinking_stage is not None

    def snapshot(self) -> EngineSnapshot:
        """Immutable copy of the render target."""
        return EngineSnapshot(
            phase=self._phase,
            transcript=list(self._transcript),
            suggestions=list(self._suggestions),
            streaming_message_id=self._streaming_message_id,
            streamed_text=self.streamed_text,
            thinking_stage=self._thinking_stage,
            last_question=self._last_question,
        )

    # ============================================
    # Lifecycle
    # ============================================

    def mount(self) -> bool:
        """Start the session; the welcome message follows the startup delay.

        Mounting again after unmount() starts a fresh session with an
        empty transcript.
        """
        if self._mounted:
            return False
        if self._phase_timers.closed:
            self._phase_timers = TimerGroup(self._scheduler)
        self._reset()
        self._mounted = True
        delay = self._playbook.timings.startup_delay_ms
        self._debug("info", LOG_COMPONENT_ENGINE,
                    f"Mounted playbook '{self._playbook.name}', welcome in {delay:.0f} ms")
        self._phase_timers.call_later(delay, self._begin_welcome)
        return True

    def unmount(self) -> bool:
        """Tear down: cancel every timer and abandon the stream in flight.

        No listener callback and no completion callback fires afterwards.
        """
        if not self._mounted:
            return False
        self._mounted = False
        self._phase_timers.close()
        if self._streamer.cancel():
            self._debug("debug", LOG_COMPONENT_STREAM,
                        f"Abandoned stream of {self._streaming_message_id}")
        self._streaming_message_id = None
        self._thinking_stage = None
        self._debug("info", LOG_COMPONENT_ENGINE, f"Unmounted in phase {self._phase.value}")
        self._emit("on_unmounted")
        return True

    # ============================================
    # Input entry points
    # ============================================

    def submit(self, text: str | None) -> bool:
        """Submit free text typed by the visitor.

        Returns:
            True if the question was accepted, False if it was ignored
        """
        if not self._mounted:
            return self._ignore("submission after unmount")
        question = (text or "").strip()
        if not question:
            return self._ignore("empty submission")
        if not self._phase.accepts_input:
            return self._ignore(f"submission while {self._phase.value}")
        return self._ask(question)

    def pick_suggestion(self, suggestion: str) -> bool:
        """Ask one of the visible suggestions.

        Returns:
            True if the pick was accepted, False for stale or early picks
        """
        if not self._mounted:
            return self._ignore("suggestion pick after unmount")
        if self._phase is not Phase.AWAITING_USER_INPUT:
            return self._ignore(f"suggestion pick while {self._phase.value}")
        if suggestion not in self._suggestions:
            return self._ignore(f"stale suggestion '{truncate(suggestion, LOG_PREVIEW_LENGTH)}'")
        return self._ask(suggestion)

    def _ignore(self, reason: str) -> bool:
        self._debug("debug", LOG_COMPONENT_ENGINE, f"Ignored {reason}")
        return False

    # ============================================
    # Transitions
    # ============================================

    def _set_phase(self, new: ConversationPhase) -> None:
        old = self._phase
        self._phase_timers.cancel_all()
        if not new.is_streaming:
            self._streamer.cancel()
        if old is new:
            return
        self._phase = new
        if old is Phase.THINKING and self._thinking_stage is not None:
            self._thinking_stage = None
            self._emit("on_thinking_stage", None)
        self._debug("debug", LOG_COMPONENT_ENGINE, f"Phase: {old.value} -> {new.value}")
        self._emit("on_phase_changed", old, new)

    def _set_suggestions(self, suggestions: Sequence[str]) -> None:
        self._suggestions = tuple(suggestions)
        self._emit("on_suggestions_changed", self._suggestions)

    def _append(self, role: Role, content: str, message_id: str | None = None) -> Message:
        if message_id is None:
            self._message_sequence += 1
            message_id = MESSAGE_ID_FORMAT.format(self._message_sequence)
        message = Message(id=message_id, role=role, content=content)
        self._transcript.append(message)
        self._emit("on_message_appended", message)
        return message

    def _begin_welcome(self) -> None:
        self._set_phase(Phase.WELCOMING)
        if not self._mounted:
            return
        self._pending_suggestions = tuple(
            self._playbook.starter_suggestions[:self._playbook.timings.suggestion_count]
        )
        message = self._append(
            Role.ASSISTANT,
            self._playbook.welcome_message,
            message_id=WELCOME_MESSAGE_ID,
        )
        self._start_stream(message)

    def _ask(self, question: str) -> bool:
        timings = self._playbook.timings
        self._last_question = question
        self._pending_suggestions = ()
        self._set_phase(Phase.THINKING)
        self._append(Role.USER, question)
        if self._suggestions:
            self._set_suggestions(())
        self._debug("info", LOG_COMPONENT_ENGINE,
                    f"Question: {truncate(question, LOG_PREVIEW_LENGTH)}")
        self._phase_timers.call_later(timings.thinking_indicator_delay_ms, self._show_thinking)
        self._phase_timers.call_later(timings.thinking_delay_ms, self._deliver_reply, question)
        return True

    def _show_thinking(self) -> None:
        self._stage_index = 0
        self._set_thinking_stage(self._playbook.thinking_stages[0])
        self._phase_timers.call_later(
            self._playbook.timings.stage_interval_ms, self._rotate_thinking_stage
        )

    def _rotate_thinking_stage(self) -> None:
        stages = self._playbook.thinking_stages
        self._stage_index = (self._stage_index + 1) % len(stages)
        self._set_thinking_stage(stages[self._stage_index])
        self._phase_timers.call_later(
            self._playbook.timings.stage_interval_ms, self._rotate_thinking_stage
        )

    def _set_thinking_stage(self, stage: str | None) -> None:
        if stage == self._thinking_stage:
            return
        self._thinking_stage = stage
        self._emit("on_thinking_stage", stage)

    def _deliver_reply(self, question: str) -> None:
        reply = self._answers.lookup(question)
        if reply.is_fallback:
            self._debug("info", LOG_COMPONENT_ENGINE, "No rule matched, using fallback reply")
        else:
            self._debug("info", LOG_COMPONENT_ENGINE, f"Matched rule '{reply.rule_name}'")
        self._set_phase(Phase.STREAMING_ASSISTANT)
        if not self._mounted:
            return
        self._pending_suggestions = reply.suggestions
        message = self._append(Role.ASSISTANT, reply.text)
        self._start_stream(message)

    def _start_stream(self, message: Message) -> None:
        self._streaming_message_id = message.id
        self._debug("debug", LOG_COMPONENT_STREAM,
                    f"Streaming {message.id} ({len(message.content)} chars)")
        self._streamer.start(
            message.content,
            on_complete=partial(self._on_stream_complete, message.id),
            on_tick=partial(self._on_stream_tick, message.id),
        )

    def _on_stream_tick(self, message_id: str, prefix: str) -> None:
        self._emit("on_stream_tick", message_id, prefix)

    def _on_stream_complete(self, message_id: str) -> None:
        self._streaming_message_id = None
        self._emit("on_stream_completed", message_id)
        delay = self._playbook.timings.suggestion_reveal_delay_ms
        if delay > 0:
            self._set_phase(Phase.DONE_FOR_NOW)
            self._phase_timers.call_later(delay, self._reveal_suggestions)
        else:
            self._reveal_suggestions()

    def _reveal_suggestions(self) -> None:
        suggestions = self._pending_suggestions
        self._pending_suggestions = ()
        self._suggestions = suggestions
        self._set_phase(Phase.AWAITING_USER_INPUT)
        self._emit("on_suggestions_changed", self._suggestions)
