"""Engine listener that draws the conversation into Textual widgets.

Hides the mapping from engine events to widget updates. The renderer
holds no conversation state of its own; everything it shows comes from
the event arguments or from the engine's render target.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..engine import ConversationEngine, ConversationPhase, EngineListener, Message, Role

if TYPE_CHECKING:
    from textual.widget import Widget

    from .widgets import (
        ChatInputBar,
        FloatingInputBar,
        SuggestionBar,
        ThinkingIndicator,
        TranscriptView,
    )

PHASE_LABELS = {
    ConversationPhase.IDLE: "Starting...",
    ConversationPhase.WELCOMING: "Typing...",
    ConversationPhase.STREAMING_ASSISTANT: "Typing...",
    ConversationPhase.AWAITING_USER_INPUT: "Ready",
    ConversationPhase.THINKING: "Analyzing...",
    ConversationPhase.DONE_FOR_NOW: "Ready",
}


class TranscriptRenderer(EngineListener):
    """Keeps the chat card in step with the engine."""

    def __init__(
        self,
        engine: ConversationEngine,
        transcript: "TranscriptView",
        thinking: "ThinkingIndicator",
        suggestions: "SuggestionBar",
        input_bar: "ChatInputBar",
        floating_bar: "FloatingInputBar | None" = None,
        card: "Widget | None" = None,
    ) -> None:
        self._engine = engine
        self._transcript = transcript
        self._thinking = thinking
        self._suggestions = suggestions
        self._input_bar = input_bar
        self._floating_bar = floating_bar
        self._card = card
        engine.add_listener(self)

    def detach(self) -> None:
        self._engine.remove_listener(self)

    def reset(self) -> None:
        """Clear every widget, e.g. before a restart."""
        self._transcript.clear_transcript()
        self._thinking.show_stage(None)
        self._suggestions.set_suggestions(())
        self._set_input_enabled(False)

    def _set_input_enabled(self, enabled: bool) -> None:
        if not self._input_bar.is_attached:
            return
        self._input_bar.set_enabled(enabled)
        if self._floating_bar is not None:
            self._floating_bar.set_enabled(enabled)

    def on_phase_changed(self, old: ConversationPhase, new: ConversationPhase) -> None:
        self._set_input_enabled(self._engine.input_enabled)
        if self._card is not None:
            self._card.border_subtitle = PHASE_LABELS[new]

    def on_message_appended(self, message: Message) -> None:
        streaming = message.role is Role.ASSISTANT
        self._transcript.add_message(message, streaming=streaming)
        if self._card is not None:
            count = len(self._engine.transcript)
            self._card.border_title = f"{self._engine.playbook.title} · {count} messages"

    def on_stream_tick(self, message_id: str, prefix: str) -> None:
        self._transcript.update_stream(message_id, prefix)

    def on_stream_completed(self, message_id: str) -> None:
        self._transcript.finish_stream(message_id)

    def on_suggestions_changed(self, suggestions: Sequence[str]) -> None:
        self._suggestions.set_suggestions(suggestions)

    def on_thinking_stage(self, stage: str | None) -> None:
        self._thinking.show_stage(stage)

    def on_unmounted(self) -> None:
        self._thinking.show_stage(None)
        self._set_input_enabled(False)
