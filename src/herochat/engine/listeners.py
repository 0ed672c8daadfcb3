"""Observer interface for the conversation engine.

Renderers, the scroll synchronizer and the autopilot subclass
EngineListener and override only the events they care about. Listeners
read engine state and call back into the engine; they never mutate the
transcript themselves.
"""

from collections.abc import Sequence

from .models import ConversationPhase, Message


class EngineListener:
    """No-op base for engine event handlers."""

    def on_phase_changed(self, old: ConversationPhase, new: ConversationPhase) -> None:
        """The engine moved from one phase to another."""

    def on_message_appended(self, message: Message) -> None:
        """A message was added to the end of the transcript."""

    def on_stream_tick(self, message_id: str, prefix: str) -> None:
        """One more character of the streaming message is visible."""

    def on_stream_completed(self, message_id: str) -> None:
        """The streaming message is fully revealed."""

    def on_suggestions_changed(self, suggestions: Sequence[str]) -> None:
        """The visible suggestion set changed (empty when hidden)."""

    def on_thinking_stage(self, stage: str | None) -> None:
        """The thinking indicator label changed (None when it is hidden)."""

    def on_unmounted(self) -> None:
        """The engine was torn down; no further events will arrive."""
