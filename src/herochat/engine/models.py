"""Data models for the conversation engine.

Hides the representation of transcript entries and of the engine phase.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"


class ConversationPhase(str, Enum):
    """Where the engine is in the scripted flow. Exactly one is active."""

    IDLE = "idle"                                  # Mounted, waiting for the startup delay
    WELCOMING = "welcoming"                        # Streaming the welcome message
    STREAMING_ASSISTANT = "streaming-assistant"    # Streaming a reply
    AWAITING_USER_INPUT = "awaiting-user-input"    # Suggestions shown, input open
    THINKING = "thinking"                          # Simulated latency before a reply
    DONE_FOR_NOW = "done-for-now"                  # Reply shown, suggestions not yet revealed

    @property
    def is_streaming(self) -> bool:
        return self in (ConversationPhase.WELCOMING, ConversationPhase.STREAMING_ASSISTANT)

    @property
    def accepts_input(self) -> bool:
        return self in (ConversationPhase.AWAITING_USER_INPUT, ConversationPhase.DONE_FOR_NOW)


class Message(BaseModel):
    """One transcript entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique, stable identifier")
    role: Role
    content: str = Field(description="Full final text; streaming only affects display")
    timestamp: datetime = Field(default_factory=datetime.now)


class EngineSnapshot(BaseModel):
    """Everything a renderer needs, captured at one instant."""

    model_config = ConfigDict(frozen=True)

    phase: ConversationPhase
    transcript: list[Message]
    suggestions: list[str]
    streaming_message_id: str | None = None
    streamed_text: str = ""
    thinking_stage: str | None = None
    last_question: str | None = None
