"""Conversation engine for herochat.

Module structure (each module hides a design decision):
- models.py: transcript entries and the phase enumeration
- listeners.py: how observers learn about engine events
- machine.py: the scripted conversational flow
- autopilot.py: the idle auto-send demo
- debug.py: debug callback plumbing
- config.py: ids and log component names
"""

from .autopilot import AutoPilot
from .debug import DebugCallback
from .listeners import EngineListener
from .machine import ConversationEngine
from .models import ConversationPhase, EngineSnapshot, Message, Role

__all__ = [
    "AutoPilot",
    "ConversationEngine",
    "ConversationPhase",
    "DebugCallback",
    "EngineListener",
    "EngineSnapshot",
    "Message",
    "Role",
]
