"""
Herochat: the scripted conversational demo of the ChatAPC hero section.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .engine import (
    AutoPilot,
    ConversationEngine,
    ConversationPhase,
    EngineListener,
    Message,
    Role,
)
from .playbook import Playbook, get_playbook, load_playbook
from .timing import Scheduler, create_scheduler

__all__ = [
    "AutoPilot",
    "ConversationEngine",
    "ConversationPhase",
    "EngineListener",
    "Message",
    "Playbook",
    "Role",
    "Scheduler",
    "create_scheduler",
    "get_playbook",
    "load_playbook",
]
