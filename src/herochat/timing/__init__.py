"""Host timer primitives for herochat.

Every delay in the engine (startup, thinking, per-character reveal, scroll
catch-up) goes through a Scheduler so it can be fast-forwarded in tests.
"""

from .asyncio_loop import AsyncioScheduler
from .base import Scheduler, TimerHandle
from .factory import create_scheduler
from .group import TimerGroup
from .manual import ManualScheduler

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "TimerGroup",
    "TimerHandle",
    "create_scheduler",
]
