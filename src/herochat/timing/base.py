"""Abstract base classes for host timer primitives.

This module defines the only "OS" dependency of the engine.
The abstraction hides:
- Which event loop runs the callbacks (asyncio, Textual, virtual clock)
- How delays and animation frames are measured
- How a scheduled callback is cancelled
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class TimerHandle(ABC):
    """Handle to a callback scheduled on a Scheduler."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Idempotent."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """True once cancel() has been called."""

    @property
    @abstractmethod
    def done(self) -> bool:
        """True once the callback has run."""


class Scheduler(ABC):
    """Delayed and per-frame callback scheduling.

    Delays are expressed in milliseconds. Implementations run every
    callback on a single thread, one at a time.
    """

    @abstractmethod
    def call_later(
        self,
        delay_ms: float,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        """Run callback(*args) after delay_ms milliseconds."""

    @abstractmethod
    def call_next_frame(
        self,
        callback: Callable[..., Any],
        *args: Any
    ) -> TimerHandle:
        """Run callback(*args) on the next animation frame, after paint."""

    @abstractmethod
    def now(self) -> float:
        """Current time in milliseconds (monotonic)."""

    @property
    @abstractmethod
    def scheduler_type(self) -> str:
        """Get the scheduler type identifier."""
