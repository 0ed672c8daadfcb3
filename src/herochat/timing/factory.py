"""Factory for creating schedulers."""

from typing import Any

from .base import Scheduler


def create_scheduler(kind: str = "asyncio", **kwargs: Any) -> Scheduler:
    """Create a scheduler.

    Args:
        kind: Scheduler type ("asyncio" or "manual")
        **kwargs: Scheduler-specific configuration

    Returns:
        Scheduler instance

    Raises:
        ValueError: If the scheduler type is not supported
    """
    if kind == "asyncio":
        from .asyncio_loop import AsyncioScheduler
        return AsyncioScheduler(**kwargs)

    elif kind == "manual":
        from .manual import ManualScheduler
        return ManualScheduler(**kwargs)

    raise ValueError(
        f"Unsupported scheduler: {kind}. "
        f"Supported schedulers: asyncio, manual"
    )
