"""Scroll synchronization for the herochat transcript."""

from .synchronizer import (
    DEFAULT_CATCH_UP_DELAYS_MS,
    DEFAULT_RELEASE_DISTANCE,
    ScrollSynchronizer,
    ScrollViewport,
)

__all__ = [
    "DEFAULT_CATCH_UP_DELAYS_MS",
    "DEFAULT_RELEASE_DISTANCE",
    "ScrollSynchronizer",
    "ScrollViewport",
]
