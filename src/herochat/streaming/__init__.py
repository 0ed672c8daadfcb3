"""Timed text streaming for herochat.

Turns a string into a lazily revealed sequence of prefixes at a fixed
cadence; the typing effect every assistant message is shown with.
"""

from .models import StreamCursor, iter_prefixes
from .streamer import DEFAULT_CADENCE_MS, TextStreamer

__all__ = [
    "DEFAULT_CADENCE_MS",
    "StreamCursor",
    "TextStreamer",
    "iter_prefixes",
]
