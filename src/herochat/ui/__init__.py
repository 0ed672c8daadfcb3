"""Textual rendering adapter for the hero chat."""

from .app import HeroChatApp, run_textual_tui
from .renderer import TranscriptRenderer
from .scheduler import TextualScheduler
from .themes import HEROCHAT_DARK, HEROCHAT_LIGHT

__all__ = [
    "HEROCHAT_DARK",
    "HEROCHAT_LIGHT",
    "HeroChatApp",
    "TextualScheduler",
    "TranscriptRenderer",
    "run_textual_tui",
]
