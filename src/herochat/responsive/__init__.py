"""Responsive input surface for herochat."""

from .surface import (
    DEFAULT_BREAKPOINT,
    DEFAULT_HERO_RATIO,
    DEFAULT_SCROLL_THRESHOLD,
    DemoSequence,
    ResponsiveInputSurface,
    floating_input_visible,
)

__all__ = [
    "DEFAULT_BREAKPOINT",
    "DEFAULT_HERO_RATIO",
    "DEFAULT_SCROLL_THRESHOLD",
    "DemoSequence",
    "ResponsiveInputSurface",
    "floating_input_visible",
]
