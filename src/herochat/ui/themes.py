"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes of the dark and light hero variants
- Theme variables (borders, scrollbars, etc.)

The theme flag is the only thing the host passes in; it changes colors,
never behavior.
"""

from textual.theme import Theme

from .config import THEME_DARK, THEME_LIGHT

# Deep navy with the product's cyan accent
HEROCHAT_DARK = Theme(
    name=THEME_DARK,
    primary="#009BE4",      # Cyan - main accent, assistant bubbles
    secondary="#60A5FA",    # Sky blue - user bubbles
    accent="#38BDF8",       # Light cyan - highlights, suggestion hover
    foreground="#EBEEF3",   # Near-white text
    background="#0B1220",   # Page background
    success="#34D399",
    warning="#FBBF24",
    error="#F87171",
    surface="#151E2E",      # Chat card
    panel="#101827",        # Panels and bars
    dark=True,
    variables={
        "border": "#344054",
        "border-blurred": "#1F2A3C",

        "scrollbar": "#1F2A3C",
        "scrollbar-hover": "#344054",
        "scrollbar-active": "#009BE4",
        "scrollbar-background": "#101827",
        "scrollbar-corner-color": "#101827",

        "input-cursor-background": "#009BE4",
        "input-selection-background": "#009BE4 30%",

        "footer-background": "#0B1220",
        "footer-key-foreground": "#38BDF8",
        "footer-key-background": "#1F2A3C",

        "text-muted": "#98A2B3",
        "text-disabled": "#475467",
    },
)

# Slate on white with the product's blue accent
HEROCHAT_LIGHT = Theme(
    name=THEME_LIGHT,
    primary="#2563EB",      # Blue - main accent, assistant bubbles
    secondary="#3B82F6",    # Lighter blue - user bubbles
    accent="#1E40AF",       # Deep blue - highlights
    foreground="#0F172A",   # Slate text
    background="#F8FAFC",
    success="#059669",
    warning="#D97706",
    error="#DC2626",
    surface="#FFFFFF",
    panel="#E2E8F0",
    dark=False,
    variables={
        "border": "#CBD5E1",
        "border-blurred": "#E2E8F0",

        "scrollbar": "#CBD5E1",
        "scrollbar-hover": "#94A3B8",
        "scrollbar-active": "#2563EB",
        "scrollbar-background": "#F1F5F9",
        "scrollbar-corner-color": "#F1F5F9",

        "input-cursor-background": "#2563EB",
        "input-selection-background": "#2563EB 25%",

        "footer-background": "#E2E8F0",
        "footer-key-foreground": "#1E40AF",
        "footer-key-background": "#CBD5E1",

        "text-muted": "#64748B",
        "text-disabled": "#94A3B8",
    },
)

HEROCHAT_THEMES = (HEROCHAT_DARK, HEROCHAT_LIGHT)


def theme_name(dark: bool) -> str:
    """Registered theme name for the theme flag."""
    return THEME_DARK if dark else THEME_LIGHT
