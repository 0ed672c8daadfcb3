"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Theme names registered by the app
THEME_DARK = "herochat-dark"
THEME_LIGHT = "herochat-light"

# Responsive layout, in terminal cells
NARROW_BREAKPOINT_CELLS = 100  # Below this width the floating input may appear
FLOATING_INPUT_SCROLL_ROWS = 12  # Page scroll past which the primary input is out of view
HERO_HEIGHT_RATIO = 0.8  # Share of the screen height taken by the hero section

# Transcript display
STREAM_CURSOR = "▌"  # Shown after the revealed prefix while typing
MESSAGE_TIMESTAMP_FORMAT = "%H:%M:%S"
THINKING_DOTS = "● ● ●"

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
