"""Debug callback plumbing shared by engine components.

Components report what they do through an optional callback with the
signature callback(level, component, message), where level is one of
'debug', 'info', 'warning', 'error'. The TUI routes it into its log
panel, the CLI into a Rich console.
"""

from collections.abc import Callable

DebugCallback = Callable[[str, str, str], None]


def truncate(text: str, limit: int) -> str:
    """Shorten text for a log line."""
    text = " ".join(text.split())
    return text if len(text) <= limit else text[:limit] + "..."


class DebugLogMixin:
    """Adds set_debug_callback() and _debug() to a component."""

    _debug_callback: DebugCallback | None = None

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for detailed logging.

        Args:
            callback: Callable(level: str, component: str, message: str),
                      or None to silence the component
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send a debug log message if a callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)
