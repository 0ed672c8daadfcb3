"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble rendering and the typing cursor
- Detection of manual scrolling in the transcript
- Suggestion chips and the thinking indicator
- Submission from the primary and floating inputs
- Log rendering and scrolling
"""

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click, MouseScrollDown, MouseScrollUp
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static, TextArea

from ..engine import Message as ChatMessage
from ..engine import Role
from .config import (
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    STREAM_CURSOR,
    THINKING_DOTS,
    LogLevel,
)


class MessageBubble(Vertical):
    """One transcript entry: a header line and the (possibly partial) text."""

    def __init__(self, message: ChatMessage, streaming: bool = False, **kwargs) -> None:
        role_class = "user-message" if message.role is Role.USER else "assistant-message"
        classes = f"chat-message {role_class}" + (" streaming" if streaming else "")
        super().__init__(classes=classes, **kwargs)
        self.message = message
        self._header = Static(self._header_text(), classes="message-header")
        self._content = Static(
            self._render_text("" if streaming else message.content, streaming),
            classes="message-content",
        )

    def _header_text(self) -> Text:
        if self.message.role is Role.USER:
            label, icon = "You", ">"
        else:
            label, icon = "ChatAPC", "<"
        timestamp = self.message.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        return Text(f"{icon} {label} [{timestamp}]")

    @staticmethod
    def _render_text(text: str, streaming: bool) -> Text:
        rendered = Text(text)
        if streaming:
            rendered.append(STREAM_CURSOR, style="bold")
        return rendered

    def compose(self):
        yield self._header
        yield self._content

    def set_text(self, text: str, streaming: bool = False) -> None:
        """Show text, followed by the typing cursor while streaming."""
        self._content.update(self._render_text(text, streaming))
        self.set_class(streaming, "streaming")


class TranscriptView(VerticalScroll):
    """Scrollable transcript of the hero chat.

    Owns no conversation state: the renderer tells it which bubbles to add
    and how much of the streaming one to show.
    """

    class ManualScroll(Message):
        """The visitor scrolled the transcript with the mouse."""

        def __init__(self, distance_from_bottom: float) -> None:
            super().__init__()
            self.distance_from_bottom = distance_from_bottom

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._bubbles: dict[str, MessageBubble] = {}

    @property
    def message_count(self) -> int:
        return len(self._bubbles)

    @property
    def distance_from_bottom(self) -> float:
        return max(0.0, self.max_scroll_y - self.scroll_y)

    def add_message(self, message: ChatMessage, streaming: bool = False) -> MessageBubble:
        """Append a bubble for a message."""
        bubble = MessageBubble(message, streaming=streaming)
        self._bubbles[message.id] = bubble
        self.mount(bubble)
        return bubble

    def update_stream(self, message_id: str, prefix: str) -> None:
        """Show the revealed prefix of a streaming message."""
        bubble = self._bubbles.get(message_id)
        if bubble is not None:
            bubble.set_text(prefix, streaming=True)

    def finish_stream(self, message_id: str) -> None:
        """Show the full text of a message and drop its cursor."""
        bubble = self._bubbles.get(message_id)
        if bubble is not None:
            bubble.set_text(bubble.message.content)

    def clear_transcript(self) -> None:
        """Remove every bubble."""
        self._bubbles.clear()
        self.remove_children()

    def scroll_to_bottom(self) -> None:
        self.scroll_end(animate=False)

    def on_mouse_scroll_up(self, event: MouseScrollUp) -> None:
        self.call_after_refresh(self._report_manual_scroll)

    def on_mouse_scroll_down(self, event: MouseScrollDown) -> None:
        self.call_after_refresh(self._report_manual_scroll)

    def _report_manual_scroll(self) -> None:
        self.post_message(self.ManualScroll(self.distance_from_bottom))


class ThinkingIndicator(Static):
    """Rotating stage label shown while the reply is being "prepared"."""

    def on_mount(self) -> None:
        self.display = False

    def show_stage(self, stage: str | None) -> None:
        """Show a stage label, or hide the indicator for None."""
        if stage is None:
            self.display = False
            self.update("")
            return
        self.update(Text(f"{THINKING_DOTS}  {stage}"))
        self.display = True


class SuggestionButton(Button):
    """A suggestion chip. Pressing it asks the suggestion."""

    def __init__(self, suggestion: str, **kwargs) -> None:
        super().__init__(Text(suggestion), **kwargs)
        self.suggestion = suggestion


class SuggestionBar(Vertical):
    """Follow-up suggestions offered after a reply."""

    class Picked(Message):
        """Message sent when the visitor presses a suggestion."""

        def __init__(self, suggestion: str) -> None:
            super().__init__()
            self.suggestion = suggestion

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._suggestions: tuple[str, ...] = ()

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self._suggestions

    def on_mount(self) -> None:
        self.display = False

    def set_suggestions(self, suggestions: Sequence[str]) -> None:
        """Replace the chips. An empty sequence hides the bar."""
        self._suggestions = tuple(suggestions)
        self.remove_children()
        if self._suggestions:
            self.mount_all(SuggestionButton(s) for s in self._suggestions)
        self.display = bool(self._suggestions)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, SuggestionButton):
            event.stop()
            self.post_message(self.Picked(event.button.suggestion))


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button.

    The text stays in the box after Submitted is posted; the app clears it
    only when the engine accepted the question.
    """

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="primary").with_tooltip(
            "Ask ChatAPC (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()

    def _submit(self) -> None:
        value = self.query_one("#chat-input", TextArea).text.strip()
        if value:
            self.post_message(self.Submitted(value))

    def accept(self) -> None:
        """Clear the box once the engine took the question."""
        self.query_one("#chat-input", TextArea).text = ""

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable sending; typing stays possible."""
        self.query_one("#send-btn", Button).disabled = not enabled
        self.set_class(not enabled, "-disabled")

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class FloatingInputBar(Horizontal):
    """Single-line input pinned to the bottom of narrow terminals."""

    class Changed(Message):
        """The visitor edited the floating input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Submitted(Message):
        """Message sent when the visitor submits the floating input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Input(placeholder="Ask ChatAPC...", id="floating-input")
        yield Button("Send", id="floating-send-btn", variant="primary")

    def on_mount(self) -> None:
        self.display = False

    @property
    def value(self) -> str:
        return self.query_one("#floating-input", Input).value

    def show(self, visible: bool) -> None:
        self.display = visible

    def clear(self) -> None:
        field = self.query_one("#floating-input", Input)
        with field.prevent(Input.Changed):
            field.value = ""

    def set_enabled(self, enabled: bool) -> None:
        self.query_one("#floating-send-btn", Button).disabled = not enabled

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "floating-send-btn":
            event.stop()
            self.post_message(self.Submitted(self.value))


class DebugPanel(RichLog):
    """Log panel for real-time engine tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Engine trace"

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Engine": "green",
        "Stream": "bright_blue",
        "AutoPilot": "magenta",
        "Scroll": "bright_yellow",
        "Surface": "bright_cyan",
    }

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        """Update subtitle to show current log level."""
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Engine, Stream, AutoPilot, ...)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.assemble(
            (f"{timestamp} ", "dim"),
            (f"{LogLevel.name(level):<5} ", level_color),
            (f"[{component}]", comp_color),
            f" {message}",
        )
        self.write(line)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.add_entry(component, message, LogLevel.INFO)

    def callback(self, level: str, component: str, message: str) -> None:
        """Engine debug callback routing into the panel."""
        self.add_entry(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True

    def get_plain_text(self) -> str:
        """Get plain text content of the log for copying."""
        return "\n".join(line.text for line in self.lines)

    def on_click(self, event: Click) -> None:
        """Copy log content to clipboard when clicked."""
        event.stop()
        text = self.get_plain_text()
        if not text.strip():
            self.app.notify("Debug log is empty", timeout=2)
            return
        self.app.copy_to_clipboard(text)
        self.app.notify("Debug log copied", timeout=2)
