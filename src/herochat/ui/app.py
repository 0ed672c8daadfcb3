"""Main Textual TUI application.

Wires the framework-independent pieces (engine, scroll synchronizer,
autopilot, responsive input surface) to Textual widgets and timers.
"""

import asyncio
import random

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.events import Resize
from textual.widgets import Footer, Header, Static

from ..engine import AutoPilot, ConversationEngine
from ..playbook import DEFAULT_PLAYBOOK, Playbook, get_playbook
from ..responsive import ResponsiveInputSurface
from ..scroll import ScrollSynchronizer
from .config import (
    FLOATING_INPUT_SCROLL_ROWS,
    HERO_HEIGHT_RATIO,
    NARROW_BREAKPOINT_CELLS,
    LogLevel,
)
from .renderer import TranscriptRenderer
from .scheduler import TextualScheduler
from .styles import APP_CSS
from .themes import HEROCHAT_THEMES, theme_name
from .widgets import (
    ChatInputBar,
    DebugPanel,
    FloatingInputBar,
    SuggestionBar,
    ThinkingIndicator,
    TranscriptView,
)

HERO_TAGLINE = "Ask your plant. Get answers grounded in your process data."
HERO_BLURB = (
    "ChatAPC connects to your historian and APC layer, explains active "
    "constraints in plain language and points at the next optimization move. "
    "The conversation above is a scripted preview."
)


class HeroChatApp(App):
    """Textual hero chat demo."""

    CSS = APP_CSS
    TITLE = "ChatAPC"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+r", "restart", "Restart"),
    ]

    def __init__(
        self,
        playbook: Playbook | None = None,
        dark: bool = True,
        seed: int | None = None,
        log_level: str | None = None,
        autopilot: bool | None = None,
    ) -> None:
        super().__init__()
        self._playbook = playbook or get_playbook(DEFAULT_PLAYBOOK)
        self._dark = dark
        self._seed = seed
        self._log_level = log_level
        self._autopilot_override = autopilot
        self._engine: ConversationEngine | None = None
        self._renderer: TranscriptRenderer | None = None
        self._scroll: ScrollSynchronizer | None = None
        self._autopilot: AutoPilot | None = None
        self._surface: ResponsiveInputSurface | None = None
        self._scheduler: TextualScheduler | None = None

    @property
    def engine(self) -> ConversationEngine | None:
        return self._engine

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with VerticalScroll(id="page"):
            yield Static(self._playbook.title, id="hero-title")
            yield Static(HERO_TAGLINE, id="hero-tagline")
            with Vertical(id="chat-card"):
                yield TranscriptView(id="transcript")
                yield ThinkingIndicator(id="thinking")
                yield SuggestionBar(id="suggestions")
            yield ChatInputBar(id="chat-input-bar")
            yield Static(HERO_BLURB, id="blurb")

        yield FloatingInputBar(id="floating-input-bar")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        for theme in HEROCHAT_THEMES:
            self.register_theme(theme)
        self.theme = theme_name(self._dark)
        self.sub_title = self._playbook.description or self._playbook.name

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._scheduler = TextualScheduler(self)
        rng = random.Random(self._seed)

        self._engine = ConversationEngine(self._playbook, self._scheduler, rng=rng)
        self._engine.set_debug_callback(log_panel.callback)

        self._renderer = TranscriptRenderer(
            self._engine,
            transcript=self.query_one("#transcript", TranscriptView),
            thinking=self.query_one("#thinking", ThinkingIndicator),
            suggestions=self.query_one("#suggestions", SuggestionBar),
            input_bar=self.query_one("#chat-input-bar", ChatInputBar),
            floating_bar=self.query_one("#floating-input-bar", FloatingInputBar),
            card=self.query_one("#chat-card", Vertical),
        )
        self._renderer.reset()
        self._attach_scroll()

        settings = self._playbook.autopilot
        if self._autopilot_override is not None:
            settings = settings.model_copy(update={"enabled": self._autopilot_override})
        self._autopilot = AutoPilot(self._engine, self._scheduler, settings=settings, rng=rng)
        self._autopilot.set_debug_callback(log_panel.callback)

        floating_bar = self.query_one("#floating-input-bar", FloatingInputBar)
        self._surface = ResponsiveInputSurface(
            self._engine,
            self._scheduler,
            demo=self._autopilot,
            breakpoint=NARROW_BREAKPOINT_CELLS,
            threshold=FLOATING_INPUT_SCROLL_ROWS,
            hero_ratio=HERO_HEIGHT_RATIO,
            on_visibility_changed=floating_bar.show,
        )
        self._surface.set_debug_callback(log_panel.callback)
        self._surface.on_resize(self.size.width, self.size.height)
        self.watch(self.query_one("#page", VerticalScroll), "scroll_y", self._on_page_scroll, init=False)

        self._engine.mount()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _attach_scroll(self) -> None:
        """Create the scroll synchronizer for the current session."""
        if self._scroll is not None:
            self._engine.remove_listener(self._scroll)
            self._scroll.detach()
        self._scroll = ScrollSynchronizer(self.query_one("#transcript", TranscriptView), self._scheduler)
        self._scroll.set_debug_callback(self.query_one("#debug-panel", DebugPanel).callback)
        self._engine.add_listener(self._scroll)

    def on_unmount(self) -> None:
        """Cancel every engine timer when the app exits.

        The widgets are already gone here, so everything that draws is
        detached before the engine announces its teardown.
        """
        if self._surface is not None:
            self._surface.detach()
        if self._autopilot is not None:
            self._autopilot.detach()
        if self._renderer is not None:
            self._renderer.detach()
        if self._scroll is not None:
            self._engine.remove_listener(self._scroll)
            self._scroll.detach()
        if self._engine is not None:
            self._engine.unmount()

    # ============================================
    # Viewport metrics
    # ============================================

    def on_resize(self, event: Resize) -> None:
        if self._surface is not None:
            self._surface.on_resize(event.size.width, event.size.height)

    def _on_page_scroll(self, scroll_y: float) -> None:
        if self._surface is not None:
            self._surface.on_scroll(scroll_y)

    def on_transcript_view_manual_scroll(self, event: TranscriptView.ManualScroll) -> None:
        if self._scroll is not None:
            self._scroll.user_scrolled(event.distance_from_bottom)

    # ============================================
    # Input
    # ============================================

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle a question typed into the primary input."""
        if self._engine is None:
            return
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        if self._engine.submit(event.value):
            input_bar.accept()
        else:
            self.notify("ChatAPC is still answering", timeout=2)

    def on_suggestion_bar_picked(self, event: SuggestionBar.Picked) -> None:
        if self._engine is not None:
            self._engine.pick_suggestion(event.suggestion)

    def on_floating_input_bar_changed(self, event: FloatingInputBar.Changed) -> None:
        if self._surface is not None:
            self._surface.type_text(event.value)

    def on_floating_input_bar_submitted(self, event: FloatingInputBar.Submitted) -> None:
        if self._surface is None:
            return
        if self._surface.submit(event.value):
            self.query_one("#floating-input-bar", FloatingInputBar).clear()

    # ============================================
    # Actions
    # ============================================

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_toggle_theme(self) -> None:
        """Switch between the dark and light hero themes."""
        self._dark = not self._dark
        self.theme = theme_name(self._dark)

    def action_restart(self) -> None:
        """Start a fresh session with an empty transcript."""
        if self._engine is None:
            return
        self._engine.unmount()
        self._renderer.reset()
        self._attach_scroll()
        self._engine.mount()
        self.notify("Conversation restarted", timeout=2)


async def run_textual_tui(
    playbook: Playbook | None = None,
    dark: bool = True,
    seed: int | None = None,
    log_level: str | None = None,
    autopilot: bool | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        playbook: Playbook to play, the default built-in when None
        dark: Use the dark theme
        seed: Seed for suggestion sampling and autopilot picks
        log_level: Log level for panel (debug/info/warning/error), None to hide
        autopilot: Force the scripted demo on or off, None keeps the playbook's setting
    """
    app = HeroChatApp(
        playbook=playbook,
        dark=dark,
        seed=seed,
        log_level=log_level,
        autopilot=autopilot,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
