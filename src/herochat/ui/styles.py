"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout:
- A scrolling page: hero title, the chat card, the marketing blurb
- The floating input docked to the bottom, hidden until needed
- An optional debug panel docked to the right

Visibility of the thinking indicator, suggestions, floating input and
debug panel is toggled through the widgets' display property.
"""

APP_CSS = """
/* ============================================
   CSS Variables - Design Tokens
   ============================================ */

$panel-border: tall $border;
$panel-border-focus: tall $primary;

/* ============================================
   Page Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

#page {
    height: 1fr;
    padding: 0 2;
    scrollbar-gutter: stable;
}

/* ============================================
   Hero Section
   ============================================ */
#hero-title {
    width: 100%;
    height: auto;
    margin: 1 0 0 0;
    content-align: center middle;
    text-align: center;
    color: $primary;
    text-style: bold;
}

#hero-tagline {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Chat Card - Transcript, Thinking, Suggestions
   ============================================ */
#chat-card {
    height: auto;
    background: $surface;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;

    &:focus-within {
        border: round $primary;
    }
}

#transcript {
    height: 18;
    min-height: 8;
    padding: 0 1;
    scrollbar-gutter: stable;
}

/* ============================================
   Chat Messages - Conversation Display
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    border: none;
    background: transparent;
}

/* Visitor questions - secondary accent */
.user-message {
    border-left: tall $secondary;
    background: $secondary 10%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

/* Scripted replies - primary accent */
.assistant-message {
    border-left: tall $primary;
    background: $primary 8%;

    & .message-header {
        color: $primary;
        text-style: bold;
    }
}

/* Message being typed */
.streaming {
    border-left: tall $accent;
}

.message-header {
    height: auto;
    padding: 0;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
    color: $foreground;
}

/* ============================================
   Thinking Indicator
   ============================================ */
ThinkingIndicator {
    height: auto;
    padding: 0 2;
    color: $accent;
    text-style: italic;
}

/* ============================================
   Suggestion Chips
   ============================================ */
SuggestionBar {
    height: auto;
    padding: 0 1;
}

SuggestionButton {
    width: 100%;
    height: 3;
    margin: 0 0 0 0;
    background: $primary 12%;
    color: $foreground;
    border: tall $primary 40%;
    content-align: left middle;

    &:hover {
        background: $primary 25%;
        border: tall $primary;
    }

    &:focus {
        border: tall $accent;
        text-style: bold;
    }
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    margin: 1 0 0 0;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }

    &.-disabled {
        border: round $border;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;

    &:focus {
        background: transparent;
    }
}

#send-btn, #floating-send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    border: tall $primary;
    background: $primary;
    color: $background;
    text-style: bold;

    &:hover {
        background: $primary-lighten-1;
        border: tall $primary-lighten-1;
    }

    &:disabled {
        background: $panel;
        border: tall $border;
        color: $text-disabled;
    }
}

/* ============================================
   Floating Input - Narrow Viewports
   ============================================ */
FloatingInputBar {
    dock: bottom;
    height: 5;
    padding: 1 2;
    background: $panel;
    border-top: solid $primary;
}

#floating-input {
    width: 1fr;
}

/* ============================================
   Marketing Blurb
   ============================================ */
#blurb {
    height: auto;
    margin: 2 0;
    padding: 1 2;
    border: round $border;
    color: $text-muted;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    dock: right;
    width: 60;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;

    &:focus {
        border: round $warning;
    }
}

/* ============================================
   Scrollbar Styling
   ============================================ */
* {
    scrollbar-background: $panel;
    scrollbar-color: $surface-lighten-1;
    scrollbar-color-hover: $primary 50%;
    scrollbar-color-active: $primary;
    scrollbar-size: 1 1;
}

/* ============================================
   Header and Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
    dock: top;
    height: 1;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
    height: auto;
}

FooterKey {
    background: $surface;
    color: $foreground;
    padding: 0 1;

    & > .footer-key--key {
        background: $primary 80%;
        color: $background;
        text-style: bold;
    }

    &:hover {
        background: $primary 15%;
    }
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
        color: $foreground;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
        color: $foreground;
    }
}
"""
