"""Engine configuration constants."""

# Identifier of the welcome message, fixed so renderers can style it
WELCOME_MESSAGE_ID = "welcome-message"

# Sequential ids for every later message: msg-0001, msg-0002, ...
MESSAGE_ID_FORMAT = "msg-{:04d}"

# Characters of a question or reply included in debug log lines
LOG_PREVIEW_LENGTH = 60

# Component names used in debug callbacks
LOG_COMPONENT_ENGINE = "Engine"
LOG_COMPONENT_STREAM = "Stream"
LOG_COMPONENT_AUTOPILOT = "AutoPilot"
LOG_COMPONENT_SCROLL = "Scroll"
LOG_COMPONENT_SURFACE = "Surface"
