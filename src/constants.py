"""Shared constants for projdesk."""

APP_NAME = "projdesk"
APP_VERSION = "0.1.0"

# Environment overrides for the API connection
API_BASE_ENV = "PROJDESK_API_BASE"
TIMEOUT_ENV = "PROJDESK_TIMEOUT"

DEFAULT_API_BASE = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0

# Extensions handed to the system viewer instead of previewed inline
BROWSER_VIEWABLE = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "webp", "pdf", "txt"})

# Extensions that are parsed and pretty-printed in the viewer
STRUCTURED_FORMATS = frozenset({"json"})

JSON_INDENT = 2
