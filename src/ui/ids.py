"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
HEADER_API = "header-api"
FOOTER_BAR = "footer-bar"
STATUS_BAR = "status-bar"

# New project form
PROJECT_FORM = "project-form"
PROJECT_NAME_INPUT = "project-name-input"
PROJECT_DESCRIPTION_INPUT = "project-description-input"
ADD_PROJECT_BTN = "add-project-btn"
PENDING_FILE = "pending-file"

# Project list
PROJECT_LIST = "project-list"
EMPTY_HINT = "empty-hint"

# File viewer
VIEWER = "viewer"
VIEWER_TITLE = "viewer-title"
VIEWER_ERROR = "viewer-error"
VIEWER_SCROLL = "viewer-scroll"
VIEWER_CONTENT = "viewer-content"
CLOSE_VIEWER_BTN = "close-viewer-btn"

# Modals
MODAL_TITLE = "modal-title"
MODAL_BUTTONS = "modal-buttons"
MODAL_ERROR = "modal-error"
FILE_PATH_INPUT = "file-path-input"
SELECT_FILE_BTN = "select-file-btn"
CANCEL_BTN = "cancel-btn"
