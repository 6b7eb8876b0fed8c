"""UI module containing widgets, styles, and screen sections."""

from ui.widgets import (
    FileItem,
    ProjectActions,
    ProjectItem,
    TaskItem,
)
from ui.sections import (
    compose_project_form,
    compose_viewer,
)
from ui.helpers import completion_label, format_percentage, pending_file_label
from ui.modals import SelectFileModal
from ui import ids

__all__ = [
    # Widgets
    "FileItem",
    "ProjectActions",
    "ProjectItem",
    "TaskItem",
    # Sections
    "compose_project_form",
    "compose_viewer",
    # Modals
    "SelectFileModal",
    # Helpers
    "completion_label",
    "format_percentage",
    "pending_file_label",
]
