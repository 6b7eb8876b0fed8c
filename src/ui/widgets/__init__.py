"""Custom Textual widgets for projdesk.

This package contains all custom widgets organized by domain.
"""

from ui.widgets.attachment import FileItem
from ui.widgets.project import ProjectActions, ProjectItem
from ui.widgets.task import TaskItem

__all__ = [
    "FileItem",
    "ProjectActions",
    "ProjectItem",
    "TaskItem",
]
