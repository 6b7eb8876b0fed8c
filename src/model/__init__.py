"""Model classes for projdesk: mirrors of server-owned records."""

from model.project import Project, ResourceId
from model.attachment import FileAttachment
from model.task import Task
from model.viewed_file import ViewedFile
from model.view_state import ViewState

__all__ = [
    "FileAttachment",
    "Project",
    "ResourceId",
    "Task",
    "ViewState",
    "ViewedFile",
]
