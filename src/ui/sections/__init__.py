"""Screen sections for the projdesk TUI."""

from ui.sections.project_form import compose_project_form
from ui.sections.viewer import compose_viewer

__all__ = [
    "compose_project_form",
    "compose_viewer",
]
