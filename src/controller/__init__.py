"""Controller layer: mediates between the remote API, view state and widgets.

This package contains:
- sync: ViewStateSynchronizer for server ↔ mirror synchronization
- render: ViewRenderer for mirror → widget rendering
- Event handler mixins for different UI areas
"""

from controller.sync import ViewStateSynchronizer
from controller.render import ViewRenderer
from controller.projects import ProjectEventsMixin
from controller.tasks import TaskEventsMixin
from controller.files import FileEventsMixin

__all__ = [
    # Sync
    "ViewStateSynchronizer",
    "ViewRenderer",
    # Event mixins
    "FileEventsMixin",
    "ProjectEventsMixin",
    "TaskEventsMixin",
]
