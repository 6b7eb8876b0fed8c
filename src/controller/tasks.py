"""Task event handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from textual.widgets import Input

    from controller.sync import ViewStateSynchronizer
    from model import ResourceId, Task


class TaskEventsMixin:
    """Mixin for task panel handlers."""

    # Expected from App class
    view_sync: ViewStateSynchronizer
    run_worker: Callable

    def _view_tasks(self, project_id: ResourceId) -> None:
        self.run_worker(self.view_sync.view_tasks(project_id), group="api")

    def _add_task(self, project_id: ResourceId, task_input: Input) -> None:
        """Create a task from the panel input, clearing it on success."""
        title = task_input.value
        if not title.strip():
            return

        async def create() -> None:
            if await self.view_sync.create_task(project_id, title):
                task_input.value = ""

        self.run_worker(create(), group="api")

    def _toggle_task(self, task: Task, project_id: ResourceId) -> None:
        self.run_worker(self.view_sync.toggle_task(task.id, task.done, project_id), group="api")
