"""Project event handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual.css.query import NoMatches
from textual.widgets import Input

from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from textual.widgets import Button

    from controller.sync import ViewStateSynchronizer
    from model import ResourceId

log = logging.getLogger(__name__)


class ProjectEventsMixin:
    """Mixin for project list and new-project form handlers."""

    # Expected from App class
    view_sync: ViewStateSynchronizer
    query_one: Callable
    run_worker: Callable
    _set_status: Callable

    def on_add_project_pressed(self, event: Button.Pressed) -> None:
        """Create a project from the form inputs."""
        self._add_project_from_inputs()

    def on_description_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in the description input."""
        self._add_project_from_inputs()

    def _add_project_from_inputs(self) -> None:
        """Send the form to the server; inputs clear only once it succeeds."""
        try:
            name_input = self.query_one(css(ids.PROJECT_NAME_INPUT), Input)
            description_input = self.query_one(css(ids.PROJECT_DESCRIPTION_INPUT), Input)
        except NoMatches:
            log.debug("Project form inputs not found")
            return

        async def create() -> None:
            if await self.view_sync.create_project(name_input.value, description_input.value):
                name_input.value = ""
                description_input.value = ""
                self._set_status("Project created")

        self.run_worker(create(), group="api")

    def _delete_project(self, project_id: ResourceId) -> None:
        async def delete() -> None:
            if await self.view_sync.delete_project(project_id):
                self._set_status(f"Deleted project {project_id}")

        self.run_worker(delete(), group="api")

    def action_reload(self) -> None:
        """Re-fetch every project and its completion."""
        self._set_status("Loading projects...")

        async def reload() -> None:
            if await self.view_sync.load_projects():
                self._set_status(f"Loaded {len(self.view_sync.state.projects)} project(s)")

        self.run_worker(reload(), group="api")
