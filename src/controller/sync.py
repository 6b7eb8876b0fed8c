"""ViewStateSynchronizer: keeps the local mirrors consistent with the server."""

from __future__ import annotations

import asyncio
import logging
import webbrowser
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from api import ApiError
from file_view import RenderedContent, ViewMode, classify, file_extension, render_content
from model import FileAttachment, ResourceId, ViewedFile, ViewState

if TYPE_CHECKING:
    from api import ProjectApiClient

log = logging.getLogger(__name__)

# Action labels shown in error notifications
LOAD_PROJECTS = "Load projects"
CREATE_PROJECT = "Create project"
DELETE_PROJECT = "Delete project"
UPLOAD_FILE = "Upload file"
LIST_FILES = "List files"
LIST_TASKS = "List tasks"
CREATE_TASK = "Add task"
TOGGLE_TASK = "Update task"
COMPLETION = "Fetch completion"
VIEW_FILE = "View file"


class ViewStateSynchronizer:
    """Translates user intents into API calls and reconciles the results.

    Local state is never patched optimistically. Each mutating call waits for
    the server, then re-fetches the affected collection, so the mirrors always
    hold the last successful server response.

    1. **Reads** (fetch_files, fetch_tasks, fetch_completion) replace one
       project's entry in the matching mirror.

    2. **Mutations** (create_task, toggle_task, upload_file) re-fetch the
       collections they affect once the server confirms them.

    3. **Failures** leave state untouched and are reported through on_error
       with the label of the action that failed.

    Responses for a project that was deleted while the request was in flight
    are dropped on arrival.

    Example usage:
        sync = ViewStateSynchronizer(api, on_change=refresh, on_error=notify)
        await sync.load_projects()
        await sync.view_tasks(project_id)
    """

    def __init__(
        self,
        api: ProjectApiClient,
        state: ViewState | None = None,
        on_change: Callable[[], None] | None = None,
        on_error: Callable[[str, ApiError], None] | None = None,
        open_url: Callable[[str], object] = webbrowser.open_new_tab,
    ) -> None:
        self.api = api
        self.state = state if state is not None else ViewState()
        self._on_change = on_change
        self._on_error = on_error
        self._open_url = open_url

    def _changed(self) -> None:
        if self._on_change:
            self._on_change()

    def _failed(self, action: str, error: ApiError) -> None:
        log.warning(f"{action} failed: {error}")
        if self._on_error:
            self._on_error(action, error)

    def _is_stale(self, project_id: ResourceId) -> bool:
        """True when a response arrives for a project no longer mirrored."""
        if self.state.has_project(project_id):
            return False
        log.debug(f"Discarding response for removed project {project_id}")
        return True

    # =========================================================================
    # Projects
    # =========================================================================

    async def load_projects(self) -> bool:
        """Fetch all projects, then each project's completion concurrently."""
        try:
            projects = await self.api.list_projects()
        except ApiError as e:
            self._failed(LOAD_PROJECTS, e)
            return False

        self.state.replace_projects(projects)
        self._changed()
        # Each fetch writes only its own key, so completion order is immaterial
        await asyncio.gather(*(self.fetch_completion(p.id) for p in projects))
        return True

    async def create_project(self, name: str, description: str) -> bool:
        """Create a project and append the server's record to the mirror."""
        try:
            project = await self.api.create_project(name, description)
        except ApiError as e:
            self._failed(CREATE_PROJECT, e)
            return False

        self.state.projects.append(project)
        log.info(f"Created project {project.id}: {project.name}")
        self._changed()
        return True

    async def delete_project(self, project_id: ResourceId) -> bool:
        """Delete a project; local removal only happens after confirmation."""
        try:
            await self.api.delete_project(project_id)
        except ApiError as e:
            self._failed(DELETE_PROJECT, e)
            return False

        self.state.forget_project(project_id)
        log.info(f"Deleted project {project_id}")
        self._changed()
        return True

    async def fetch_completion(self, project_id: ResourceId) -> None:
        try:
            percentage = await self.api.get_completion(project_id)
        except ApiError as e:
            self._failed(COMPLETION, e)
            return
        if self._is_stale(project_id):
            return
        self.state.completion[project_id] = percentage
        self._changed()

    # =========================================================================
    # Files
    # =========================================================================

    def select_file(self, path: Path | None) -> None:
        """Set the local file used by the next upload."""
        self.state.pending_file = path
        self._changed()

    async def upload_file(self, project_id: ResourceId) -> bool:
        """Upload the pending file. No-op when nothing is selected."""
        path = self.state.pending_file
        if path is None:
            return False
        try:
            await self.api.upload_file(project_id, path)
        except ApiError as e:
            self._failed(UPLOAD_FILE, e)
            return False

        log.info(f"Uploaded {path} to project {project_id}")
        await self.fetch_files(project_id)
        self.state.pending_file = None
        self._changed()
        return True

    async def fetch_files(self, project_id: ResourceId) -> None:
        """Fetch the file listing and open that project's detail panel."""
        try:
            files = await self.api.list_files(project_id)
        except ApiError as e:
            self._failed(LIST_FILES, e)
            return
        if self._is_stale(project_id):
            return
        self.state.files[project_id] = files
        self.state.selected_project_id = project_id
        self._changed()

    async def view_file(self, attachment: FileAttachment) -> None:
        """Open a file externally or load its text into the viewer slot."""
        if classify(attachment.filename) is ViewMode.EXTERNAL:
            url = self.api.file_view_url(attachment.id)
            log.info(f"Opening {url} externally")
            self._open_url(url)
            return

        try:
            content = await self.api.get_file_text(attachment.id)
        except ApiError as e:
            self._failed(VIEW_FILE, e)
            return
        self.state.viewed_file = ViewedFile(
            file_id=attachment.id,
            filename=attachment.filename,
            extension=file_extension(attachment.filename),
            content=content,
        )
        self._changed()

    def close_viewed_file(self) -> None:
        self.state.viewed_file = None
        self._changed()

    def rendered_viewed_file(self) -> RenderedContent | None:
        """Display-ready content of the viewer slot, if a file is open."""
        viewed = self.state.viewed_file
        if viewed is None:
            return None
        return render_content(viewed.content, viewed.extension)

    # =========================================================================
    # Tasks
    # =========================================================================

    async def fetch_tasks(self, project_id: ResourceId) -> None:
        try:
            tasks = await self.api.list_tasks(project_id)
        except ApiError as e:
            self._failed(LIST_TASKS, e)
            return
        if self._is_stale(project_id):
            return
        self.state.tasks[project_id] = tasks
        self._changed()

    async def _refresh_tasks(self, project_id: ResourceId) -> None:
        await asyncio.gather(self.fetch_tasks(project_id), self.fetch_completion(project_id))

    async def view_tasks(self, project_id: ResourceId) -> None:
        """Expand a project's detail panel and load its tasks and completion."""
        self.state.selected_project_id = project_id
        self._changed()
        await self._refresh_tasks(project_id)

    async def create_task(self, project_id: ResourceId, title: str) -> bool:
        """Add a task. Blank titles are ignored without a request."""
        if not title.strip():
            return False
        try:
            await self.api.create_task(project_id, title)
        except ApiError as e:
            self._failed(CREATE_TASK, e)
            return False

        await self._refresh_tasks(project_id)
        return True

    async def toggle_task(self, task_id: ResourceId, done: bool, project_id: ResourceId) -> bool:
        """Ask the server to flip a task's done flag, then re-fetch."""
        try:
            await self.api.update_task(task_id, not done)
        except ApiError as e:
            self._failed(TOGGLE_TASK, e)
            return False

        await self._refresh_tasks(project_id)
        return True
