"""In-memory mirrors of server state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from model.attachment import FileAttachment
from model.project import Project, ResourceId
from model.task import Task
from model.viewed_file import ViewedFile


@dataclass
class ViewState:
    """Everything the client knows about the server, keyed by project id.

    The per-project mirrors (files, tasks, completion) are explicit mappings.
    Deleting a project removes its key from each of them via forget_project();
    nothing relies on orphaned entries being ignored.
    """

    projects: list[Project] = field(default_factory=list)
    files: dict[ResourceId, list[FileAttachment]] = field(default_factory=dict)
    tasks: dict[ResourceId, list[Task]] = field(default_factory=dict)
    completion: dict[ResourceId, float] = field(default_factory=dict)
    selected_project_id: ResourceId | None = None
    viewed_file: ViewedFile | None = None
    pending_file: Path | None = None

    def project(self, project_id: ResourceId) -> Project | None:
        """Return the mirrored project with this id, if any."""
        for project in self.projects:
            if project.id == project_id:
                return project
        return None

    def has_project(self, project_id: ResourceId) -> bool:
        return self.project(project_id) is not None

    def completion_for(self, project_id: ResourceId) -> float:
        """Last server-reported percentage, 0 until the first fetch lands."""
        return self.completion.get(project_id, 0)

    def files_for(self, project_id: ResourceId) -> list[FileAttachment]:
        return self.files.get(project_id, [])

    def tasks_for(self, project_id: ResourceId) -> list[Task]:
        return self.tasks.get(project_id, [])

    def is_selected(self, project_id: ResourceId) -> bool:
        return self.selected_project_id == project_id

    def forget_project(self, project_id: ResourceId) -> None:
        """Drop a project and every per-project entry keyed by it."""
        self.projects = [p for p in self.projects if p.id != project_id]
        self.files.pop(project_id, None)
        self.tasks.pop(project_id, None)
        self.completion.pop(project_id, None)
        if self.selected_project_id == project_id:
            self.selected_project_id = None

    def replace_projects(self, projects: list[Project]) -> None:
        """Install a fresh project listing and prune entries for vanished ids."""
        self.projects = list(projects)
        live = {p.id for p in self.projects}
        for mirror in (self.files, self.tasks, self.completion):
            for project_id in [k for k in mirror if k not in live]:
                del mirror[project_id]
        if self.selected_project_id is not None and self.selected_project_id not in live:
            self.selected_project_id = None
