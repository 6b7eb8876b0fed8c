"""Project widget: ProjectItem and the callbacks it drives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Input, Label, Static

from model import FileAttachment, Project, ResourceId, Task, ViewState
from ui.helpers import completion_label, set_visible
from ui.widgets.attachment import FileItem
from ui.widgets.task import TaskItem


@dataclass
class ProjectActions:
    """Callbacks a ProjectItem forwards user intents to."""

    choose_file: Callable[[ResourceId], None]
    upload_file: Callable[[ResourceId], None]
    view_files: Callable[[ResourceId], None]
    view_tasks: Callable[[ResourceId], None]
    delete_project: Callable[[ResourceId], None]
    add_task: Callable[[ResourceId, Input], None]
    toggle_task: Callable[[Task, ResourceId], None]
    view_file: Callable[[FileAttachment], None]


class ProjectItem(Container):
    """A project row with its actions, task panel and file list.

    The row is created once per project and updated in place from ViewState,
    so typing in the task input survives background refreshes.
    """

    def __init__(self, project: Project, actions: ProjectActions) -> None:
        super().__init__(classes="project-item")
        self.project = project
        self._project_actions = actions
        self._rows_ready = False
        self._completion: float = 0
        self._panel_open = False
        self._task_records: list[Task] | None = None
        self._file_records: list[FileAttachment] | None = None

    @property
    def project_id(self) -> ResourceId:
        return self.project.id

    def compose(self) -> ComposeResult:
        with Horizontal(classes="project-header"):
            yield Label(self.project.name, classes="project-name", markup=False)
            yield Static(self.project.description, classes="project-description", markup=False)
            yield Static(completion_label(self._completion), classes="project-completion")
        with Horizontal(classes="project-actions"):
            yield Button("Choose File", classes="choose-file-btn")
            yield Button("Upload File", classes="upload-btn", variant="success")
            yield Button("View Files", classes="view-files-btn", variant="primary")
            yield Button("View Tasks", classes="view-tasks-btn", variant="warning")
            yield Button("Delete Project", classes="delete-project-btn", variant="error")
        with Vertical(classes="task-panel hidden"):
            with Horizontal(classes="task-form"):
                yield Input(placeholder="New Task", classes="task-input")
                yield Button("Add Task", classes="add-task-btn", variant="primary")
            yield Vertical(classes="task-list")
        yield Vertical(classes="file-list")

    def on_mount(self) -> None:
        self._rows_ready = True
        self._apply()

    def update_from(self, state: ViewState) -> None:
        """Take this project's entries from the mirrors and redraw what changed."""
        pid = self.project.id
        self._completion = state.completion_for(pid)
        self._panel_open = state.is_selected(pid)
        tasks = state.tasks_for(pid)
        files = state.files_for(pid)
        tasks_changed = tasks != self._task_records
        files_changed = files != self._file_records
        self._task_records = list(tasks)
        self._file_records = list(files)
        if self._rows_ready:
            self._apply(tasks_changed, files_changed)

    def _apply(self, tasks_changed: bool = True, files_changed: bool = True) -> None:
        self.query_one(".project-completion", Static).update(completion_label(self._completion))
        set_visible(self.query_one(".task-panel"), self._panel_open)
        if tasks_changed:
            task_list = self.query_one(".task-list", Vertical)
            task_list.remove_children()
            if self._task_records:
                task_list.mount_all(TaskItem(t, self._on_toggle_task) for t in self._task_records)
        if files_changed:
            file_list = self.query_one(".file-list", Vertical)
            file_list.remove_children()
            if self._file_records:
                file_list.mount_all(FileItem(f, self._project_actions.view_file) for f in self._file_records)

    def _on_toggle_task(self, task: Task) -> None:
        self._project_actions.toggle_task(task, self.project.id)

    @on(Button.Pressed, ".choose-file-btn")
    def on_choose_file_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._project_actions.choose_file(self.project.id)

    @on(Button.Pressed, ".upload-btn")
    def on_upload_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._project_actions.upload_file(self.project.id)

    @on(Button.Pressed, ".view-files-btn")
    def on_view_files_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._project_actions.view_files(self.project.id)

    @on(Button.Pressed, ".view-tasks-btn")
    def on_view_tasks_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._project_actions.view_tasks(self.project.id)

    @on(Button.Pressed, ".delete-project-btn")
    def on_delete_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._project_actions.delete_project(self.project.id)

    @on(Button.Pressed, ".add-task-btn")
    def on_add_task_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._project_actions.add_task(self.project.id, self.query_one(".task-input", Input))

    @on(Input.Submitted, ".task-input")
    def on_task_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._project_actions.add_task(self.project.id, event.input)
