"""Task widget: TaskItem."""

from typing import Callable

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Checkbox

from model import Task


class TaskItem(Horizontal):
    """A task row. The checkbox only reflects the server after a re-fetch."""

    def __init__(self, task: Task, on_toggle: Callable[[Task], None]) -> None:
        super().__init__(classes="task-row")
        self.task_record = task
        self._on_toggle = on_toggle

    def compose(self) -> ComposeResult:
        yield Checkbox(Text(self.task_record.title), value=self.task_record.done, classes="task-done")

    @on(Checkbox.Changed, ".task-done")
    def on_done_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        if event.value == self.task_record.done:
            return
        self._on_toggle(self.task_record)
        # Show the server value until the re-fetch replaces this row
        with self.prevent(Checkbox.Changed):
            event.checkbox.value = self.task_record.done
