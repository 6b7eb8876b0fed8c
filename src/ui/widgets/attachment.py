"""File attachment widget: FileItem."""

from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Label

from model import FileAttachment


class FileItem(Horizontal):
    """A file row with a View button."""

    def __init__(self, attachment: FileAttachment, on_view: Callable[[FileAttachment], None]) -> None:
        super().__init__(classes="file-row")
        self.attachment = attachment
        self._on_view = on_view

    def compose(self) -> ComposeResult:
        yield Label(self.attachment.filename, classes="file-name", markup=False)
        yield Button("View", classes="view-file-btn", variant="primary")

    @on(Button.Pressed, ".view-file-btn")
    def on_view_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_view(self.attachment)
