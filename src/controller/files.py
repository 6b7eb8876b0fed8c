"""File upload and viewer event handlers."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from textual.widgets import Button

    from controller.sync import ViewStateSynchronizer
    from model import FileAttachment, ResourceId


class FileEventsMixin:
    """Mixin for file selection, upload and viewing handlers."""

    # Expected from App class
    view_sync: ViewStateSynchronizer
    run_worker: Callable
    push_screen: Callable
    _set_status: Callable

    def _choose_file(self, project_id: ResourceId) -> None:
        """Open the file picker; the result becomes the pending upload."""
        from ui.modals import SelectFileModal

        project = self.view_sync.state.project(project_id)
        name = project.name if project else ""
        self.push_screen(SelectFileModal(name), self._on_file_chosen)

    def _on_file_chosen(self, path: Path | None) -> None:
        if path is not None:
            self.view_sync.select_file(path)
            self._set_status(f"Selected: {path}")

    def _upload_file(self, project_id: ResourceId) -> None:
        if self.view_sync.state.pending_file is None:
            self._set_status("Choose a file first")
            return

        async def upload() -> None:
            if await self.view_sync.upload_file(project_id):
                self._set_status("File uploaded")

        self.run_worker(upload(), group="api")

    def _view_files(self, project_id: ResourceId) -> None:
        self.run_worker(self.view_sync.fetch_files(project_id), group="api")

    def _view_file(self, attachment: FileAttachment) -> None:
        self.run_worker(self.view_sync.view_file(attachment), group="api")

    def on_close_viewer_pressed(self, event: Button.Pressed) -> None:
        """Close the inline file viewer."""
        self.action_close_viewer()

    def action_close_viewer(self) -> None:
        self.view_sync.close_viewed_file()
