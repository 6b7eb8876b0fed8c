"""Modal dialogs for choosing a local file to upload."""

from __future__ import annotations

from pathlib import Path

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

import ui.ids as ids
from ui.ids import css


def resolve_upload_path(value: str) -> tuple[Path | None, str | None]:
    """Turn typed text into an existing file path.

    Returns (path, None) on success or (None, error message).
    """
    stripped = value.strip()
    if not stripped:
        return None, "Enter a file path"
    path = Path(stripped).expanduser().resolve()
    if not path.exists():
        return None, f"Path does not exist: {path}"
    if not path.is_file():
        return None, f"Not a file: {path}"
    return path, None


class SelectFileModal(ModalScreen[Path | None]):
    """Modal for picking the local file used by the next upload."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, project_name: str = "") -> None:
        super().__init__()
        self.project_name = project_name

    def compose(self) -> ComposeResult:
        title = f"Choose File for {self.project_name}" if self.project_name else "Choose File"
        with Vertical(id="select-file-modal"):
            yield Label(title, id=ids.MODAL_TITLE, markup=False)
            yield Input(placeholder="Path to file...", id=ids.FILE_PATH_INPUT)
            yield Static("", id=ids.MODAL_ERROR, markup=False)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")
                yield Button("Select", id=ids.SELECT_FILE_BTN, variant="success")

    def on_mount(self) -> None:
        self.query_one(css(ids.FILE_PATH_INPUT), Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _submit(self, value: str) -> None:
        path, error = resolve_upload_path(value)
        if error:
            self.query_one(css(ids.MODAL_ERROR), Static).update(error)
            return
        self.dismiss(path)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.SELECT_FILE_BTN))
    def on_select(self, event: Button.Pressed) -> None:
        self._submit(self.query_one(css(ids.FILE_PATH_INPUT), Input).value)

    @on(Input.Submitted, css(ids.FILE_PATH_INPUT))
    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit(event.value)
