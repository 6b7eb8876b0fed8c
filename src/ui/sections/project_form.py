"""New project form composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Input, Static

import ui.ids as ids
from ui.helpers import pending_file_label


def compose_project_form() -> ComposeResult:
    """Compose the name/description inputs and the Add Project button.

    Yields:
        Textual widgets for the form row
    """
    with Horizontal(id=ids.PROJECT_FORM):
        yield Input(placeholder="Project Name", id=ids.PROJECT_NAME_INPUT)
        yield Input(placeholder="Description", id=ids.PROJECT_DESCRIPTION_INPUT)
        yield Button("Add Project", id=ids.ADD_PROJECT_BTN, variant="primary")
    yield Static(pending_file_label(None), id=ids.PENDING_FILE, markup=False)
