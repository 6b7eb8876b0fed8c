"""File content viewer composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Button, Label, Static

import ui.ids as ids


def compose_viewer() -> ComposeResult:
    """Compose the inline file viewer, hidden until a file is opened.

    Yields:
        Textual widgets for the viewer panel
    """
    with Vertical(id=ids.VIEWER, classes="hidden"):
        yield Label("File Content", id=ids.VIEWER_TITLE, markup=False)
        yield Static("", id=ids.VIEWER_ERROR, classes="hidden", markup=False)
        with VerticalScroll(id=ids.VIEWER_SCROLL):
            yield Static("", id=ids.VIEWER_CONTENT, markup=False)
        yield Button("Close", id=ids.CLOSE_VIEWER_BTN)
