"""Main TUI application for projdesk."""

import logging
import os
import webbrowser
from pathlib import Path
from typing import Callable

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Input, Label, Static

from api import ApiError, ProjectApiClient
from config import Settings
from constants import APP_NAME
from controller import (
    FileEventsMixin,
    ProjectEventsMixin,
    TaskEventsMixin,
    ViewRenderer,
    ViewStateSynchronizer,
)
from ui import ProjectActions, ProjectItem, compose_project_form, compose_viewer
from ui.ids import css
import ui.ids as ids

log = logging.getLogger(__name__)


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / APP_NAME
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{APP_NAME}.log"


def setup_logging() -> None:
    """Send logs to a file; the terminal belongs to the TUI."""
    logging.basicConfig(
        filename=str(_get_log_path()),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


# Load CSS from file
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class ProjectDeskTUI(
    ProjectEventsMixin,
    TaskEventsMixin,
    FileEventsMixin,
    App,
):
    """TUI for managing projects, tasks and attachments on a remote API."""

    TITLE = "Project Management"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+r", "reload", "Reload", show=True),
        Binding("escape", "close_viewer", "Close Viewer", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        settings: Settings,
        api: ProjectApiClient | None = None,
        open_url: Callable[[str], object] = webbrowser.open_new_tab,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.api = api or ProjectApiClient(settings.api_base, timeout=settings.timeout)
        self.view_sync = ViewStateSynchronizer(
            self.api,
            on_change=self._render_state,
            on_error=self._on_sync_error,
            open_url=open_url,
        )
        self._view_renderer = ViewRenderer(self, self.view_sync, ProjectItem, self._project_actions())

    def _project_actions(self) -> ProjectActions:
        return ProjectActions(
            choose_file=self._choose_file,
            upload_file=self._upload_file,
            view_files=self._view_files,
            view_tasks=self._view_tasks,
            delete_project=self._delete_project,
            add_task=self._add_task,
            toggle_task=self._toggle_task,
            view_file=self._view_file,
        )

    def compose(self) -> ComposeResult:
        log.info(f"compose() called, api base {self.settings.api_base}")

        yield Horizontal(
            Label("Project Management", id=ids.HEADER_TITLE),
            Static(self.settings.api_base, id=ids.HEADER_API, markup=False),
            id=ids.HEADER_CONTAINER,
        )
        yield from compose_project_form()
        with VerticalScroll(id=ids.PROJECT_LIST):
            yield Static("No projects yet", id=ids.EMPTY_HINT)
        yield from compose_viewer()
        yield Horizontal(
            Static("", id=ids.STATUS_BAR),
            id=ids.FOOTER_BAR,
        )

    # =========================================================================
    # Status and Rendering
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _render_state(self) -> None:
        """Redraw widgets from the synchronizer's mirrors."""
        self._view_renderer.render()

    def _on_sync_error(self, action: str, error: ApiError) -> None:
        """Surface a failed request, scoped to the action that made it."""
        message = f"{action} failed: {error}"
        self._set_status(message)
        self.notify(str(error), title=f"{action} failed", severity="error")

    # =========================================================================
    # Mixin Handler Forwarding
    # =========================================================================
    # Textual's @on decorator only registers handlers defined on the class itself,
    # not on mixins. These forwarding handlers ensure events are routed to mixins.

    # Project handlers (from ProjectEventsMixin)
    @on(Button.Pressed, css(ids.ADD_PROJECT_BTN))
    def _on_add_project_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_add_project_pressed(event)

    @on(Input.Submitted, css(ids.PROJECT_DESCRIPTION_INPUT))
    def _on_description_submit(self, event: Input.Submitted) -> None:
        """Forward to mixin handler."""
        self.on_description_submitted(event)

    # Viewer handlers (from FileEventsMixin)
    @on(Button.Pressed, css(ids.CLOSE_VIEWER_BTN))
    def _on_close_viewer_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_close_viewer_pressed(event)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Load the project list once the screen is up."""
        self.query_one(css(ids.PROJECT_NAME_INPUT), Input).focus()
        self.action_reload()

    async def on_unmount(self) -> None:
        await self.api.aclose()
