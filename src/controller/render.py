"""ViewRenderer: one-way ViewState → UI rendering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Static

from ui.helpers import pending_file_label, set_visible
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from textual.app import App

    from controller.sync import ViewStateSynchronizer
    from ui.widgets import ProjectActions

log = logging.getLogger(__name__)


class ViewRenderer:
    """Pushes the synchronizer's state into the widget tree.

    Project rows are rebuilt only when the set or order of projects changes;
    otherwise each row updates its completion, panel and lists in place.
    Call render() after every state change.
    """

    def __init__(
        self,
        app: App,
        sync: ViewStateSynchronizer,
        project_item_class: type,
        actions: ProjectActions,
    ) -> None:
        self.app = app
        self.sync = sync
        self.project_item_class = project_item_class
        self.actions = actions
        self._items: list = []

    @property
    def state(self):
        return self.sync.state

    def render(self) -> None:
        self.rebuild_project_list()
        self.update_project_items()
        self.sync_pending_file()
        self.sync_viewer()

    def rebuild_project_list(self) -> None:
        """Bring project rows in line with the mirrored projects.

        Rows whose project is unchanged are kept, so text typed into their
        task inputs survives. New rows are mounted in place; if the kept rows
        changed order, every row is remounted.
        """
        try:
            project_list = self.app.query_one(css(ids.PROJECT_LIST), VerticalScroll)
        except NoMatches:
            log.debug("project-list not found")
            return

        projects = self.state.projects
        if [item.project for item in self._items] == projects:
            return

        existing = {item.project_id: item for item in self._items}
        kept = [existing[p.id] for p in projects if p.id in existing and existing[p.id].project == p]
        if kept != [item for item in self._items if item in kept]:
            kept = []

        for item in self._items:
            if item not in kept:
                item.remove()

        kept_by_id = {item.project_id: item for item in kept}
        self._items = []
        pending: list = []
        anchor = None
        for project in projects:
            item = kept_by_id.get(project.id)
            if item is None:
                item = self.project_item_class(project, self.actions)
                pending.append(item)
            else:
                if pending:
                    project_list.mount_all(pending, before=item)
                    pending = []
                anchor = item
            self._items.append(item)
        if pending:
            if anchor is not None:
                project_list.mount_all(pending, after=anchor)
            else:
                project_list.mount_all(pending)

        try:
            set_visible(self.app.query_one(css(ids.EMPTY_HINT)), not projects)
        except NoMatches:
            log.debug("empty-hint not found")

    def update_project_items(self) -> None:
        for item in self._items:
            item.update_from(self.state)

    def sync_pending_file(self) -> None:
        try:
            label = self.app.query_one(css(ids.PENDING_FILE), Static)
            label.update(pending_file_label(self.state.pending_file))
        except NoMatches:
            log.debug("pending-file label not found")

    def sync_viewer(self) -> None:
        """Show the viewed file, or hide the viewer when the slot is empty."""
        try:
            viewer = self.app.query_one(css(ids.VIEWER))
            title = self.app.query_one(css(ids.VIEWER_TITLE), Static)
            error = self.app.query_one(css(ids.VIEWER_ERROR), Static)
            content = self.app.query_one(css(ids.VIEWER_CONTENT), Static)
        except NoMatches:
            log.debug("viewer widgets not found")
            return

        viewed = self.state.viewed_file
        rendered = self.sync.rendered_viewed_file()
        if viewed is None or rendered is None:
            set_visible(viewer, False)
            content.update("")
            return

        title.update(f"File Content: {viewed.filename}")
        content.update(rendered.text)
        error.update(rendered.error or "")
        set_visible(error, not rendered.ok)
        set_visible(viewer, True)
