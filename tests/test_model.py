"""Tests for mirror records and ViewState bookkeeping."""

from pathlib import Path

import pytest

from model import FileAttachment, Project, Task, ViewedFile, ViewState


@pytest.fixture
def populated_state():
    """ViewState with two projects and entries in every mirror."""
    state = ViewState(
        projects=[Project(1, "Alpha"), Project(2, "Beta", "second")],
        files={1: [FileAttachment(10, "a.json")], 2: [FileAttachment(11, "b.png")]},
        tasks={1: [Task(20, "One")], 2: [Task(21, "Two", done=True)]},
        completion={1: 0, 2: 100},
        selected_project_id=2,
    )
    return state


class TestRecords:
    """Test from_dict() constructors."""

    def test_project_from_dict(self):
        project = Project.from_dict({"id": 3, "name": "Launch", "description": "Q1 plan"})
        assert project == Project(3, "Launch", "Q1 plan")

    def test_project_missing_description(self):
        assert Project.from_dict({"id": 3, "name": "Launch"}).description == ""

    def test_project_null_description(self):
        assert Project.from_dict({"id": 3, "name": "X", "description": None}).description == ""

    def test_project_requires_id(self):
        with pytest.raises(KeyError):
            Project.from_dict({"name": "No id"})

    def test_project_str(self):
        assert str(Project(1, "Launch", "Q1 plan")) == "Launch - Q1 plan"
        assert str(Project(1, "Launch")) == "Launch"

    def test_task_done_coerced_to_bool(self):
        assert Task.from_dict({"id": 1, "title": "t", "done": 1}).done is True
        assert Task.from_dict({"id": 1, "title": "t"}).done is False

    def test_attachment_extension(self):
        assert FileAttachment.from_dict({"id": 1, "filename": "Plan.JSON"}).extension == "json"

    def test_string_ids_supported(self):
        project = Project.from_dict({"id": "abc123", "name": "Mongo"})
        assert project.id == "abc123"


class TestViewState:
    """Test ViewState lookups and pruning."""

    def test_completion_defaults_to_zero(self):
        assert ViewState().completion_for(99) == 0

    def test_lookup(self, populated_state):
        assert populated_state.project(2).name == "Beta"
        assert populated_state.project(3) is None
        assert populated_state.has_project(1)

    def test_empty_defaults_for_unknown_project(self, populated_state):
        assert populated_state.tasks_for(42) == []
        assert populated_state.files_for(42) == []

    def test_forget_project_removes_every_key(self, populated_state):
        populated_state.forget_project(2)
        assert [p.id for p in populated_state.projects] == [1]
        assert 2 not in populated_state.files
        assert 2 not in populated_state.tasks
        assert 2 not in populated_state.completion
        assert populated_state.selected_project_id is None

    def test_forget_unselected_project_keeps_selection(self, populated_state):
        populated_state.forget_project(1)
        assert populated_state.selected_project_id == 2
        assert 1 not in populated_state.files

    def test_forget_leaves_viewed_file_and_pending_file(self, populated_state):
        populated_state.viewed_file = ViewedFile(10, "a.json", "json", "{}")
        populated_state.pending_file = Path("/tmp/x")
        populated_state.forget_project(1)
        assert populated_state.viewed_file is not None
        assert populated_state.pending_file == Path("/tmp/x")

    def test_forget_unknown_project_is_harmless(self, populated_state):
        populated_state.forget_project(99)
        assert len(populated_state.projects) == 2

    def test_replace_projects_prunes_vanished_ids(self, populated_state):
        populated_state.replace_projects([Project(1, "Alpha")])
        assert [p.id for p in populated_state.projects] == [1]
        assert list(populated_state.files) == [1]
        assert list(populated_state.tasks) == [1]
        assert list(populated_state.completion) == [1]
        assert populated_state.selected_project_id is None

    def test_replace_projects_keeps_live_selection(self, populated_state):
        populated_state.replace_projects([Project(2, "Beta", "second"), Project(3, "Gamma")])
        assert populated_state.selected_project_id == 2
        assert 1 not in populated_state.completion
        assert populated_state.completion[2] == 100
