"""Shared fixtures for projdesk tests."""

import json
import re

import httpx
import pytest

from api import ProjectApiClient
from controller import ViewStateSynchronizer

BASE_URL = "http://api.test"

_ROUTES = [
    ("GET", re.compile(r"^/projects$"), "list_projects"),
    ("POST", re.compile(r"^/projects$"), "create_project"),
    ("DELETE", re.compile(r"^/projects/(\d+)$"), "delete_project"),
    ("POST", re.compile(r"^/projects/(\d+)/upload$"), "upload"),
    ("GET", re.compile(r"^/projects/(\d+)/files$"), "list_files"),
    ("GET", re.compile(r"^/projects/(\d+)/tasks$"), "list_tasks"),
    ("POST", re.compile(r"^/projects/(\d+)/tasks$"), "create_task"),
    ("PUT", re.compile(r"^/tasks/(\d+)$"), "update_task"),
    ("GET", re.compile(r"^/projects/(\d+)/completion$"), "completion"),
    ("GET", re.compile(r"^/files/(\d+)/view$"), "view_file"),
]


class FakeProjectServer:
    """In-memory stand-in for the project API, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.projects: dict[int, dict] = {}
        self.tasks: dict[int, dict] = {}
        self.files: dict[int, dict] = {}
        self.completion_override: dict[int, float] = {}
        self.failures: dict[tuple[str, str], int] = {}
        self.requests: list[httpx.Request] = []
        self._next_id = 1

    def _new_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    # Seeding helpers

    def add_project(self, name: str, description: str = "") -> int:
        pid = self._new_id()
        self.projects[pid] = {"id": pid, "name": name, "description": description}
        return pid

    def add_task(self, project_id: int, title: str, done: bool = False) -> int:
        tid = self._new_id()
        self.tasks[tid] = {"id": tid, "title": title, "done": done, "project_id": project_id}
        return tid

    def add_file(self, project_id: int, filename: str, content: str = "") -> int:
        fid = self._new_id()
        self.files[fid] = {
            "id": fid,
            "filename": filename,
            "project_id": project_id,
            "content": content.encode(),
        }
        return fid

    def fail(self, method: str, path: str, status: int = 500) -> None:
        """Make the next and all later requests to this endpoint fail."""
        self.failures[(method, path)] = status

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    # Transport

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        status = self.failures.get((request.method, path))
        if status is not None:
            return httpx.Response(status, json={"detail": "failure"})
        for method, pattern, name in _ROUTES:
            match = pattern.match(path)
            if request.method == method and match:
                args = [int(g) for g in match.groups()]
                return getattr(self, f"_{name}")(request, *args)
        return httpx.Response(404, json={"detail": "Not Found"})

    def _list_projects(self, request):
        return httpx.Response(200, json=list(self.projects.values()))

    def _create_project(self, request):
        body = json.loads(request.content)
        pid = self.add_project(body["name"], body["description"])
        return httpx.Response(201, json=self.projects[pid])

    def _delete_project(self, request, pid):
        if pid not in self.projects:
            return httpx.Response(404, json={"detail": "Not Found"})
        del self.projects[pid]
        self.tasks = {k: t for k, t in self.tasks.items() if t["project_id"] != pid}
        self.files = {k: f for k, f in self.files.items() if f["project_id"] != pid}
        return httpx.Response(204)

    def _upload(self, request, pid):
        match = re.search(rb'name="file"; filename="([^"]+)"', request.content)
        if match is None:
            return httpx.Response(422, json={"detail": "file field missing"})
        fid = self._new_id()
        self.files[fid] = {
            "id": fid,
            "filename": match.group(1).decode(),
            "project_id": pid,
            "content": request.content,
        }
        return httpx.Response(200, json={"id": fid})

    def _list_files(self, request, pid):
        files = [
            {"id": f["id"], "filename": f["filename"]}
            for f in self.files.values()
            if f["project_id"] == pid
        ]
        return httpx.Response(200, json=files)

    def _list_tasks(self, request, pid):
        tasks = [
            {"id": t["id"], "title": t["title"], "done": t["done"]}
            for t in self.tasks.values()
            if t["project_id"] == pid
        ]
        return httpx.Response(200, json=tasks)

    def _create_task(self, request, pid):
        body = json.loads(request.content)
        tid = self.add_task(pid, body["title"])
        return httpx.Response(201, json={"id": tid})

    def _update_task(self, request, tid):
        if tid not in self.tasks:
            return httpx.Response(404, json={"detail": "Not Found"})
        self.tasks[tid]["done"] = json.loads(request.content)["done"]
        return httpx.Response(200, json={"ok": True})

    def _completion(self, request, pid):
        if pid in self.completion_override:
            return httpx.Response(200, json={"percentage": self.completion_override[pid]})
        tasks = [t for t in self.tasks.values() if t["project_id"] == pid]
        done = sum(1 for t in tasks if t["done"])
        percentage = round(done / len(tasks) * 100) if tasks else 0
        return httpx.Response(200, json={"percentage": percentage})

    def _view_file(self, request, fid):
        if fid not in self.files:
            return httpx.Response(404, json={"detail": "Not Found"})
        return httpx.Response(200, content=self.files[fid]["content"])


class SyncRecorder:
    """Collects synchronizer callbacks for assertions."""

    def __init__(self) -> None:
        self.changes = 0
        self.errors: list[tuple[str, Exception]] = []
        self.opened: list[str] = []

    def on_change(self) -> None:
        self.changes += 1

    def on_error(self, action: str, error: Exception) -> None:
        self.errors.append((action, error))

    def open_url(self, url: str) -> None:
        self.opened.append(url)

    @property
    def error_actions(self) -> list[str]:
        return [action for action, _ in self.errors]


@pytest.fixture
def server():
    """An empty fake API server."""
    return FakeProjectServer()


@pytest.fixture
def api(server):
    """ProjectApiClient wired to the fake server."""
    return ProjectApiClient(BASE_URL, transport=server.transport())


@pytest.fixture
def recorder():
    return SyncRecorder()


@pytest.fixture
def sync(api, recorder):
    """ViewStateSynchronizer with recorded callbacks."""
    return ViewStateSynchronizer(
        api,
        on_change=recorder.on_change,
        on_error=recorder.on_error,
        open_url=recorder.open_url,
    )


@pytest.fixture
def upload_file(tmp_path):
    """A local file ready to upload."""
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n")
    return path
