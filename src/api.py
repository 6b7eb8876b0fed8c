"""Async client for the project-management REST API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

import httpx

from constants import DEFAULT_TIMEOUT
from model import FileAttachment, Project, ResourceId, Task

log = logging.getLogger(__name__)

T = TypeVar("T")


class ApiError(Exception):
    """Raised when a request fails or the server answers with something unusable."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        return self.message


class ProjectApiClient:
    """Thin wrapper over httpx.AsyncClient, one method per endpoint.

    Every method raises ApiError on transport errors, timeouts, non-2xx
    responses and malformed bodies. Bodies of mutating calls are ignored.

    Example usage:
        async with ProjectApiClient("http://localhost:8000") as api:
            projects = await api.list_projects()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> ProjectApiClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # =========================================================================
    # Request plumbing
    # =========================================================================

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request and turn every failure into ApiError."""
        log.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            log.warning(f"{method} {path} -> {status}")
            raise ApiError(
                f"{status} {e.response.reason_phrase}".strip(),
                status_code=status,
                url=self._url(path),
            ) from e
        except httpx.TimeoutException as e:
            log.warning(f"{method} {path} timed out")
            raise ApiError("Request timed out", url=self._url(path)) from e
        except httpx.HTTPError as e:
            log.warning(f"{method} {path} failed: {e}")
            raise ApiError(str(e) or type(e).__name__, url=self._url(path)) from e
        return response

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Server returned invalid JSON", url=str(response.url)) from e

    def _record(self, payload: Any, factory: Callable[[dict], T], what: str) -> T:
        try:
            return factory(payload)
        except (KeyError, TypeError, AttributeError) as e:
            raise ApiError(f"Malformed {what} record: {payload!r}") from e

    def _records(self, payload: Any, factory: Callable[[dict], T], what: str) -> list[T]:
        if not isinstance(payload, list):
            raise ApiError(f"Expected a list of {what} records")
        return [self._record(item, factory, what) for item in payload]

    # =========================================================================
    # Projects
    # =========================================================================

    async def list_projects(self) -> list[Project]:
        response = await self._request("GET", "/projects")
        return self._records(self._json(response), Project.from_dict, "project")

    async def create_project(self, name: str, description: str) -> Project:
        """Create a project and return the server's canonical record."""
        response = await self._request(
            "POST", "/projects", json={"name": name, "description": description}
        )
        return self._record(self._json(response), Project.from_dict, "project")

    async def delete_project(self, project_id: ResourceId) -> None:
        await self._request("DELETE", f"/projects/{project_id}")

    async def get_completion(self, project_id: ResourceId) -> float:
        """Server-computed percentage of done tasks (0-100)."""
        response = await self._request("GET", f"/projects/{project_id}/completion")
        payload = self._json(response)
        try:
            return float(payload["percentage"])
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(f"Malformed completion record: {payload!r}") from e

    # =========================================================================
    # Files
    # =========================================================================

    async def upload_file(self, project_id: ResourceId, path: Path) -> None:
        """Upload a local file as the multipart field `file`."""
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ApiError(f"Cannot read {path}: {e.strerror or e}") from e
        await self._request(
            "POST",
            f"/projects/{project_id}/upload",
            files={"file": (path.name, content)},
        )

    async def list_files(self, project_id: ResourceId) -> list[FileAttachment]:
        response = await self._request("GET", f"/projects/{project_id}/files")
        return self._records(self._json(response), FileAttachment.from_dict, "file")

    async def get_file_text(self, file_id: ResourceId) -> str:
        response = await self._request("GET", f"/files/{file_id}/view")
        return response.text

    def file_view_url(self, file_id: ResourceId) -> str:
        """Absolute URL the system viewer can open directly."""
        return self._url(f"/files/{file_id}/view")

    # =========================================================================
    # Tasks
    # =========================================================================

    async def list_tasks(self, project_id: ResourceId) -> list[Task]:
        response = await self._request("GET", f"/projects/{project_id}/tasks")
        return self._records(self._json(response), Task.from_dict, "task")

    async def create_task(self, project_id: ResourceId, title: str) -> None:
        await self._request("POST", f"/projects/{project_id}/tasks", json={"title": title})

    async def update_task(self, task_id: ResourceId, done: bool) -> None:
        await self._request("PUT", f"/tasks/{task_id}", json={"done": done})
