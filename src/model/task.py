"""Task mirror record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from model.project import ResourceId


@dataclass
class Task:
    """A project task. `done` is only authoritative after a re-fetch."""

    id: ResourceId
    title: str
    done: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        return cls(id=data["id"], title=str(data["title"]), done=bool(data.get("done")))
