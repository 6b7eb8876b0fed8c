"""Project mirror record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ResourceId = int | str


@dataclass
class Project:
    """A server-owned project as last reported by the API."""

    id: ResourceId
    name: str
    description: str = ""

    def __str__(self) -> str:
        if self.description:
            return f"{self.name} - {self.description}"
        return self.name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        """Build from an API record. Raises KeyError/TypeError on bad shape."""
        return cls(
            id=data["id"],
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
        )
