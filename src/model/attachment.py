"""File attachment mirror record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from file_view import file_extension
from model.project import ResourceId


@dataclass
class FileAttachment:
    """A file stored by the server under one project."""

    id: ResourceId
    filename: str

    @property
    def extension(self) -> str:
        """Lowercased text after the last dot."""
        return file_extension(self.filename)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileAttachment:
        return cls(id=data["id"], filename=str(data["filename"]))
