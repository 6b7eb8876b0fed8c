"""Viewed file content slot."""

from dataclasses import dataclass

from model.project import ResourceId


@dataclass(frozen=True)
class ViewedFile:
    """Text content of the single file currently previewed inline."""

    file_id: ResourceId
    filename: str
    extension: str
    content: str
