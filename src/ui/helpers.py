"""UI helper functions for projdesk."""

from __future__ import annotations

from pathlib import Path

from textual.widget import Widget


def format_percentage(value: float) -> str:
    """Format a completion value: whole numbers without decimals, others to 1 place."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def completion_label(value: float) -> str:
    return f"Completion: {format_percentage(value)}%"


def pending_file_label(path: Path | None) -> str:
    if path is None:
        return "No file chosen"
    return f"File: {path.name}"


def set_visible(widget: Widget, visible: bool) -> None:
    """Show or hide a widget via the `hidden` class."""
    if visible:
        widget.remove_class("hidden")
    else:
        widget.add_class("hidden")
