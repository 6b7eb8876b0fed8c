"""Decide how an attached file is shown, and pretty-print structured text.

Everything here is pure: no network access and no UI. The synchronizer
fetches content, these functions decide what to do with it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

from constants import BROWSER_VIEWABLE, JSON_INDENT, STRUCTURED_FORMATS


class ViewMode(Enum):
    """How a file's content is presented."""

    EXTERNAL = "external"  # Handed to the system browser/viewer
    STRUCTURED = "structured"  # Fetched, parsed and pretty-printed
    RAW = "raw"  # Fetched and shown as-is


@dataclass(frozen=True)
class RenderedContent:
    """Display-ready text for the inline viewer."""

    text: str
    mode: ViewMode
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def file_extension(filename: str) -> str:
    """Return the lowercased text after the last dot.

    A name without a dot is returned whole, lowercased.
    """
    return filename.rsplit(".", 1)[-1].lower()


def classify_extension(extension: str) -> ViewMode:
    ext = extension.lower()
    if ext in BROWSER_VIEWABLE:
        return ViewMode.EXTERNAL
    if ext in STRUCTURED_FORMATS:
        return ViewMode.STRUCTURED
    return ViewMode.RAW


def classify(filename: str) -> ViewMode:
    """Classify a file by the extension of its name."""
    return classify_extension(file_extension(filename))


def _pretty_json(content: str) -> str:
    return json.dumps(json.loads(content), indent=JSON_INDENT, ensure_ascii=False)


def render_content(content: str, extension: str) -> RenderedContent:
    """Prepare fetched content for inline display.

    Structured formats are pretty-printed. Content that fails to parse falls
    back to the raw text with a parse error attached; this never raises.
    """
    mode = classify_extension(extension)
    if mode is not ViewMode.STRUCTURED:
        return RenderedContent(text=content, mode=ViewMode.RAW)

    try:
        return RenderedContent(text=_pretty_json(content), mode=ViewMode.STRUCTURED)
    except json.JSONDecodeError as e:
        error = f"Invalid {extension.upper()} at line {e.lineno}, column {e.colno}: {e.msg}"
        return RenderedContent(text=content, mode=ViewMode.RAW, error=error)
    except RecursionError:
        error = f"Cannot display {extension.upper()}: nested too deeply"
        return RenderedContent(text=content, mode=ViewMode.RAW, error=error)
    except ValueError as e:
        # e.g. integers past the int/str conversion limit
        error = f"Cannot display {extension.upper()}: {e}"
        return RenderedContent(text=content, mode=ViewMode.RAW, error=error)
