"""Loaded document model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mdviewer.schemas.outline import OutlineItem


class RenderedDocument(BaseModel):
    """A document ready for display.

    Attributes:
        title: Display title, usually the file name.
        html: Body fragment including the rendered front matter table.
        outline: Normalized outline for the sidebar.
        front_matter: Key/value pairs from the leading metadata block.
        error: True when the document could not be loaded and ``html``
            holds the error fragment instead.
    """

    title: str
    html: str
    outline: list[OutlineItem] = Field(default_factory=list)
    front_matter: list[tuple[str, str]] = Field(default_factory=list)
    error: bool = False
