"""Shared schemas for mdviewer."""

from mdviewer.schemas.document import RenderedDocument
from mdviewer.schemas.outline import OutlineItem, RenderedMarkdown

__all__ = ["OutlineItem", "RenderedDocument", "RenderedMarkdown"]
