"""mdviewer: render Markdown into HTML with a navigable heading outline."""

from mdviewer.document import load_document, load_document_from_url, render_markdown
from mdviewer.exceptions import (
    DocumentLoadError,
    DocumentNotFoundError,
    FetchError,
    MdviewerError,
)
from mdviewer.outline import normalize_outline
from mdviewer.parser import parse_markdown
from mdviewer.renderer import MarkdownRenderer, render_document
from mdviewer.schemas import OutlineItem, RenderedDocument, RenderedMarkdown
from mdviewer.slugger import HeadingSlugger

__all__ = [
    "DocumentLoadError",
    "DocumentNotFoundError",
    "FetchError",
    "HeadingSlugger",
    "MarkdownRenderer",
    "MdviewerError",
    "OutlineItem",
    "RenderedDocument",
    "RenderedMarkdown",
    "load_document",
    "load_document_from_url",
    "normalize_outline",
    "parse_markdown",
    "render_document",
    "render_markdown",
]
