"""Load Markdown documents and turn them into displayable HTML and outlines."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

from mdviewer.exceptions import DocumentLoadError, FetchError
from mdviewer.fetch import fetch_markdown
from mdviewer.front_matter import parse_front_matter, render_front_matter
from mdviewer.outline import normalize_outline
from mdviewer.parser import parse_markdown
from mdviewer.renderer import escape_html, render_document
from mdviewer.schemas import RenderedDocument

logger = logging.getLogger(__name__)

ERROR_TITLE = "Error"


def render_markdown(
    markdown: str, *, title: str = "", normalize: bool = True
) -> RenderedDocument:
    """Render Markdown text, including its front matter, into a document.

    Args:
        markdown: Markdown source, optionally starting with a ``---`` block.
        title: Display title for the document.
        normalize: If False, keep the raw outline instead of promoting
            subheadings under a lone level-1 heading.

    Returns:
        The rendered document.
    """
    front_matter, content = parse_front_matter(markdown)
    rendered = render_document(parse_markdown(content))
    outline = normalize_outline(rendered.outline) if normalize else list(rendered.outline)
    logger.debug(
        "Rendered %r: %d headings, %d front matter keys",
        title,
        len(rendered.outline),
        len(front_matter),
    )
    return RenderedDocument(
        title=title,
        html=render_front_matter(front_matter) + rendered.html,
        outline=outline,
        front_matter=front_matter,
    )


def read_markdown_file(path: Path) -> str:
    """Read a UTF-8 Markdown file.

    Raises:
        DocumentLoadError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"{path}: {exc}") from exc


def load_document(path: Path | str, *, normalize: bool = True) -> RenderedDocument:
    """Read and render a local Markdown file.

    A file that cannot be read yields an error document instead of raising.
    """
    path = Path(path)
    try:
        markdown = read_markdown_file(path)
    except DocumentLoadError as exc:
        logger.warning("Failed to load %s: %s", path, exc)
        return error_document(str(exc))
    return render_markdown(markdown, title=path.name, normalize=normalize)


async def load_document_from_url(
    url: str, *, normalize: bool = True
) -> RenderedDocument:
    """Fetch and render a remote Markdown document.

    A document that cannot be fetched yields an error document instead of
    raising.
    """
    try:
        markdown = await fetch_markdown(url)
    except FetchError as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        return error_document(str(exc))
    title = Path(urlparse(url).path).name or url
    return render_markdown(markdown, title=title, normalize=normalize)


def error_document(message: str) -> RenderedDocument:
    """Build the document shown in place of one that failed to load."""
    return RenderedDocument(
        title=ERROR_TITLE,
        html=f"<p>Error loading file: {escape_html(message)}</p>",
        outline=[],
        error=True,
    )
