"""Render a markup tree into an HTML fragment and a heading outline."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdviewer.nodes import (
    CodeBlock,
    Heading,
    Image,
    InlineCode,
    Link,
    Markup,
    Table,
    Text,
)
from mdviewer.schemas import OutlineItem, RenderedMarkdown
from mdviewer.slugger import HeadingSlugger

# kind -> (opening markup, closing markup) for nodes that only wrap children.
_WRAPPERS: dict[str, tuple[str, str]] = {
    "paragraph": ("<p>", "</p>\n"),
    "emphasis": ("<em>", "</em>"),
    "strong": ("<strong>", "</strong>"),
    "strikethrough": ("<del>", "</del>"),
    "unordered_list": ("<ul>\n", "</ul>\n"),
    "ordered_list": ("<ol>\n", "</ol>\n"),
    "list_item": ("<li>", "</li>\n"),
    "block_quote": ("<blockquote>\n", "</blockquote>\n"),
}

# Kinds whose rendering reads fields of a specific model. A node claiming one
# of these kinds without being that model renders as its children.
_FIELD_KINDS: dict[str, type[Markup]] = {
    "text": Text,
    "heading": Heading,
    "inline_code": InlineCode,
    "code_block": CodeBlock,
    "link": Link,
    "image": Image,
    "table": Table,
}

_LEAVES: dict[str, str] = {
    "thematic_break": "<hr>\n",
    "soft_break": " ",
    "line_break": "<br>\n",
}


def escape_html(text: str, *, quote: bool = False) -> str:
    """Escape ``&``, ``<`` and ``>``; with ``quote`` also ``"`` for attribute values."""
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    if quote:
        text = text.replace('"', "&quot;")
    return text


@dataclass
class _RenderState:
    slugger: HeadingSlugger = field(default_factory=HeadingSlugger)
    outline: list[OutlineItem] = field(default_factory=list)
    parts: list[str] = field(default_factory=list)


class MarkdownRenderer:
    """Renderer object; each call to ``render`` starts from empty state."""

    def render(self, document: Markup) -> RenderedMarkdown:
        return render_document(document)


def render_document(document: Markup) -> RenderedMarkdown:
    """Render the children of ``document`` into HTML and collect the outline.

    The root node itself produces no markup. All state lives for the duration
    of this call, so independent documents can be rendered concurrently.

    Parameters
    ----------
    document : Markup
        Root of the markup tree, usually a ``Document``.

    Returns
    -------
    RenderedMarkdown
        The HTML fragment and the outline in document order. Headings with an
        empty title are rendered but left out of the outline.
    """
    state = _RenderState()
    _render_children(document, state)
    return RenderedMarkdown(html="".join(state.parts), outline=tuple(state.outline))


def _render_children(node: Markup, state: _RenderState) -> None:
    for child in node.children:
        _render_node(child, state)


def _render_node(node: Markup, state: _RenderState) -> None:
    kind = node.kind
    out = state.parts

    if kind in _WRAPPERS:
        opening, closing = _WRAPPERS[kind]
        out.append(opening)
        _render_children(node, state)
        out.append(closing)
        return

    if kind in _FIELD_KINDS and not isinstance(node, _FIELD_KINDS[kind]):
        _render_children(node, state)
        return

    if kind in _LEAVES:
        out.append(_LEAVES[kind])
        return

    if kind == "text":
        out.append(escape_html(node.string))
        return

    if kind == "heading":
        _render_heading(node, state)
        return

    if kind == "inline_code":
        out.append(f"<code>{escape_html(node.code)}</code>")
        return

    if kind == "code_block":
        # The language is emitted verbatim, like link and image destinations.
        out.append(
            f'<pre><code class="language-{node.language or ""}">{escape_html(node.code)}</code></pre>\n'
        )
        return

    if kind == "link":
        # The destination is emitted verbatim; only text content is escaped.
        out.append(f'<a href="{node.destination or ""}">')
        _render_children(node, state)
        out.append("</a>")
        return

    if kind == "image":
        alt = escape_html(node.plain_text, quote=True)
        out.append(f'<img src="{node.source or ""}" alt="{alt}">')
        return

    if kind == "table":
        _render_table(node, state)
        return

    _render_children(node, state)


def _render_heading(heading: Markup, state: _RenderState) -> None:
    title = heading.plain_text.strip()
    anchor_id = state.slugger.slug(title)
    if title:
        state.outline.append(
            OutlineItem(title=title, level=heading.level, anchor_id=anchor_id)
        )
    state.parts.append(f'<h{heading.level} id="{anchor_id}">')
    _render_children(heading, state)
    state.parts.append(f"</h{heading.level}>\n")


def _render_table(table: Markup, state: _RenderState) -> None:
    out = state.parts
    out.append("<table>\n<thead><tr>\n")
    for cell in table.head.cells:
        out.append("<th>")
        _render_children(cell, state)
        out.append("</th>\n")
    out.append("</tr></thead>\n<tbody>\n")
    for row in table.body.rows:
        out.append("<tr>\n")
        for cell in row.children:
            out.append("<td>")
            _render_children(cell, state)
            out.append("</td>\n")
        out.append("</tr>\n")
    out.append("</tbody></table>\n")
