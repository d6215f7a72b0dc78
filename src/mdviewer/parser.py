"""Parse Markdown source into the markup tree using markdown-it-py."""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdviewer.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    Image,
    InlineCode,
    InlineHTML,
    LineBreak,
    Link,
    ListItem,
    Markup,
    OrderedList,
    Paragraph,
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
    UnorderedList,
)

# markdown-it node types that map onto a container without extra fields.
_CONTAINERS: dict[str, type[Markup]] = {
    "paragraph": Paragraph,
    "em": Emphasis,
    "strong": Strong,
    "s": Strikethrough,
    "bullet_list": UnorderedList,
    "list_item": ListItem,
    "blockquote": BlockQuote,
    "th": TableCell,
    "td": TableCell,
    "tr": TableRow,
    "tbody": TableBody,
}


@lru_cache(maxsize=1)
def _markdown_it() -> MarkdownIt:
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


def parse_markdown(text: str) -> Document:
    """Parse Markdown text into a ``Document`` tree."""
    tokens = _markdown_it().parse(text)
    root = SyntaxTreeNode(tokens)
    return Document(children=_convert_children(root))


def _convert_children(node: SyntaxTreeNode) -> tuple[Markup, ...]:
    converted: list[Markup] = []
    for child in node.children:
        if child.type == "inline":
            converted.extend(_convert_children(child))
        else:
            converted.append(_convert(child))
    return tuple(converted)


def _convert(node: SyntaxTreeNode) -> Markup:
    node_type = node.type

    if node_type in _CONTAINERS:
        return _CONTAINERS[node_type](children=_convert_children(node))

    if node_type in {"text", "text_special"}:
        return Text(string=node.content)

    if node_type == "heading":
        return Heading(level=int(node.tag[1]), children=_convert_children(node))

    if node_type == "code_inline":
        return InlineCode(code=node.content)

    if node_type == "fence":
        info = node.info.strip()
        return CodeBlock(language=info.split()[0] if info else None, code=node.content)

    if node_type == "code_block":
        return CodeBlock(code=node.content)

    if node_type == "link":
        return Link(
            destination=_attr(node, "href"),
            title=_attr(node, "title"),
            children=_convert_children(node),
        )

    if node_type == "image":
        return Image(
            source=_attr(node, "src"),
            title=_attr(node, "title"),
            children=_convert_children(node),
        )

    if node_type == "ordered_list":
        start = _attr(node, "start")
        return OrderedList(start=int(start) if start else 1, children=_convert_children(node))

    if node_type == "hr":
        return ThematicBreak()

    if node_type == "softbreak":
        return SoftBreak()

    if node_type == "hardbreak":
        return LineBreak()

    if node_type == "table":
        return _convert_table(node)

    if node_type == "html_block":
        return HTMLBlock(raw=node.content)

    if node_type == "html_inline":
        return InlineHTML(raw=node.content)

    return Markup(kind=node_type, children=_convert_children(node))


def _convert_table(node: SyntaxTreeNode) -> Table:
    head = TableHead()
    body = TableBody()
    for section in node.children:
        if section.type == "thead":
            cells: list[Markup] = []
            for row in section.children:
                cells.extend(_convert(cell) for cell in row.children)
            head = TableHead(children=tuple(cells))
        elif section.type == "tbody":
            body = _convert(section)
    return Table(children=(head, body))


def _attr(node: SyntaxTreeNode, name: str) -> str | None:
    value = node.attrs.get(name)
    return None if value is None else str(value)
