"""Markup tree models consumed by the renderer.

Every node carries a ``kind`` tag and a tuple of ``children``. The renderer
dispatches on ``kind`` only; node kinds it does not know are still valid
``Markup`` instances and render as their children.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Markup(BaseModel):
    """Generic markup node."""

    model_config = ConfigDict(frozen=True)

    kind: str = "markup"
    children: tuple[Markup, ...] = ()

    @property
    def plain_text(self) -> str:
        """Flattened text content of this subtree."""
        return "".join(child.plain_text for child in self.children)


class Document(Markup):
    kind: Literal["document"] = "document"


class Heading(Markup):
    kind: Literal["heading"] = "heading"
    level: int = Field(1, ge=1, le=6)


class Paragraph(Markup):
    kind: Literal["paragraph"] = "paragraph"


class Text(Markup):
    kind: Literal["text"] = "text"
    string: str = ""

    @property
    def plain_text(self) -> str:
        return self.string


class Emphasis(Markup):
    kind: Literal["emphasis"] = "emphasis"


class Strong(Markup):
    kind: Literal["strong"] = "strong"


class Strikethrough(Markup):
    kind: Literal["strikethrough"] = "strikethrough"


class InlineCode(Markup):
    kind: Literal["inline_code"] = "inline_code"
    code: str = ""

    @property
    def plain_text(self) -> str:
        return self.code


class CodeBlock(Markup):
    kind: Literal["code_block"] = "code_block"
    language: str | None = None
    code: str = ""


class Link(Markup):
    kind: Literal["link"] = "link"
    destination: str | None = None
    title: str | None = None


class Image(Markup):
    """Image node; the alt text is held as child nodes."""

    kind: Literal["image"] = "image"
    source: str | None = None
    title: str | None = None


class UnorderedList(Markup):
    kind: Literal["unordered_list"] = "unordered_list"


class OrderedList(Markup):
    kind: Literal["ordered_list"] = "ordered_list"
    start: int = 1


class ListItem(Markup):
    kind: Literal["list_item"] = "list_item"


class BlockQuote(Markup):
    kind: Literal["block_quote"] = "block_quote"


class ThematicBreak(Markup):
    kind: Literal["thematic_break"] = "thematic_break"


class SoftBreak(Markup):
    kind: Literal["soft_break"] = "soft_break"

    @property
    def plain_text(self) -> str:
        return " "


class LineBreak(Markup):
    kind: Literal["line_break"] = "line_break"

    @property
    def plain_text(self) -> str:
        return "\n"


class HTMLBlock(Markup):
    kind: Literal["html_block"] = "html_block"
    raw: str = ""


class InlineHTML(Markup):
    kind: Literal["inline_html"] = "inline_html"
    raw: str = ""

    @property
    def plain_text(self) -> str:
        return self.raw


class TableCell(Markup):
    kind: Literal["table_cell"] = "table_cell"


class TableRow(Markup):
    kind: Literal["table_row"] = "table_row"

    @property
    def cells(self) -> tuple[Markup, ...]:
        return self.children


class TableHead(TableRow):
    """Header row of a table; its children are the header cells."""

    kind: Literal["table_head"] = "table_head"


class TableBody(Markup):
    kind: Literal["table_body"] = "table_body"

    @property
    def rows(self) -> tuple[Markup, ...]:
        return self.children


class Table(Markup):
    """Table node whose children are exactly a head and a body."""

    kind: Literal["table"] = "table"

    @property
    def head(self) -> TableHead:
        for child in self.children:
            if isinstance(child, TableHead):
                return child
        return TableHead()

    @property
    def body(self) -> TableBody:
        for child in self.children:
            if isinstance(child, TableBody):
                return child
        return TableBody()
