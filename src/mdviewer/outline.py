"""Outline post-processing."""

from __future__ import annotations

from typing import Iterable

from mdviewer.schemas import OutlineItem


def normalize_outline(outline: Iterable[OutlineItem]) -> list[OutlineItem]:
    """Treat a lone level-1 heading as the document title.

    When exactly one item has level 1, that item is dropped and every other
    item moves up one level (never above level 1). With zero or several
    level-1 items the outline is returned as a new, unchanged list.
    """
    items = list(outline)
    top_level = sum(1 for item in items if item.level == 1)
    if top_level != 1:
        return items

    return [
        item.model_copy(update={"level": max(1, item.level - 1)})
        for item in items
        if item.level != 1
    ]


def format_outline(outline: Iterable[OutlineItem], indent: int = 4) -> str:
    """Render the outline as indented text, one heading per line."""
    lines = []
    for item in outline:
        lines.append(" " * (indent * (item.level - 1)) + f"{item.title} (#{item.anchor_id})")
    return "\n".join(lines)
