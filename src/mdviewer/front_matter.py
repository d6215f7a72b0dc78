"""Leading ``---`` metadata block handling."""

from __future__ import annotations

from mdviewer.renderer import escape_html

_DELIMITER = "---"


def parse_front_matter(markdown: str) -> tuple[list[tuple[str, str]], str]:
    """Split a leading front matter block from the Markdown body.

    Returns the ``(key, value)`` pairs in file order and the remaining
    content. Input without an opening ``---`` line is returned untouched
    with no pairs. Lines without a colon, and lines with an empty key, are
    skipped.
    """
    lines = markdown.split("\n")
    if not lines or lines[0] != _DELIMITER:
        return [], markdown

    pairs: list[tuple[str, str]] = []
    end_index = 0
    for index, line in enumerate(lines[1:]):
        if line == _DELIMITER:
            end_index = index + 2
            break
        key, colon, value = line.partition(":")
        if not colon:
            continue
        key = key.strip()
        if key:
            pairs.append((key, value.strip()))

    return pairs, "\n".join(lines[end_index:])


def render_front_matter(pairs: list[tuple[str, str]]) -> str:
    """Render front matter pairs as a two-column HTML table."""
    if not pairs:
        return ""

    rows = []
    for key, value in pairs:
        display_key = " ".join(word.capitalize() for word in key.replace("_", " ").split(" "))
        rows.append(
            f'<tr><td class="fm-key">{escape_html(display_key, quote=True)}</td>'
            f'<td class="fm-value">{escape_html(value, quote=True)}</td></tr>\n'
        )
    return (
        '<div class="front-matter">\n<table class="front-matter-table">\n'
        + "".join(rows)
        + "</table></div>\n"
    )
