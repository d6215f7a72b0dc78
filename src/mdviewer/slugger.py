"""Heading anchor ids."""

from __future__ import annotations

FALLBACK_SLUG = "section"


def slugify(title: str) -> str:
    """Reduce a heading title to lowercase ASCII words joined by hyphens.

    ASCII letters and digits are kept. Every other character, including all
    non-ASCII ones, separates words. The result never starts or ends with a
    hyphen and never contains two in a row; it may be empty.
    """
    parts: list[str] = []
    needs_hyphen = False
    for char in title.strip().lower():
        if ("a" <= char <= "z") or ("0" <= char <= "9"):
            if needs_hyphen and parts:
                parts.append("-")
            needs_hyphen = False
            parts.append(char)
        else:
            needs_hyphen = True
    return "".join(parts)


class HeadingSlugger:
    """Hand out unique anchor ids for the headings of one document.

    The first heading with a given slug gets the bare slug, later ones get
    ``-1``, ``-2`` and so on, in the order ``slug`` is called.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def slug(self, title: str) -> str:
        base = slugify(title) or FALLBACK_SLUG
        count = self._counts.get(base, 0)
        self._counts[base] = count + 1
        if count == 0:
            return base
        return f"{base}-{count}"
