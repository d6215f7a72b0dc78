"""Inspect the markup tree produced for a Markdown document."""

from __future__ import annotations

import argparse
import asyncio
from collections import Counter
from pathlib import Path

from mdviewer.fetch import fetch_markdown
from mdviewer.front_matter import parse_front_matter
from mdviewer.nodes import Markup
from mdviewer.parser import parse_markdown


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the node kinds and shape of a parsed Markdown document.")
    parser.add_argument("--url", help="URL to fetch (e.g. a raw README.md)")
    parser.add_argument("--file", help="Local Markdown file path")
    parser.add_argument("--tree", action="store_true", help="Print the full tree, one node per line")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    markdown = load_markdown(url=args.url, file_path=args.file)
    _, content = parse_front_matter(markdown)
    document = parse_markdown(content)

    if args.tree:
        for depth, node in walk(document):
            print("  " * depth + describe(node))
        print()

    kinds, max_depth = collect_stats(document)
    print("Kinds:")
    for name, count in kinds.most_common():
        print(f"{name}: {count}")
    print(f"\nMax depth: {max_depth}")


def load_markdown(*, url: str | None, file_path: str | None) -> str:
    if url:
        return asyncio.run(fetch_markdown(url))

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def walk(node: Markup, depth: int = 0):
    yield depth, node
    for child in node.children:
        yield from walk(child, depth + 1)


def describe(node: Markup) -> str:
    fields = node.model_dump(exclude={"kind", "children"})
    if not fields:
        return node.kind
    details = ", ".join(f"{key}={value!r}" for key, value in fields.items())
    return f"{node.kind} ({details})"


def collect_stats(document: Markup) -> tuple[Counter, int]:
    kinds = Counter()
    max_depth = 0
    for depth, node in walk(document):
        kinds[node.kind] += 1
        max_depth = max(max_depth, depth)
    return kinds, max_depth


if __name__ == "__main__":
    main()
