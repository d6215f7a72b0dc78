"""Command line entry point: ``python -m mdviewer``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mdviewer.config import MDVIEWER_LOG_LEVEL
from mdviewer.document import load_document, load_document_from_url
from mdviewer.outline import format_outline
from mdviewer.schemas import RenderedDocument

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdviewer",
        description="Render a Markdown document to an HTML fragment and heading outline.",
    )
    parser.add_argument("path", nargs="?", help="Local Markdown file")
    parser.add_argument("--url", help="Fetch the Markdown document from a URL instead")
    parser.add_argument(
        "--format",
        choices=("html", "json", "outline"),
        default="html",
        help="What to print (default: html)",
    )
    parser.add_argument("--output", "-o", help="Write to this file instead of stdout")
    parser.add_argument(
        "--raw-outline",
        action="store_true",
        help="Keep a lone level-1 heading in the outline",
    )
    parser.add_argument("--log-level", default=MDVIEWER_LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if bool(args.path) == bool(args.url):
        parser.error("Provide exactly one of PATH or --url")

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    normalize = not args.raw_outline
    if args.url:
        document = asyncio.run(load_document_from_url(args.url, normalize=normalize))
    else:
        document = load_document(args.path, normalize=normalize)

    output = format_document(document, args.format)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")

    return 1 if document.error else 0


def format_document(document: RenderedDocument, output_format: str) -> str:
    if output_format == "json":
        return document.model_dump_json(indent=2)
    if output_format == "outline":
        return format_outline(document.outline)
    return document.html


if __name__ == "__main__":
    sys.exit(main())
