"""Test setup for mdviewer."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_markdown() -> str:
    """A small document exercising front matter, headings, lists and tables."""
    return (
        "---\n"
        "title: Field Notes\n"
        "last_updated: 2024-01-01\n"
        "---\n"
        "# Field Notes\n"
        "\n"
        "Intro with *emphasis* & `code`.\n"
        "\n"
        "## Setup\n"
        "\n"
        "- first\n"
        "- second\n"
        "\n"
        "## Setup\n"
        "\n"
        "| Name | Value |\n"
        "| --- | --- |\n"
        "| a | 1 |\n"
        "\n"
        "### Details\n"
    )
