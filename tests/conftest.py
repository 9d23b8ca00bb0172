"""Test setup for md2slack."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from md2slack.block_builder import SlackBlockBuilder  # noqa: E402
from md2slack.options import ConversionOptions  # noqa: E402


@pytest.fixture
def builder() -> SlackBlockBuilder:
    """Block builder with default options."""
    return SlackBlockBuilder(ConversionOptions())
