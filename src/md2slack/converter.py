"""Markdown to Slack blocks conversion API."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Any

from md2slack.block_builder import Block, SlackBlockBuilder
from md2slack.config import MD2SLACK_BLOCK_WARNING_LIMIT
from md2slack.options import ConversionOptions
from md2slack.parser import parse_markdown
from md2slack.schemas import ConversionResult, TableBlock, blocks_to_dicts

logger = logging.getLogger(__name__)

TABLE_WARNING = "Table blocks are custom implementations and may not render in all Slack clients"


def markdown_to_blocks(markdown: str, options: ConversionOptions | None = None) -> list[Block]:
    """Convert Markdown text into a list of Slack blocks.

    Args:
        markdown: The Markdown text to convert.
        options: Conversion options. Uses defaults if None.

    Returns:
        Blocks ready to pass to ``chat.postMessage`` after ``to_dict()``.
    """
    document = parse_markdown(markdown)
    return SlackBlockBuilder(options).build_blocks(document)


def markdown_to_blocks_multiple(
    markdown: str, options: ConversionOptions | None = None
) -> list[list[Block]]:
    """Convert Markdown into block groups holding at most one table each.

    Slack only allows one table per message, so each group can be sent as
    its own message.
    """
    document = parse_markdown(markdown)
    return SlackBlockBuilder(options).build_blocks_multiple(document)


def markdown_to_blocks_with_metadata(
    markdown: str, options: ConversionOptions | None = None
) -> ConversionResult:
    """Convert Markdown and report advisory warnings alongside the blocks.

    Warnings never change the blocks. A failure during conversion is
    reported as a warning with an empty block list instead of being raised.
    """
    try:
        blocks = markdown_to_blocks(markdown, options)
    except Exception as exc:
        logger.exception("Markdown conversion failed")
        return ConversionResult(blocks=[], warnings=[f"Conversion error: {exc}"])

    return ConversionResult(blocks=blocks, warnings=collect_warnings(blocks) or None)


def collect_warnings(blocks: list[Block]) -> list[str]:
    """Return advisory warnings for one message worth of blocks."""
    warnings: list[str] = []
    if len(blocks) > MD2SLACK_BLOCK_WARNING_LIMIT:
        warnings.append(
            f"Block count ({len(blocks)}) exceeds Slack's recommended limit of "
            f"{MD2SLACK_BLOCK_WARNING_LIMIT} blocks per message"
        )
    if any(isinstance(block, TableBlock) for block in blocks):
        warnings.append(TABLE_WARNING)
    return warnings


def markdown_to_blocks_json(
    markdown: str, options: ConversionOptions | None = None
) -> list[dict[str, Any]]:
    """Convert Markdown into plain, JSON-serializable block dicts."""
    blocks = markdown_to_blocks(markdown, options)
    return json.loads(json.dumps(blocks_to_dicts(blocks)))


class MarkdownConverter:
    """Convert Markdown with options kept between calls.

    Example:
        converter = MarkdownConverter(ConversionOptions(max_table_rows=10))
        blocks = converter.convert("# Title")
    """

    def __init__(self, options: ConversionOptions | None = None) -> None:
        self._options = options or ConversionOptions()

    def convert(self, markdown: str) -> list[Block]:
        return markdown_to_blocks(markdown, self._options)

    def convert_multiple(self, markdown: str) -> list[list[Block]]:
        return markdown_to_blocks_multiple(markdown, self._options)

    def convert_with_metadata(self, markdown: str) -> ConversionResult:
        return markdown_to_blocks_with_metadata(markdown, self._options)

    def convert_to_json(self, markdown: str) -> list[dict[str, Any]]:
        return markdown_to_blocks_json(markdown, self._options)

    def set_options(self, **overrides: Any) -> None:
        """Merge ``overrides`` into the current options."""
        self._options = self._options.merged(**overrides)

    def get_options(self) -> ConversionOptions:
        """Return a copy of the current options."""
        return replace(self._options)
