"""md2slack: convert Markdown into Slack Block Kit blocks."""

from md2slack.block_builder import SlackBlockBuilder
from md2slack.converter import (
    MarkdownConverter,
    markdown_to_blocks,
    markdown_to_blocks_json,
    markdown_to_blocks_multiple,
    markdown_to_blocks_with_metadata,
)
from md2slack.exceptions import Md2slackError, OptionsError
from md2slack.options import ConversionOptions
from md2slack.parser import MarkdownParser, parse_inline, parse_markdown
from md2slack.schemas import ConversionResult, DocumentNode, NodeType, SlackBlock

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "DocumentNode",
    "MarkdownConverter",
    "MarkdownParser",
    "Md2slackError",
    "NodeType",
    "OptionsError",
    "SlackBlock",
    "SlackBlockBuilder",
    "markdown_to_blocks",
    "markdown_to_blocks_json",
    "markdown_to_blocks_multiple",
    "markdown_to_blocks_with_metadata",
    "parse_inline",
    "parse_markdown",
]
