"""Shared schemas for md2slack."""

from md2slack.schemas.blocks import (
    ColumnSetting,
    DividerBlock,
    RichTextBlock,
    RichTextElement,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    RichTextStyle,
    SlackBlock,
    TableBlock,
    TableCell,
    blocks_to_dicts,
)
from md2slack.schemas.nodes import (
    BlockquoteNode,
    CodeBlockNode,
    DocumentNode,
    EmphasisNode,
    HeadingNode,
    ImageNode,
    InlineCodeNode,
    LineBreakNode,
    LinkNode,
    ListItemNode,
    ListNode,
    MarkdownNode,
    NodeType,
    ParagraphNode,
    StrikethroughNode,
    StrongNode,
    TableCellNode,
    TableNode,
    TableRowNode,
    TextNode,
    ThematicBreakNode,
)
from md2slack.schemas.result import ConversionResult

__all__ = [
    "BlockquoteNode",
    "CodeBlockNode",
    "ColumnSetting",
    "ConversionResult",
    "DividerBlock",
    "DocumentNode",
    "EmphasisNode",
    "HeadingNode",
    "ImageNode",
    "InlineCodeNode",
    "LineBreakNode",
    "LinkNode",
    "ListItemNode",
    "ListNode",
    "MarkdownNode",
    "NodeType",
    "ParagraphNode",
    "RichTextBlock",
    "RichTextElement",
    "RichTextList",
    "RichTextPreformatted",
    "RichTextQuote",
    "RichTextSection",
    "RichTextStyle",
    "SlackBlock",
    "StrikethroughNode",
    "StrongNode",
    "TableBlock",
    "TableCell",
    "TableCellNode",
    "TableNode",
    "TableRowNode",
    "TextNode",
    "ThematicBreakNode",
    "blocks_to_dicts",
]
