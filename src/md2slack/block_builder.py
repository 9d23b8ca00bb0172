"""Build Slack blocks from a parsed Markdown tree.

Flowable content (headings, paragraphs, quotes, lists, code) is gathered
into ``rich_text`` blocks. Dividers and tables cannot live inside a
``rich_text`` block, so they flush the pending elements first and are
emitted as blocks of their own.
"""

from __future__ import annotations

import logging

from md2slack.options import ConversionOptions
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
    TableBlock,
    TableCell,
)
from md2slack.schemas.nodes import (
    BlockquoteNode,
    CodeBlockNode,
    ContainerNode,
    DocumentNode,
    EmphasisNode,
    HeadingNode,
    ImageNode,
    InlineCodeNode,
    LineBreakNode,
    LinkNode,
    ListNode,
    MarkdownNode,
    ParagraphNode,
    StrikethroughNode,
    StrongNode,
    TableNode,
    TextNode,
    ThematicBreakNode,
)

logger = logging.getLogger(__name__)

Block = RichTextBlock | DividerBlock | TableBlock
FlowableElement = RichTextSection | RichTextList | RichTextQuote | RichTextPreformatted

_IMAGE_FALLBACK_TEXT = "Image"


class SlackBlockBuilder:
    """Assemble Slack blocks from a ``DocumentNode``.

    The builder only holds options. Pending flowable elements live in a
    local list per call, so one instance can be reused across conversions.
    """

    def __init__(self, options: ConversionOptions | None = None) -> None:
        self.options = options or ConversionOptions()

    def build_blocks(self, document: DocumentNode) -> list[Block]:
        """Convert a document tree into one ordered list of blocks."""
        blocks: list[Block] = []
        pending: list[FlowableElement] = []

        for child in document.children:
            if isinstance(child, ThematicBreakNode):
                _flush(pending, blocks)
                blocks.append(DividerBlock())
            elif isinstance(child, TableNode):
                _flush(pending, blocks)
                table = self._build_table_block(child)
                if table is not None:
                    blocks.append(table)
            else:
                pending.extend(self._build_flowable(child, pending))

        _flush(pending, blocks)
        return blocks

    def build_blocks_multiple(self, document: DocumentNode) -> list[list[Block]]:
        """Convert a document tree into groups holding at most one table each.

        Slack accepts a single table per message. A new group starts at the
        second and later tables; content accumulated before such a table is
        flushed into the previous group, so each new group begins with its
        table and holds what follows it.
        """
        groups: list[list[Block]] = []
        current: list[Block] = []
        pending: list[FlowableElement] = []
        table_count = 0

        for child in document.children:
            if isinstance(child, ThematicBreakNode):
                _flush(pending, current)
                current.append(DividerBlock())
            elif isinstance(child, TableNode):
                if table_count > 0:
                    _flush(pending, current)
                    if current:
                        groups.append(current)
                    current = []
                    table_count = 0

                _flush(pending, current)
                table = self._build_table_block(child)
                if table is not None:
                    current.append(table)
                    table_count += 1
            else:
                pending.extend(self._build_flowable(child, pending))

        _flush(pending, current)
        if current:
            groups.append(current)
        if not groups:
            groups.append([])
        return groups

    def _build_flowable(
        self, node: MarkdownNode, pending: list[FlowableElement]
    ) -> list[FlowableElement]:
        if isinstance(node, HeadingNode):
            return [self._build_heading(node, has_previous=bool(pending))]
        if isinstance(node, ParagraphNode):
            return [RichTextSection(elements=_or_blank(build_rich_text_elements(node)))]
        if isinstance(node, CodeBlockNode):
            return [RichTextPreformatted(elements=[RichTextElement(text=node.content)])]
        if isinstance(node, BlockquoteNode):
            return [RichTextQuote(elements=_or_blank(build_rich_text_elements(node)))]
        if isinstance(node, ListNode):
            return [self._build_list(node)]
        return []

    def _build_heading(self, node: HeadingNode, *, has_previous: bool) -> RichTextSection:
        """Render a heading as a bold section.

        Levels 1 and 2 are set apart with line breaks: one before when other
        content precedes it in the same ``rich_text`` block, and one after.
        """
        elements = build_rich_text_elements(node, RichTextStyle(bold=True))
        if node.level <= 2:
            leading = [_line_break()] if has_previous else []
            elements = [*leading, *elements, _line_break()]
        return RichTextSection(elements=_or_blank(elements))

    def _build_list(self, node: ListNode) -> RichTextList:
        # Items keep their flattened continuation text as-is.
        sections = [
            RichTextSection(elements=_or_blank(build_rich_text_elements(item)))
            for item in node.children
        ]
        rich_list = RichTextList(style="ordered" if node.ordered else "bullet", elements=sections)
        start = node.start or 1
        if node.ordered and start > 1:
            rich_list.offset = start - 1
        return rich_list

    def _build_table_block(self, node: TableNode) -> TableBlock | None:
        """Build a table block with ``rich_text`` cells.

        Rows and cells are capped independently by ``max_table_rows`` and
        ``max_table_columns``; short rows are not padded.
        """
        max_rows = self.options.max_table_rows
        max_columns = self.options.max_table_columns
        rows: list[list[TableCell]] = []
        widest = 0

        for row_node in node.children[:max_rows]:
            if not isinstance(row_node, ContainerNode):
                continue
            cells = [
                TableCell(
                    type="rich_text",
                    elements=[RichTextSection(elements=_or_blank(build_rich_text_elements(cell)))],
                )
                for cell in row_node.children[:max_columns]
            ]
            widest = max(widest, len(cells))
            rows.append(cells)

        if len(node.children) > max_rows:
            logger.debug("Truncated table from %d to %d rows", len(node.children), max_rows)
        if not rows:
            return None

        return TableBlock(
            rows=rows,
            column_settings=[ColumnSetting(is_wrapped=True) for _ in range(widest)],
        )


def build_rich_text_elements(
    node: MarkdownNode, style: RichTextStyle | None = None
) -> list[RichTextElement]:
    """Flatten an inline subtree into rich text elements.

    Formatting nodes merge their flag into ``style`` as the recursion
    descends; the accumulated style lands on the text and link leaves and
    is left off entirely when no flag is set.
    """
    if isinstance(node, TextNode):
        if not node.content:
            return []
        return [RichTextElement(text=node.content, style=_active(style))]

    if isinstance(node, InlineCodeNode):
        return [RichTextElement(text=node.content, style=_merge(style, code=True))]

    if isinstance(node, LinkNode):
        element = RichTextElement(type="link", url=node.href, style=_active(style))
        if node.content and node.content != node.href:
            element.text = node.content
        return [element]

    if isinstance(node, ImageNode):
        # rich_text has no image element, so link to the image instead.
        alt = node.content or _IMAGE_FALLBACK_TEXT
        return [RichTextElement(type="link", url=node.src, text=alt if alt != node.src else None)]

    if isinstance(node, LineBreakNode):
        return [_line_break()]

    if isinstance(node, StrongNode):
        style = _merge(style, bold=True)
    elif isinstance(node, EmphasisNode):
        style = _merge(style, italic=True)
    elif isinstance(node, StrikethroughNode):
        style = _merge(style, strike=True)

    elements: list[RichTextElement] = []
    if isinstance(node, ContainerNode):
        for child in node.children:
            elements.extend(build_rich_text_elements(child, style))
    return elements


def _merge(style: RichTextStyle | None, **flags: bool) -> RichTextStyle:
    return style.merged(**flags) if style else RichTextStyle(**flags)


def _active(style: RichTextStyle | None) -> RichTextStyle | None:
    if style is None or not style.has_style():
        return None
    return style.model_copy()


def _line_break() -> RichTextElement:
    return RichTextElement(text="\n")


def _or_blank(elements: list[RichTextElement]) -> list[RichTextElement]:
    # Slack rejects empty sections.
    return elements or [RichTextElement(text=" ")]


def _flush(pending: list[FlowableElement], blocks: list[Block]) -> None:
    if pending:
        blocks.append(RichTextBlock(elements=list(pending)))
        pending.clear()
