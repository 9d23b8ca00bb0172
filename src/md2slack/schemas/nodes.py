"""Parsed Markdown tree models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class NodeType(str, Enum):
    """Supported Markdown element types."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    STRIKETHROUGH = "strikethrough"
    CODE_INLINE = "code_inline"
    CODE_BLOCK = "code_block"
    LINK = "link"
    IMAGE = "image"
    LIST = "list"
    LIST_ITEM = "list_item"
    BLOCKQUOTE = "blockquote"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    THEMATIC_BREAK = "thematic_break"
    LINE_BREAK = "line_break"
    TEXT = "text"


class MarkdownNode(BaseModel):
    """Base class for every tree node."""

    type: str

    def to_dict(self) -> dict[str, Any]:
        """Render the node and its subtree as a JSON-compatible dict."""
        return self.model_dump(mode="json", exclude_none=True)


class LeafNode(MarkdownNode):
    """A node holding a text payload and no children."""

    content: str = ""


class ContainerNode(MarkdownNode):
    """A node holding an ordered list of child nodes."""

    children: list[Node] = Field(default_factory=list)


class TextNode(LeafNode):
    type: Literal["text"] = "text"


class InlineCodeNode(LeafNode):
    type: Literal["code_inline"] = "code_inline"


class LinkNode(LeafNode):
    """Inline link; ``content`` is the display text."""

    type: Literal["link"] = "link"
    href: str = ""


class ImageNode(LeafNode):
    """Inline image; ``content`` is the alt text."""

    type: Literal["image"] = "image"
    src: str = ""


class CodeBlockNode(LeafNode):
    """Fenced code block holding the raw, unparsed lines."""

    type: Literal["code_block"] = "code_block"
    language: str = ""


class LineBreakNode(MarkdownNode):
    type: Literal["line_break"] = "line_break"


class ThematicBreakNode(MarkdownNode):
    type: Literal["thematic_break"] = "thematic_break"


class StrongNode(ContainerNode):
    type: Literal["strong"] = "strong"


class EmphasisNode(ContainerNode):
    type: Literal["emphasis"] = "emphasis"


class StrikethroughNode(ContainerNode):
    type: Literal["strikethrough"] = "strikethrough"


class HeadingNode(ContainerNode):
    type: Literal["heading"] = "heading"
    level: int = Field(default=1, ge=1, le=6)


class ParagraphNode(ContainerNode):
    type: Literal["paragraph"] = "paragraph"


class BlockquoteNode(ContainerNode):
    type: Literal["blockquote"] = "blockquote"


class ListItemNode(ContainerNode):
    """A list item; ``has_continuation`` marks flattened indented lines."""

    type: Literal["list_item"] = "list_item"
    has_continuation: bool = False


class ListNode(ContainerNode):
    """A flat list of items; ``start`` is only set for ordered lists."""

    type: Literal["list"] = "list"
    ordered: bool = False
    start: int | None = None


class TableCellNode(ContainerNode):
    type: Literal["table_cell"] = "table_cell"
    is_header: bool = False


class TableRowNode(ContainerNode):
    type: Literal["table_row"] = "table_row"


class TableNode(ContainerNode):
    """A table; the first row is the header row."""

    type: Literal["table"] = "table"


class DocumentNode(ContainerNode):
    """Root of a parsed document holding the top-level block nodes."""

    type: Literal["document"] = "document"


Node = Annotated[
    Union[
        TextNode,
        InlineCodeNode,
        LinkNode,
        ImageNode,
        CodeBlockNode,
        LineBreakNode,
        ThematicBreakNode,
        StrongNode,
        EmphasisNode,
        StrikethroughNode,
        HeadingNode,
        ParagraphNode,
        BlockquoteNode,
        ListItemNode,
        ListNode,
        TableCellNode,
        TableRowNode,
        TableNode,
        DocumentNode,
    ],
    Field(discriminator="type"),
]

for _model in (
    ContainerNode,
    StrongNode,
    EmphasisNode,
    StrikethroughNode,
    HeadingNode,
    ParagraphNode,
    BlockquoteNode,
    ListItemNode,
    ListNode,
    TableCellNode,
    TableRowNode,
    TableNode,
    DocumentNode,
):
    _model.model_rebuild()
