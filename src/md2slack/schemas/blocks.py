"""Slack Block Kit models produced by the block builder.

Only the block kinds the converter emits are modelled: ``rich_text``,
``divider`` and ``table``. See https://docs.slack.dev/reference/block-kit/blocks/
for the upstream schema.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class SlackModel(BaseModel):
    """Base model with Slack-compatible serialization."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict, dropping unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class RichTextStyle(SlackModel):
    """Formatting flags attached to a text or link element."""

    bold: bool | None = None
    italic: bool | None = None
    strike: bool | None = None
    code: bool | None = None

    def has_style(self) -> bool:
        return bool(self.bold or self.italic or self.strike or self.code)

    def merged(self, **flags: bool) -> RichTextStyle:
        """Return a new style with ``flags`` added to the ones already set."""
        return RichTextStyle(**{**self.model_dump(exclude_none=True), **flags})


class RichTextElement(SlackModel):
    """A leaf element inside a rich text section, quote or preformatted block."""

    type: Literal["text", "link"] = "text"
    text: str | None = None
    url: str | None = None
    style: RichTextStyle | None = None


class RichTextSection(SlackModel):
    type: Literal["rich_text_section"] = "rich_text_section"
    elements: list[RichTextElement] = Field(default_factory=list)


class RichTextList(SlackModel):
    """A bullet or ordered list; ``offset`` shifts the first number."""

    type: Literal["rich_text_list"] = "rich_text_list"
    style: Literal["bullet", "ordered"] = "bullet"
    indent: int | None = Field(default=None, ge=0, le=8)
    offset: int | None = Field(default=None, ge=0)
    elements: list[RichTextSection] = Field(default_factory=list)


class RichTextQuote(SlackModel):
    type: Literal["rich_text_quote"] = "rich_text_quote"
    elements: list[RichTextElement] = Field(default_factory=list)


class RichTextPreformatted(SlackModel):
    type: Literal["rich_text_preformatted"] = "rich_text_preformatted"
    elements: list[RichTextElement] = Field(default_factory=list)


RichTextBlockElement = Annotated[
    Union[RichTextSection, RichTextList, RichTextQuote, RichTextPreformatted],
    Field(discriminator="type"),
]


class RichTextBlock(SlackModel):
    """Container for flowable content (sections, lists, quotes, code)."""

    type: Literal["rich_text"] = "rich_text"
    elements: list[RichTextBlockElement] = Field(default_factory=list)


class DividerBlock(SlackModel):
    type: Literal["divider"] = "divider"


class TableCell(SlackModel):
    """A table cell, either raw text or a small rich text fragment."""

    type: Literal["raw_text", "rich_text"] = "rich_text"
    text: str | None = None
    elements: list[RichTextSection] | None = None


class ColumnSetting(SlackModel):
    align: Literal["left", "center", "right"] | None = None
    is_wrapped: bool | None = None


class TableBlock(SlackModel):
    """Slack table block; rows are lists of cells in row-major order."""

    type: Literal["table"] = "table"
    rows: list[list[TableCell]] = Field(default_factory=list)
    block_id: str | None = None
    column_settings: list[ColumnSetting] | None = None


SlackBlock = Annotated[
    Union[RichTextBlock, DividerBlock, TableBlock],
    Field(discriminator="type"),
]


def blocks_to_dicts(blocks: list[RichTextBlock | DividerBlock | TableBlock]) -> list[dict[str, Any]]:
    """Serialize a block list into JSON-compatible dicts."""
    return [block.to_dict() for block in blocks]
