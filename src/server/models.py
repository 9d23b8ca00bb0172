"""Pydantic models for the conversion API."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from server.server_config import MAX_INPUT_CHARS


class ConvertOptions(BaseModel):
    """Conversion options accepted by the API.

    Field names follow the Python API; the camelCase names used by Slack
    tooling (``maxTableRows`` and so on) are accepted as aliases. Value
    ranges are checked by ``ConversionOptions``; an out-of-range value gets
    a 400 error response.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    expand_sections: bool | None = Field(default=None, alias="expandSections")
    max_header_length: int | None = Field(default=None, alias="maxHeaderLength")
    max_section_length: int | None = Field(default=None, alias="maxSectionLength")
    max_table_rows: int | None = Field(default=None, alias="maxTableRows")
    max_table_columns: int | None = Field(default=None, alias="maxTableColumns")

    def overrides(self) -> dict[str, Any]:
        """Return only the options the client actually set."""
        return self.model_dump(exclude_none=True)


class ConvertRequest(BaseModel):
    """Request model for the /api/convert endpoint.

    Attributes
    ----------
    markdown : str
        The Markdown text to convert.
    multiple : bool
        Split the output into one block group per table.
    include_warnings : bool
        Attach advisory warnings (block count, table blocks) to the response.
    options : ConvertOptions | None
        Conversion options; server defaults apply when omitted.

    """

    markdown: str = Field(..., description="Markdown text to convert")
    multiple: bool = Field(default=False, description="Split output into one group per table")
    include_warnings: bool = Field(default=False, description="Include advisory warnings")
    options: ConvertOptions | None = Field(default=None, description="Conversion options")

    @field_validator("markdown")
    @classmethod
    def validate_markdown(cls, v: str) -> str:
        """Validate that ``markdown`` fits the configured input limit."""
        if len(v) > MAX_INPUT_CHARS:
            err = f"markdown exceeds the maximum of {MAX_INPUT_CHARS} characters"
            raise ValueError(err)
        return v


class ConvertSuccessResponse(BaseModel):
    """Success response model for the /api/convert endpoint.

    Attributes
    ----------
    blocks : list[dict] | None
        Blocks of a single-message conversion.
    groups : list[list[dict]] | None
        Block groups of a multi-message conversion.
    block_count : int
        Total number of blocks across the response.
    warnings : list[str] | None
        Advisory warnings, when requested and present.

    """

    blocks: list[dict[str, Any]] | None = Field(default=None, description="Slack blocks")
    groups: list[list[dict[str, Any]]] | None = Field(default=None, description="Slack block groups")
    block_count: int = Field(..., description="Total number of blocks")
    warnings: list[str] | None = Field(default=None, description="Advisory warnings")


class ConvertErrorResponse(BaseModel):
    """Error response model for the /api/convert endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


# Union type for API responses
ConvertResponse = Union[ConvertSuccessResponse, ConvertErrorResponse]
