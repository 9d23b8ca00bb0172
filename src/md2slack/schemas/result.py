"""Conversion result model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from md2slack.schemas.blocks import SlackBlock


class ConversionResult(BaseModel):
    """Blocks produced by a conversion plus advisory warnings."""

    blocks: list[SlackBlock]
    warnings: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
