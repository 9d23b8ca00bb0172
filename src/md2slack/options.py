"""Conversion options shared by the builder and the converter API."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from md2slack.config import (
    MD2SLACK_MAX_HEADER_LENGTH,
    MD2SLACK_MAX_SECTION_LENGTH,
    MD2SLACK_MAX_TABLE_COLUMNS,
    MD2SLACK_MAX_TABLE_ROWS,
)
from md2slack.exceptions import OptionsError

# Option names as they appear in Slack-facing JSON payloads.
_CAMEL_CASE_NAMES = {
    "expandSections": "expand_sections",
    "maxHeaderLength": "max_header_length",
    "maxSectionLength": "max_section_length",
    "maxTableRows": "max_table_rows",
    "maxTableColumns": "max_table_columns",
}

_POSITIVE_INT_FIELDS = (
    "max_header_length",
    "max_section_length",
    "max_table_rows",
    "max_table_columns",
)


@dataclass
class ConversionOptions:
    """Options for Markdown to Slack block conversion.

    Only the two table caps change the output. ``expand_sections``,
    ``max_header_length`` and ``max_section_length`` are accepted and kept
    so callers can pass through a full Slack option set, but the builder
    does not truncate headings or sections.

    Attributes:
        expand_sections: Whether Slack should render sections fully expanded.
        max_header_length: Slack header text limit.
        max_section_length: Slack section text limit.
        max_table_rows: Maximum number of rows emitted per table, header
            row included.
        max_table_columns: Maximum number of cells emitted per table row.
    """

    expand_sections: bool = True
    max_header_length: int = MD2SLACK_MAX_HEADER_LENGTH
    max_section_length: int = MD2SLACK_MAX_SECTION_LENGTH
    max_table_rows: int = MD2SLACK_MAX_TABLE_ROWS
    max_table_columns: int = MD2SLACK_MAX_TABLE_COLUMNS

    def __post_init__(self) -> None:
        for name in _POSITIVE_INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise OptionsError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> ConversionOptions:
        """Build options from snake_case or camelCase keys.

        Raises:
            OptionsError: If a key is not a known option or a value is invalid.
        """
        return cls().merged(**_normalize_keys(values or {}))

    def merged(self, **overrides: Any) -> ConversionOptions:
        """Return a copy with ``overrides`` applied; ``None`` values are ignored."""
        known = {item.name for item in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise OptionsError(f"Unknown conversion option(s): {', '.join(unknown)}")
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _normalize_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    return {_CAMEL_CASE_NAMES.get(key, key): value for key, value in values.items()}
