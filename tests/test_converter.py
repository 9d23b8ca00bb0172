"""Tests for the conversion API and options."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from md2slack import (
    ConversionOptions,
    MarkdownConverter,
    OptionsError,
    markdown_to_blocks,
    markdown_to_blocks_json,
    markdown_to_blocks_with_metadata,
)
from md2slack.converter import TABLE_WARNING, collect_warnings
from md2slack.schemas import DividerBlock, blocks_to_dicts

TABLE_MARKDOWN = "| A | B | C |\n|---|---|---|\n| 1 | 2 | 3 |\n| 4 | 5 | 6 |"


class TestConversion:
    """Tests for the functional conversion entry points."""

    def test_empty_input_gives_no_blocks(self) -> None:
        """Empty and whitespace-only input convert to an empty list."""
        assert markdown_to_blocks("") == []
        assert markdown_to_blocks("   \n\n\t\n") == []

    def test_default_options_are_used(self) -> None:
        """Omitting options is the same as passing the defaults."""
        markdown = "# Title\n\ntext\n\n" + TABLE_MARKDOWN

        assert blocks_to_dicts(markdown_to_blocks(markdown)) == blocks_to_dicts(
            markdown_to_blocks(markdown, ConversionOptions())
        )

    def test_json_output_is_plain_data(self) -> None:
        """JSON conversion returns dicts and lists only."""
        result = markdown_to_blocks_json("Hello **world**")

        assert result == [
            {
                "type": "rich_text",
                "elements": [
                    {
                        "type": "rich_text_section",
                        "elements": [
                            {"type": "text", "text": "Hello "},
                            {"type": "text", "text": "world", "style": {"bold": True}},
                        ],
                    }
                ],
            }
        ]

    def test_unrecognised_text_never_fails(self) -> None:
        """Stray markers fall through to paragraphs."""
        blocks = blocks_to_dicts(markdown_to_blocks("#hashtag\n  - indented\n**open\n~~x"))

        assert len(blocks) == 1
        assert blocks[0]["elements"][0]["type"] == "rich_text_section"


class TestMetadata:
    """Tests for conversion with advisory warnings."""

    def test_no_warnings_for_small_message(self) -> None:
        """Warnings are omitted entirely when nothing is flagged."""
        result = markdown_to_blocks_with_metadata("# Title\n\nBody")

        assert result.warnings is None
        assert "warnings" not in result.to_dict()
        assert len(result.blocks) == 1

    def test_table_warning(self) -> None:
        """A table in the output adds the rendering warning."""
        result = markdown_to_blocks_with_metadata(TABLE_MARKDOWN)

        assert result.warnings == [TABLE_WARNING]
        assert result.to_dict()["blocks"][0]["type"] == "table"

    def test_block_count_warning(self) -> None:
        """More than fifty blocks triggers the block count warning."""
        result = markdown_to_blocks_with_metadata("---\n\n" * 51)

        assert len(result.blocks) == 51
        assert result.warnings == [
            "Block count (51) exceeds Slack's recommended limit of 50 blocks per message"
        ]

    def test_fifty_blocks_is_within_limit(self) -> None:
        """Exactly fifty blocks is not flagged."""
        assert collect_warnings([DividerBlock() for _ in range(50)]) == []

    def test_both_warnings_in_order(self) -> None:
        """Block count comes before the table warning."""
        markdown = "---\n\n" * 50 + TABLE_MARKDOWN

        result = markdown_to_blocks_with_metadata(markdown)

        assert result.warnings is not None
        assert len(result.warnings) == 2
        assert result.warnings[0].startswith("Block count (51)")
        assert result.warnings[1] == TABLE_WARNING

    def test_warnings_do_not_change_blocks(self) -> None:
        """The metadata wrapper returns the same blocks as plain conversion."""
        markdown = "# Title\n\n" + TABLE_MARKDOWN

        result = markdown_to_blocks_with_metadata(markdown)

        assert blocks_to_dicts(result.blocks) == blocks_to_dicts(markdown_to_blocks(markdown))

    def test_failure_is_reported_as_warning(self) -> None:
        """An unexpected error yields no blocks and a conversion error warning."""
        with patch("md2slack.converter.parse_markdown", side_effect=RuntimeError("boom")):
            result = markdown_to_blocks_with_metadata("# Title")

        assert result.blocks == []
        assert result.warnings == ["Conversion error: boom"]


class TestMarkdownConverter:
    """Tests for the stateful converter."""

    def test_convert_uses_stored_options(self) -> None:
        """Table caps from the constructor apply to every call."""
        converter = MarkdownConverter(ConversionOptions(max_table_rows=2, max_table_columns=1))

        table = blocks_to_dicts(converter.convert(TABLE_MARKDOWN))[0]

        assert [len(row) for row in table["rows"]] == [1, 1]

    def test_set_options_merges(self) -> None:
        """Only the given options change."""
        converter = MarkdownConverter(ConversionOptions(max_table_columns=2))

        converter.set_options(max_table_rows=1)

        options = converter.get_options()
        assert options.max_table_rows == 1
        assert options.max_table_columns == 2

    def test_set_options_rejects_unknown_names(self) -> None:
        """Unknown option names raise and leave the options untouched."""
        converter = MarkdownConverter()

        with pytest.raises(OptionsError, match="max_rows"):
            converter.set_options(max_rows=5)

        assert converter.get_options() == ConversionOptions()

    def test_get_options_returns_copy(self) -> None:
        """Mutating the returned options does not affect the converter."""
        converter = MarkdownConverter()

        options = converter.get_options()
        options.max_table_rows = 1

        assert converter.get_options().max_table_rows == ConversionOptions().max_table_rows

    def test_all_outputs_agree(self) -> None:
        """Every converter method describes the same blocks."""
        converter = MarkdownConverter()
        markdown = "# Title\n\n" + TABLE_MARKDOWN

        expected = blocks_to_dicts(converter.convert(markdown))

        assert converter.convert_to_json(markdown) == expected
        assert blocks_to_dicts(converter.convert_with_metadata(markdown).blocks) == expected
        assert [blocks_to_dicts(group) for group in converter.convert_multiple(markdown)] == [expected]


class TestConversionOptions:
    """Tests for option validation and merging."""

    def test_defaults(self) -> None:
        """Defaults match Slack's documented limits."""
        options = ConversionOptions()

        assert options.to_dict() == {
            "expand_sections": True,
            "max_header_length": 150,
            "max_section_length": 3000,
            "max_table_rows": 100,
            "max_table_columns": 20,
        }

    @pytest.mark.parametrize("value", [0, -3, True, "10", 1.5])
    def test_rejects_invalid_limits(self, value: object) -> None:
        """Limits must be positive integers."""
        with pytest.raises(OptionsError, match="max_table_rows"):
            ConversionOptions(max_table_rows=value)  # type: ignore[arg-type]

    def test_options_error_is_value_error(self) -> None:
        """Callers catching ValueError also catch option errors."""
        with pytest.raises(ValueError):
            ConversionOptions(max_table_columns=0)

    def test_from_mapping_accepts_camel_case(self) -> None:
        """camelCase and snake_case keys can be mixed."""
        options = ConversionOptions.from_mapping(
            {"maxTableRows": 5, "max_table_columns": 3, "expandSections": False}
        )

        assert options.max_table_rows == 5
        assert options.max_table_columns == 3
        assert options.expand_sections is False

    def test_from_mapping_none_gives_defaults(self) -> None:
        """A missing mapping means default options."""
        assert ConversionOptions.from_mapping(None) == ConversionOptions()

    def test_from_mapping_rejects_unknown_keys(self) -> None:
        """Unknown keys are reported by name."""
        with pytest.raises(OptionsError, match="maxRows"):
            ConversionOptions.from_mapping({"maxRows": 5})

    def test_merged_ignores_none(self) -> None:
        """``None`` overrides keep the current value."""
        options = ConversionOptions(max_table_rows=7).merged(max_table_rows=None, max_table_columns=4)

        assert options.max_table_rows == 7
        assert options.max_table_columns == 4

    def test_merged_validates_values(self) -> None:
        """Merged values go through the same validation."""
        with pytest.raises(OptionsError):
            ConversionOptions().merged(max_table_columns=0)
