"""Tests for links inside table cells."""

from __future__ import annotations

from md2slack.converter import markdown_to_blocks
from md2slack.schemas import blocks_to_dicts


def table(markdown: str) -> dict:
    blocks = blocks_to_dicts(markdown_to_blocks(markdown))
    assert len(blocks) == 1
    assert blocks[0]["type"] == "table"
    return blocks[0]


def cell_elements(table_block: dict, row: int, column: int) -> list[dict]:
    cell = table_block["rows"][row][column]
    assert cell["type"] == "rich_text"
    return cell["elements"][0]["elements"]


class TestTableLinks:
    """Tests for inline links in table cells."""

    def test_links_in_cells(self) -> None:
        result = table(
            "| Project | Description |\n|---------|-------------|\n"
            "| [Project A](https://example.com/a) | A simple project |\n"
            "| [Project B](https://example.com/b) | Another project |"
        )

        assert cell_elements(result, 1, 0) == [
            {"type": "link", "url": "https://example.com/a", "text": "Project A"}
        ]
        assert cell_elements(result, 2, 0) == [
            {"type": "link", "url": "https://example.com/b", "text": "Project B"}
        ]
        assert cell_elements(result, 1, 1) == [{"type": "text", "text": "A simple project"}]

    def test_three_column_project_table(self) -> None:
        result = table(
            "| Project | Description | Status |\n|---------|-------------|--------|\n"
            "| [Website Redesign](https://example.com/projects/1) | Update landing page | In Progress |\n"
            "| [API Integration](https://example.com/projects/2) | Connect to third-party services | Completed |"
        )

        assert len(result["column_settings"]) == 3
        assert cell_elements(result, 1, 0)[0]["text"] == "Website Redesign"
        assert cell_elements(result, 2, 0)[0]["url"] == "https://example.com/projects/2"
        assert cell_elements(result, 2, 2) == [{"type": "text", "text": "Completed"}]

    def test_links_without_custom_text(self) -> None:
        result = table(
            "| URL | Type |\n|-----|------|\n"
            "| <https://example.com> | Direct |\n"
            "| [](https://example.org) | Empty text |"
        )

        assert cell_elements(result, 1, 0) == [{"type": "link", "url": "https://example.com"}]
        assert cell_elements(result, 2, 0) == [{"type": "link", "url": "https://example.org"}]

    def test_styled_link_in_cell(self) -> None:
        result = table("| Name |\n|------|\n| **[Docs](https://docs.example)** |")

        assert cell_elements(result, 1, 0) == [
            {"type": "link", "url": "https://docs.example", "text": "Docs", "style": {"bold": True}}
        ]
