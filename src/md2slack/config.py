"""Local configuration for md2slack."""

from __future__ import annotations

import os


DEFAULT_MAX_HEADER_LENGTH = 150
DEFAULT_MAX_SECTION_LENGTH = 3000
DEFAULT_MAX_TABLE_ROWS = 100
DEFAULT_MAX_TABLE_COLUMNS = 20
DEFAULT_BLOCK_WARNING_LIMIT = 50
DEFAULT_MAX_INPUT_CHARS = 200_000

# Slack documents 150/3000 for header and section text, 100x20 for tables.
MD2SLACK_MAX_HEADER_LENGTH = int(os.getenv("MD2SLACK_MAX_HEADER_LENGTH", str(DEFAULT_MAX_HEADER_LENGTH)))
MD2SLACK_MAX_SECTION_LENGTH = int(os.getenv("MD2SLACK_MAX_SECTION_LENGTH", str(DEFAULT_MAX_SECTION_LENGTH)))
MD2SLACK_MAX_TABLE_ROWS = int(os.getenv("MD2SLACK_MAX_TABLE_ROWS", str(DEFAULT_MAX_TABLE_ROWS)))
MD2SLACK_MAX_TABLE_COLUMNS = int(os.getenv("MD2SLACK_MAX_TABLE_COLUMNS", str(DEFAULT_MAX_TABLE_COLUMNS)))
# Advisory only: the metadata wrapper warns past this many blocks.
MD2SLACK_BLOCK_WARNING_LIMIT = int(os.getenv("MD2SLACK_BLOCK_WARNING_LIMIT", str(DEFAULT_BLOCK_WARNING_LIMIT)))
MD2SLACK_MAX_INPUT_CHARS = int(os.getenv("MD2SLACK_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
