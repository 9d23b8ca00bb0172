"""Convert a Markdown file (or stdin) into Slack blocks and print them as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from md2slack.converter import (
    markdown_to_blocks,
    markdown_to_blocks_multiple,
    markdown_to_blocks_with_metadata,
)
from md2slack.exceptions import OptionsError
from md2slack.options import ConversionOptions
from md2slack.parser import parse_markdown
from md2slack.schemas import blocks_to_dicts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="md2slack", description="Convert Markdown into Slack Block Kit JSON.")
    parser.add_argument("file", nargs="?", default="-", help="Markdown file to convert (default: stdin)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--multiple", action="store_true", help="Split output into one block list per table")
    mode.add_argument("--metadata", action="store_true", help="Print blocks together with conversion warnings")
    mode.add_argument("--tree", action="store_true", help="Print the parsed Markdown tree instead of blocks")
    parser.add_argument("--max-table-rows", type=int, help="Maximum rows emitted per table")
    parser.add_argument("--max-table-columns", type=int, help="Maximum cells emitted per table row")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact output)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        markdown = load_markdown(args.file)
        options = ConversionOptions().merged(
            max_table_rows=args.max_table_rows,
            max_table_columns=args.max_table_columns,
        )
    except (OSError, OptionsError) as exc:
        print(f"md2slack: {exc}", file=sys.stderr)
        return 1

    payload = render(markdown, options, multiple=args.multiple, metadata=args.metadata, tree=args.tree)
    print(json.dumps(payload, indent=args.indent or None, ensure_ascii=False))
    return 0


def load_markdown(file_path: str) -> str:
    if file_path == "-":
        return sys.stdin.read()

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def render(
    markdown: str,
    options: ConversionOptions,
    *,
    multiple: bool = False,
    metadata: bool = False,
    tree: bool = False,
) -> Any:
    if tree:
        return parse_markdown(markdown).to_dict()
    if multiple:
        return [blocks_to_dicts(group) for group in markdown_to_blocks_multiple(markdown, options)]
    if metadata:
        return markdown_to_blocks_with_metadata(markdown, options).to_dict()
    return blocks_to_dicts(markdown_to_blocks(markdown, options))


if __name__ == "__main__":
    sys.exit(main())
