"""Parse a reduced Markdown dialect into a typed node tree.

This is a small, line-based block parser with a recursive inline scanner.
It covers headings, paragraphs, fenced code, blockquotes, flat lists,
pipe tables and thematic breaks. Every line ends up in exactly one block;
anything unrecognised becomes part of a paragraph, so parsing never fails.
"""

from __future__ import annotations

import re
from typing import Callable

from md2slack.schemas.nodes import (
    BlockquoteNode,
    CodeBlockNode,
    DocumentNode,
    EmphasisNode,
    HeadingNode,
    ImageNode,
    InlineCodeNode,
    LinkNode,
    ListItemNode,
    ListNode,
    MarkdownNode,
    ParagraphNode,
    StrikethroughNode,
    StrongNode,
    TableCellNode,
    TableNode,
    TableRowNode,
    TextNode,
    ThematicBreakNode,
)

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_THEMATIC_BREAK_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
_CODE_FENCE = "```"
_CODE_FENCE_RE = re.compile(r"^```(\w+)?")
_QUOTE_MARKER_RE = re.compile(r"^>\s?")
_LIST_MARKER_RE = re.compile(r"^(?:[*+-]|\d+[.)\]])\s+")
_UNORDERED_ITEM_RE = re.compile(r"^([*+-])\s+(.*)$")
_ORDERED_ITEM_RE = re.compile(r"^(\d+)[.)\]]\s+(.*)$")
_INDENT_RE = re.compile(r"^(?:\t|\s{2,})")
_TABLE_SEPARATOR_RE = re.compile(r"^\|?[\s\-:|]+\|?$")

# Inline patterns are matched at an explicit position, so they carry no ``^``.
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_UNDERSCORE_RE = re.compile(r"_([^_]+)_")
_ITALIC_ASTERISK_RE = re.compile(r"\*([^*]+)\*")
_STRIKETHROUGH_RE = re.compile(r"~~([^~]+)~~")
_LINK_RE = re.compile(r"\[([^\]]*)\]\s*\(([^)]+)\)")
_AUTOLINK_RE = re.compile(r"<(https?://[^>]+)>")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")


def parse_markdown(markdown: str) -> DocumentNode:
    """Parse ``markdown`` into a document tree."""
    return MarkdownParser(markdown).parse()


def parse_inline(text: str) -> list[MarkdownNode]:
    """Parse a run of inline Markdown into text, formatting and link nodes.

    At every position the inline rules are tried in priority order and the
    first match wins. Characters that start no match are buffered and
    emitted as a single ``TextNode`` before the next match or at the end.

    A rule is only tried when its opener is at the current position and its
    closing character still occurs further on. A rule that failed against a
    given closing character is not retried against it, so a run of unclosed
    openers such as ``[[[[`` is scanned once.
    """
    nodes: list[MarkdownNode] = []
    next_closer: dict[str, int] = {}
    failed_at: dict[re.Pattern[str], int] = {}
    buffer_start = 0
    position = 0
    while position < len(text):
        for pattern, opener, closer, build in _INLINE_RULES:
            if not text.startswith(opener, position):
                continue
            end = _find_closer(text, closer, position + 1, next_closer)
            if end < 0 or failed_at.get(pattern) == end:
                continue
            match = pattern.match(text, position)
            if match:
                break
            failed_at[pattern] = end
        else:
            position += 1
            continue

        if position > buffer_start:
            nodes.append(TextNode(content=text[buffer_start:position]))
        nodes.append(build(match))
        position = match.end()
        buffer_start = position

    if buffer_start < len(text):
        nodes.append(TextNode(content=text[buffer_start:]))
    return nodes


def _find_closer(text: str, closer: str, start: int, cache: dict[str, int]) -> int:
    # Scan positions only grow, so a cached hit at or after ``start`` is
    # still the nearest one and a cached miss stays a miss.
    found = cache.get(closer)
    if found is None or 0 <= found < start:
        found = text.find(closer, start)
        cache[closer] = found
    return found


def _build_link(match: re.Match[str]) -> LinkNode:
    text, href = match.group(1), match.group(2)
    return LinkNode(content=text or href, href=href)


def _build_autolink(match: re.Match[str]) -> LinkNode:
    return LinkNode(content=match.group(1), href=match.group(1))


# (pattern, opener, closing character, node factory). Every pattern needs its
# closing character somewhere after the opener, and its content cannot span it.
_INLINE_RULES: tuple[
    tuple[re.Pattern[str], str | tuple[str, ...], str, Callable[[re.Match[str]], MarkdownNode]], ...
] = (
    (_INLINE_CODE_RE, "`", "`", lambda m: InlineCodeNode(content=m.group(1))),
    (_BOLD_RE, "**", "*", lambda m: StrongNode(children=parse_inline(m.group(1)))),
    (_ITALIC_UNDERSCORE_RE, "_", "_", lambda m: EmphasisNode(children=parse_inline(m.group(1)))),
    (_ITALIC_ASTERISK_RE, "*", "*", lambda m: EmphasisNode(children=parse_inline(m.group(1)))),
    (_STRIKETHROUGH_RE, "~~", "~", lambda m: StrikethroughNode(children=parse_inline(m.group(1)))),
    (_LINK_RE, "[", "]", _build_link),
    (_AUTOLINK_RE, ("<http://", "<https://"), ">", _build_autolink),
    (_IMAGE_RE, "![", "]", lambda m: ImageNode(content=m.group(1), src=m.group(2))),
)


def split_table_row(line: str) -> list[str]:
    """Split a pipe table row into trimmed cell strings.

    One leading and one trailing pipe are dropped. Escaped pipes are not
    supported, so a literal ``|`` always starts a new cell.
    """
    cleaned = line.strip()
    if cleaned.startswith("|"):
        cleaned = cleaned[1:]
    if cleaned.endswith("|"):
        cleaned = cleaned[:-1]
    return [cell.strip() for cell in cleaned.split("|")]


def _is_indented(line: str) -> bool:
    return _INDENT_RE.match(line) is not None


class MarkdownParser:
    """Single forward pass over the lines of one document."""

    def __init__(self, markdown: str) -> None:
        self._lines = markdown.split("\n")
        self._index = 0

    def parse(self) -> DocumentNode:
        """Parse the whole document into a ``DocumentNode``."""
        document = DocumentNode()
        self._index = 0
        while self._index < len(self._lines):
            line = self._lines[self._index]
            trimmed = line.strip()

            if not trimmed:
                self._index += 1
                continue

            heading = _HEADING_RE.match(line)
            if heading:
                document.children.append(
                    HeadingNode(
                        level=len(heading.group(1)),
                        children=parse_inline(heading.group(2)),
                    )
                )
                self._index += 1
                continue

            if _THEMATIC_BREAK_RE.match(trimmed):
                document.children.append(ThematicBreakNode())
                self._index += 1
                continue

            if trimmed.startswith(_CODE_FENCE):
                document.children.append(self._parse_code_block())
                continue

            if trimmed.startswith(">"):
                document.children.append(self._parse_blockquote())
                continue

            if _LIST_MARKER_RE.match(trimmed) and not _is_indented(line):
                document.children.append(self._parse_list())
                continue

            if self._is_table_start(self._index):
                document.children.append(self._parse_table())
                continue

            document.children.append(self._parse_paragraph())

        return document

    def _parse_code_block(self) -> CodeBlockNode:
        fence = _CODE_FENCE_RE.match(self._lines[self._index].strip())
        language = fence.group(1) if fence and fence.group(1) else ""
        code_lines: list[str] = []
        self._index += 1

        while self._index < len(self._lines):
            line = self._lines[self._index]
            self._index += 1
            if line.strip().startswith(_CODE_FENCE):
                break
            code_lines.append(line)

        return CodeBlockNode(content="\n".join(code_lines), language=language)

    def _parse_blockquote(self) -> BlockquoteNode:
        quote_lines: list[str] = []
        while self._index < len(self._lines):
            trimmed = self._lines[self._index].strip()
            if not trimmed.startswith(">"):
                break
            quote_lines.append(_QUOTE_MARKER_RE.sub("", trimmed, count=1))
            self._index += 1

        # Blank quote lines do not start new paragraphs: one inline run.
        return BlockquoteNode(children=parse_inline("\n".join(quote_lines)))

    def _parse_list(self) -> ListNode:
        """Parse a flat list, folding indented lines into the previous item.

        Indented items are not nested lists. They are appended to the last
        top-level item as ``"\\n- "`` or ``"\\n<number> "`` followed by the
        item text; indented plain text is appended as ``"\\n" + text``.
        """
        items: list[ListItemNode] = []
        ordered: bool | None = None
        start: int | None = None

        while self._index < len(self._lines):
            line = self._lines[self._index]
            trimmed = line.strip()
            indented = _is_indented(line)
            bullet = _UNORDERED_ITEM_RE.match(trimmed)
            numbered = _ORDERED_ITEM_RE.match(trimmed)

            if not bullet and not numbered:
                if indented and trimmed and items:
                    items[-1].children.append(TextNode(content="\n" + trimmed))
                    self._index += 1
                    continue
                break

            match = numbered or bullet
            if not indented:
                if ordered is None:
                    ordered = numbered is not None
                    if numbered:
                        start = int(numbered.group(1))
                items.append(ListItemNode(children=parse_inline(match.group(2))))
            elif items:
                marker = f"\n{numbered.group(1)} " if numbered else "\n- "
                parent = items[-1]
                parent.children.append(TextNode(content=marker))
                parent.children.extend(parse_inline(match.group(2)))
                parent.has_continuation = True

            self._index += 1

        return ListNode(children=items, ordered=bool(ordered), start=start if ordered else None)

    def _is_table_start(self, index: int) -> bool:
        if index + 1 >= len(self._lines):
            return False
        header, separator = self._lines[index], self._lines[index + 1]
        return "|" in header and _TABLE_SEPARATOR_RE.match(separator.strip()) is not None

    def _parse_table(self) -> TableNode:
        header = self._build_row(self._lines[self._index], is_header=True)
        rows = [header]
        # Skip the header and the separator row.
        self._index += 2

        while self._index < len(self._lines):
            line = self._lines[self._index]
            if "|" not in line:
                break
            rows.append(self._build_row(line))
            self._index += 1

        return TableNode(children=rows)

    @staticmethod
    def _build_row(line: str, *, is_header: bool = False) -> TableRowNode:
        return TableRowNode(
            children=[
                TableCellNode(children=parse_inline(cell), is_header=is_header)
                for cell in split_table_row(line)
            ]
        )

    def _parse_paragraph(self) -> ParagraphNode:
        # The first line always belongs to the paragraph, even when it looks
        # like the start of another construct the block scan rejected.
        lines = [self._lines[self._index]]
        self._index += 1

        while self._index < len(self._lines):
            line = self._lines[self._index]
            if self._ends_paragraph(line.strip()):
                break
            lines.append(line)
            self._index += 1

        return ParagraphNode(children=parse_inline("\n".join(lines)))

    def _ends_paragraph(self, trimmed: str) -> bool:
        return (
            not trimmed
            or trimmed.startswith(("#", _CODE_FENCE, ">"))
            or _LIST_MARKER_RE.match(trimmed) is not None
            or _THEMATIC_BREAK_RE.match(trimmed) is not None
            or self._is_table_start(self._index)
        )
