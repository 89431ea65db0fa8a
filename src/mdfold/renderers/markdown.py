#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/renderers/markdown.py
"""Markdown pretty-printing from blocks.

Two visitors cooperate here:

- :class:`MarkdownPrinter` is a plain ``Block[str] -> str`` algebra for
  every kind except the table kinds.
- :class:`MarkdownRenderer` is a ``Block[TableInfo[str]] -> TableInfo[str]``
  algebra. It handles the table kinds itself (see
  :mod:`mdfold.renderers.tables`) and lifts everything else through the
  printer with :meth:`TableInfo.pure <mdfold.renderers.tables.TableInfo.pure>`.

A document rendered with :func:`render_markdown` parses back to the same
blocks, so rendering is a normalising pretty-printer.

Examples
--------
    >>> from mdfold.ast.nodes import Heading, Paragraph, Strong, Text
    >>> print(render_markdown([Heading(level=2, children=[Text("Hi")]), Paragraph([Strong([Text("bold")])])]), end="")
    ## Hi
    <BLANKLINE>
    **bold**

"""

from __future__ import annotations

import logging
import re
from html import escape
from typing import Iterable, Optional, Sequence

from mdfold.ast.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Custom,
    Emphasis,
    HardLineBreak,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    Link,
    Node,
    OrderedList,
    Paragraph,
    SoftLineBreak,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHeader,
    TableHeaderCell,
    TableRow,
    TaskState,
    Text,
    ThematicBreak,
    UnorderedList,
    children,
    fmap,
)
from mdfold.ast.recursion import fold
from mdfold.ast.visitors import BlockVisitor
from mdfold.constants import (
    ALTERNATE_BULLET_SYMBOLS,
    ALTERNATE_ORDERED_DELIMITERS,
    LINE_START_MARKERS,
    MARKDOWN_SPECIAL_CHARS,
    THEMATIC_BREAK_MARKER,
)
from mdfold.exceptions import RenderingError
from mdfold.options.base import validate_options_type
from mdfold.options.markdown import MarkdownRendererOptions
from mdfold.renderers.tables import (
    ColumnInfo,
    ColumnMap,
    TableInfo,
    columns_in_order,
    get_table_style,
    merge_column_maps,
)

logger = logging.getLogger(__name__)

_DESTINATION_NEEDS_BRACKETS = re.compile(r"[\s()<>]")
_LINE_START_MARKER = re.compile(r"^(?:([" + re.escape(LINE_START_MARKERS) + r"])|(\d+)([.)]))", re.MULTILINE)


def escape_markdown(text: str) -> str:
    r"""Escape characters that would otherwise start markdown syntax.

    Backslash, backtick, ``*``, ``_``, brackets, ``|``, ``~`` and ``<`` are
    always escaped; ``#`` only at the very start, where it could open a
    heading.

    Examples
    --------
        >>> escape_markdown("a*b|c")
        'a\\*b\\|c'
        >>> escape_markdown("#1 and #2")
        '\\#1 and #2'

    """
    escaped_chars = []
    for i, char in enumerate(text):
        if char in MARKDOWN_SPECIAL_CHARS or (char == "#" and i == 0):
            escaped_chars.append("\\")
        escaped_chars.append(char)
    return "".join(escaped_chars)


def _escape_marker(match: re.Match) -> str:
    marker, number, delimiter = match.groups()
    if marker:
        return "\\" + marker
    return f"{number}\\{delimiter}"


def escape_line_starts(text: str) -> str:
    r"""Escape block markers at the start of each line of inline markdown.

    A line of paragraph text that begins with ``-``, ``+``, ``>`` or ``=``,
    or with a number followed by ``.`` or ``)``, would be read back as a
    list item, block quote or setext underline.

    Examples
    --------
        >>> escape_line_starts("- a\n1. b")
        '\\- a\n1\\. b'
        >>> escape_line_starts("a - b")
        'a - b'

    """
    return _LINE_START_MARKER.sub(_escape_marker, text)


def _escape_closing_hashes(content: str) -> str:
    """Escape a ``#`` ending heading text so it is not taken as a closing sequence."""
    if not content.endswith("#"):
        return content
    before = content[:-1]
    backslashes = len(before) - len(before.rstrip("\\"))
    if backslashes % 2:
        return content
    return before + "\\#"


class _ListMarkup(str):
    """Rendered list that also carries its rendering with the alternate marker."""

    alternate: str
    ordered: bool

    def __new__(cls, text: str, alternate: str, ordered: bool) -> _ListMarkup:
        markup = super().__new__(cls, text)
        markup.alternate = alternate
        markup.ordered = ordered
        return markup


def _join_blocks(blocks: Iterable[str]) -> str:
    """Join sibling blocks with blank lines.

    A list directly after a list of the same kind switches to the alternate
    marker, otherwise the two would be read back as one list.
    """
    parts = []
    previous_kind: Optional[bool] = None
    use_alternate = False
    for block in blocks:
        kind = block.ordered if isinstance(block, _ListMarkup) else None
        use_alternate = kind is not None and kind == previous_kind and not use_alternate
        parts.append(block.alternate if use_alternate else block)  # type: ignore[attr-defined]
        previous_kind = kind
    return "\n\n".join(parts)


def _longest_run(text: str, char: str) -> int:
    longest = current = 0
    for c in text:
        if c == char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def _format_destination(destination: str, title: Optional[str]) -> str:
    if not destination or _DESTINATION_NEEDS_BRACKETS.search(destination):
        destination = "<" + destination.replace("<", "\\<").replace(">", "\\>") + ">"
    if title:
        escaped_title = title.replace("\\", "\\\\").replace('"', '\\"')
        return f'({destination} "{escaped_title}")'
    return f"({destination})"


def _indent_continuation(first_prefix: str, text: str, indent: str) -> str:
    """Prefix the first line of ``text`` and indent the others, leaving blank lines empty."""
    lines = text.split("\n")
    first = first_prefix + lines[0]
    result = [first if lines[0] else first.rstrip()]
    result.extend(indent + line if line else "" for line in lines[1:])
    return "\n".join(result)


class MarkdownPrinter(BlockVisitor[str]):
    """Single-phase markdown printer for every non-table kind.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the printer with options."""
        validate_options_type(options, MarkdownRendererOptions, "markdown")
        self.options: MarkdownRendererOptions = options or MarkdownRendererOptions()

    def visit_heading(self, block: Heading[str]) -> str:
        content = _escape_closing_hashes("".join(block.children))
        return "#" * block.level + (" " + content if content else "")

    def visit_paragraph(self, block: Paragraph[str]) -> str:
        return escape_line_starts("".join(block.children))

    def visit_block_quote(self, block: BlockQuote[str]) -> str:
        quoted = _join_blocks(block.children)
        return "\n".join("> " + line if line else ">" for line in quoted.split("\n"))

    def visit_text(self, block: Text[str]) -> str:
        return escape_markdown(block.content)

    def visit_code_span(self, block: CodeSpan[str]) -> str:
        # Line endings inside a code span read back as spaces
        content = block.content.replace("\n", " ")
        fence = "`" * (_longest_run(content, "`") + 1)
        if content.startswith("`") or content.endswith("`") or (
            content.startswith(" ") and content.endswith(" ") and content.strip()
        ):
            content = f" {content} "
        return f"{fence}{content}{fence}"

    def visit_strong(self, block: Strong[str]) -> str:
        marker = self.options.emphasis_symbol * 2
        return f"{marker}{''.join(block.children)}{marker}"

    def visit_emphasis(self, block: Emphasis[str]) -> str:
        marker = self.options.emphasis_symbol
        return f"{marker}{''.join(block.children)}{marker}"

    def visit_strikethrough(self, block: Strikethrough[str]) -> str:
        return f"~~{''.join(block.children)}~~"

    def visit_link(self, block: Link[str]) -> str:
        return f"[{''.join(block.children)}]{_format_destination(block.destination, block.title)}"

    def visit_image(self, block: Image[str]) -> str:
        return f"![{escape_markdown(block.alt)}]{_format_destination(block.src, block.title)}"

    def _unordered_items(self, block: UnorderedList[str], bullet: str) -> str:
        marker = f"{bullet} "
        rendered_items = []
        for item in block.items:
            checkbox = ""
            if item.task is TaskState.COMPLETE:
                checkbox = "[x] "
            elif item.task is TaskState.INCOMPLETE:
                checkbox = "[ ] "
            body = _join_blocks(item.children)
            rendered_items.append(_indent_continuation(marker + checkbox, body, " " * len(marker)))
        return "\n".join(rendered_items)

    def _ordered_items(self, block: OrderedList[str], delimiter: str) -> str:
        rendered_items = []
        for offset, item in enumerate(block.items):
            marker = f"{block.start + offset}{delimiter} "
            body = _join_blocks(item)
            rendered_items.append(_indent_continuation(marker, body, " " * len(marker)))
        return "\n".join(rendered_items)

    def visit_unordered_list(self, block: UnorderedList[str]) -> str:
        bullet = self.options.bullet_symbol
        return _ListMarkup(
            self._unordered_items(block, bullet),
            alternate=self._unordered_items(block, ALTERNATE_BULLET_SYMBOLS[bullet]),
            ordered=False,
        )

    def visit_ordered_list(self, block: OrderedList[str]) -> str:
        delimiter = self.options.ordered_delimiter
        return _ListMarkup(
            self._ordered_items(block, delimiter),
            alternate=self._ordered_items(block, ALTERNATE_ORDERED_DELIMITERS[delimiter]),
            ordered=True,
        )

    def visit_code_block(self, block: CodeBlock[str]) -> str:
        fence_char = self.options.code_fence_char
        fence_length = max(self.options.code_fence_min, _longest_run(block.content, fence_char) + 1)
        fence = fence_char * fence_length
        content = block.content if block.content.endswith("\n") or not block.content else block.content + "\n"
        return f"{fence}{block.language or ''}\n{content}{fence}"

    def visit_hard_line_break(self, block: HardLineBreak[str]) -> str:
        return "\\\n"

    def visit_soft_line_break(self, block: SoftLineBreak[str]) -> str:
        return "\n"

    def visit_thematic_break(self, block: ThematicBreak[str]) -> str:
        return THEMATIC_BREAK_MARKER

    def visit_html_block(self, block: HtmlBlock[str]) -> str:
        return block.content.rstrip("\n")

    def visit_html_inline(self, block: HtmlInline[str]) -> str:
        return block.content

    def visit_custom(self, block: Custom[str]) -> str:
        handler = self.options.custom_handlers.get(block.tag)
        if handler is not None:
            try:
                return handler(block)
            except Exception as e:
                raise RenderingError(
                    f"Custom handler for '{block.tag}' failed: {e}", rendering_stage="custom_handler", original_error=e
                ) from e

        logger.debug("No markdown handler for custom tag '%s', writing it as raw HTML", block.tag)
        attributes = "".join(f' {name}="{escape(value, quote=True)}"' for name, value in block.attributes.items())
        return f"<{block.tag}{attributes}>{''.join(block.children)}</{block.tag}>"


class MarkdownRenderer(BlockVisitor[TableInfo[str]]):
    """Two-phase markdown renderer with table column negotiation.

    Table cells measure themselves on the way up; the enclosing
    :class:`~mdfold.ast.nodes.Table` merges the measurements and hands the
    complete column map back to every row, so all cells of a column come out
    equally wide. Every other kind is printed by :class:`MarkdownPrinter`.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Rendering options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`MarkdownRendererOptions`

    Examples
    --------
        >>> from mdfold.ast.nodes import Table, TableHeader, TableHeaderCell, TableRow, Text
        >>> header = TableHeader([TableRow([TableHeaderCell([Text("a")]), TableHeaderCell([Text("bcdef")])])])
        >>> print(MarkdownRenderer().render_to_string([Table([header])]), end="")
        | a   | bcdef |
        | --- | ----- |

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the renderer with options."""
        validate_options_type(options, MarkdownRendererOptions, "markdown")
        self.options: MarkdownRendererOptions = options or MarkdownRendererOptions()
        self.style = get_table_style(self.options.table_style)
        self.printer = MarkdownPrinter(self.options)

    def generic_visit(self, block: Block[TableInfo[str]]) -> TableInfo[str]:
        return TableInfo.pure(self.printer(fmap(lambda child: child.finalize(), block)))

    def _visit_cell(self, block: TableCell[TableInfo[str]] | TableHeaderCell[TableInfo[str]]) -> TableInfo[str]:
        content = "".join(child.finalize() for child in block.children)
        measured = ColumnInfo(size=len(content), alignment=block.alignment)

        def render(columns: ColumnMap) -> str:
            return self.style.render_cell(content, columns.get(0, measured))

        return TableInfo(info={0: measured}, render=render)

    def visit_table_cell(self, block: TableCell[TableInfo[str]]) -> TableInfo[str]:
        return self._visit_cell(block)

    def visit_table_header_cell(self, block: TableHeaderCell[TableInfo[str]]) -> TableInfo[str]:
        return self._visit_cell(block)

    def visit_table_row(self, block: TableRow[TableInfo[str]]) -> TableInfo[str]:
        cells = [cell.shift(position) for position, cell in enumerate(children(block))]

        def render(columns: ColumnMap) -> str:
            return self.style.render_row([cell.render(columns) for cell in cells])

        return TableInfo(info=merge_column_maps([cell.info for cell in cells]), render=render)

    def visit_table_header(self, block: TableHeader[TableInfo[str]]) -> TableInfo[str]:
        rows = children(block)

        def render(columns: ColumnMap) -> str:
            lines = [row.render(columns) for row in rows]
            if columns:
                lines.append(self.style.render_delimiter(columns_in_order(columns)))
            return "\n".join(lines)

        return TableInfo(info=merge_column_maps([row.info for row in rows]), render=render)

    def visit_table_body(self, block: TableBody[TableInfo[str]]) -> TableInfo[str]:
        rows = children(block)

        def render(columns: ColumnMap) -> str:
            return "\n".join(row.render(columns) for row in rows)

        return TableInfo(info=merge_column_maps([row.info for row in rows]), render=render)

    def visit_table(self, block: Table[TableInfo[str]]) -> TableInfo[str]:
        sections = children(block)
        columns = merge_column_maps([section.info for section in sections])
        rendered = [section.render(columns) for section in sections]
        return TableInfo.pure("\n".join(text for text in rendered if text))

    def render_node(self, node: Node) -> str:
        """Render one top-level tree."""
        return fold(self, node).finalize()

    def render_to_string(self, nodes: Iterable[Node]) -> str:
        """Render a document to markdown.

        Parameters
        ----------
        nodes : iterable of Node
            Top-level trees in document order

        Returns
        -------
        str
            Blocks separated by blank lines, ending with a newline (empty for
            an empty document). A list that directly follows a list of the
            same kind uses the alternate bullet or delimiter.

        """
        blocks: Sequence[str] = [self.render_node(node) for node in nodes]
        if not blocks:
            return ""
        return _join_blocks(blocks) + "\n"


def render_markdown(nodes: Iterable[Node], options: MarkdownRendererOptions | None = None) -> str:
    """Render a document to markdown text with :class:`MarkdownRenderer`."""
    return MarkdownRenderer(options).render_to_string(nodes)
