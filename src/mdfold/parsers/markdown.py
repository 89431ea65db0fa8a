#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/parsers/markdown.py
"""Markdown to block trees.

Markdown syntax itself is handled by mistune; this module only translates
mistune's token stream into the block algebra of :mod:`mdfold.ast.nodes`.

Adjacent text tokens (mistune splits text at escapes and entities) are
merged into a single ``Text`` node, so a document parses to the same blocks
however its text was escaped.

Examples
--------
    >>> parse_markdown("# Hello *world*")
    [Heading(level=1, raw_text='Hello world', children=[Text(content='Hello '), Emphasis(children=[Text(content='world')])])]

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import mistune

from mdfold.ast.nodes import (
    Alignment,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Emphasis,
    HardLineBreak,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    Link,
    ListItem,
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
)
from mdfold.exceptions import ParsingError
from mdfold.options.base import validate_options_type
from mdfold.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

Token = dict[str, Any]

# Block tokens that carry no content
_IGNORED_BLOCK_TOKENS = frozenset({"blank_line"})


def _attrs(token: Token) -> dict[str, Any]:
    attrs = token.get("attrs", {})
    return attrs if isinstance(attrs, dict) else {}


def _token_children(token: Token) -> list[Token]:
    children = token.get("children", [])
    return [child for child in children if isinstance(child, dict)] if isinstance(children, list) else []


def merge_adjacent_text(nodes: list[Node]) -> list[Node]:
    """Join runs of ``Text`` nodes into one node each.

    Examples
    --------
        >>> merge_adjacent_text([Text("a"), Text("*"), Text("b"), CodeSpan("c")])
        [Text(content='a*b'), CodeSpan(content='c')]

    """
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].content + node.content)
        else:
            merged.append(node)
    return merged


def plain_text(tokens: list[Token]) -> str:
    """Concatenate the literal text of inline tokens, dropping all markup."""
    parts: list[str] = []
    for token in tokens:
        token_type = token.get("type", "")
        if token_type in ("text", "codespan"):
            parts.append(token.get("raw", ""))
        elif token_type in ("softbreak", "linebreak"):
            parts.append(" ")
        else:
            parts.append(plain_text(_token_children(token)))
    return "".join(parts)


class MarkdownParser:
    r"""Convert Markdown text to a list of top-level block trees.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`MarkdownParserOptions`

    Examples
    --------
        >>> parser = MarkdownParser(MarkdownParserOptions(parse_tables=False))
        >>> parser.parse("- [x] done")
        [UnorderedList(items=[ListItem(children=[Paragraph(children=[Text(content='done')])], task=<TaskState.COMPLETE: 'complete'>)])]

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        validate_options_type(options, MarkdownParserOptions, "markdown")
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        self._markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        self._inline_handlers: dict[str, Callable[[Token], Optional[Node]]] = {
            "text": lambda token: Text(token.get("raw", "")),
            "codespan": lambda token: CodeSpan(token.get("raw", "")),
            "strong": lambda token: Strong(self._process_inline_tokens(_token_children(token))),
            "emphasis": lambda token: Emphasis(self._process_inline_tokens(_token_children(token))),
            "strikethrough": lambda token: Strikethrough(self._process_inline_tokens(_token_children(token))),
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": lambda token: HardLineBreak(),
            "softbreak": lambda token: SoftLineBreak(),
            "inline_html": lambda token: HtmlInline(token.get("raw", "")),
        }

    def parse(self, text: str) -> list[Node]:
        """Parse Markdown text into block trees.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        list of Node
            Top-level blocks in document order

        Raises
        ------
        ParsingError
            If mistune fails to tokenize the input

        """
        try:
            tokens, _state = self._markdown.parse(text)
        except Exception as e:
            raise ParsingError(f"Failed to tokenize markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        if not isinstance(tokens, list):
            raise ParsingError(f"Unexpected token stream of type {type(tokens).__name__}", parsing_stage="tokenize")

        return self._process_tokens(tokens)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[Token]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: Token) -> Optional[Node]:
        token_type = token.get("type", "")

        if token_type == "heading":
            children = _token_children(token)
            return Heading(
                level=_attrs(token).get("level", 1),
                raw_text=plain_text(children).strip(),
                children=self._process_inline_tokens(children),
            )
        if token_type in ("paragraph", "block_text"):
            # block_text is a paragraph inside a tight list item
            return Paragraph(self._process_inline_tokens(_token_children(token)))
        if token_type == "block_code":
            info = (_attrs(token).get("info") or "").strip()
            return CodeBlock(content=token.get("raw", ""), language=info.split(maxsplit=1)[0] if info else None)
        if token_type == "block_quote":
            return BlockQuote(self._process_tokens(_token_children(token)))
        if token_type == "list":
            return self._process_list(token)
        if token_type == "table":
            return self._process_table(token)
        if token_type == "thematic_break":
            return ThematicBreak()
        if token_type == "block_html":
            return HtmlBlock(token.get("raw", ""))
        if token_type in _IGNORED_BLOCK_TOKENS:
            return None

        logger.warning("Skipping unsupported markdown token '%s'", token_type)
        return None

    def _process_list(self, token: Token) -> Node:
        attrs = _attrs(token)
        items = _token_children(token)

        if attrs.get("ordered", False):
            return OrderedList(
                items=[self._process_tokens(_token_children(item)) for item in items],
                start=attrs.get("start", 1),
            )

        list_items = []
        for item in items:
            task = TaskState.NONE
            item_attrs = _attrs(item)
            if "checked" in item_attrs:
                task = TaskState.COMPLETE if item_attrs["checked"] else TaskState.INCOMPLETE
            list_items.append(ListItem(children=self._process_tokens(_token_children(item)), task=task))
        return UnorderedList(items=list_items)

    def _process_table(self, token: Token) -> Table:
        sections: list[Node] = []
        for section in _token_children(token):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head, without a row token
                cells = [self._process_table_cell(cell, header=True) for cell in _token_children(section)]
                sections.append(TableHeader([TableRow(cells)]))
            elif section_type == "table_body":
                rows = [
                    TableRow([self._process_table_cell(cell, header=False) for cell in _token_children(row)])
                    for row in _token_children(section)
                ]
                sections.append(TableBody(rows))
        return Table(sections)

    def _process_table_cell(self, token: Token, header: bool) -> Node:
        content = self._process_inline_tokens(_token_children(token))
        alignment = Alignment.from_name(_attrs(token).get("align"))
        if header:
            return TableHeaderCell(children=content, alignment=alignment)
        return TableCell(children=content, alignment=alignment)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[Token]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            handler = self._inline_handlers.get(token.get("type", ""))
            if handler is None:
                logger.warning("Skipping unsupported inline markdown token '%s'", token.get("type", ""))
                continue
            node = handler(token)
            if node is not None:
                nodes.append(node)
        return merge_adjacent_text(nodes)

    def _handle_link_token(self, token: Token) -> Link:
        attrs = _attrs(token)
        return Link(
            destination=attrs.get("url", ""),
            children=self._process_inline_tokens(_token_children(token)),
            title=attrs.get("title") or None,
        )

    def _handle_image_token(self, token: Token) -> Image:
        attrs = _attrs(token)
        return Image(
            src=attrs.get("url", ""),
            alt=plain_text(_token_children(token)),
            title=attrs.get("title") or None,
        )


def parse_markdown(text: str, options: MarkdownParserOptions | None = None) -> list[Node]:
    """Parse Markdown text with :class:`MarkdownParser`."""
    return MarkdownParser(options).parse(text)
