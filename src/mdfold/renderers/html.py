#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/renderers/html.py
"""HTML rendering from blocks.

:class:`HtmlRenderer` is a ``Block[PageElement] -> PageElement`` algebra: it
receives a block whose children are already BeautifulSoup elements and wraps
them in the element for that block. Folding a tree with it yields one element
per top-level block, which callers can keep manipulating as a tree or turn
into markup with ``str()``.

Examples
--------
    >>> from mdfold.ast.nodes import Link, Paragraph, Text
    >>> render_html([Paragraph([Text("see "), Link("#intro", [Text("intro")])])])
    '<p>see <a href="#intro">intro</a></p>'

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag

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
    fmap,
)
from mdfold.ast.recursion import fold
from mdfold.ast.transforms import words_algebra
from mdfold.ast.visitors import BlockVisitor
from mdfold.constants import CODE_LANGUAGE_CLASS_PREFIX, HTML_PARSER_FEATURES
from mdfold.exceptions import RenderingError
from mdfold.options.base import validate_options_type
from mdfold.options.html import HtmlRendererOptions
from mdfold.utils.text import slugify_words

logger = logging.getLogger(__name__)


class HtmlRenderer(BlockVisitor[PageElement]):
    """Render blocks to BeautifulSoup elements.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an :class:`HtmlRendererOptions`

    Notes
    -----
    Every element is created from one soup owned by the renderer, so the
    elements of different calls can be combined freely.

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        validate_options_type(options, HtmlRendererOptions, "html")
        self.options: HtmlRendererOptions = options or HtmlRendererOptions()
        self.soup = BeautifulSoup("", HTML_PARSER_FEATURES)

    def _element(self, name: str, contents: Iterable[PageElement] = (), attrs: Optional[dict[str, str]] = None) -> Tag:
        tag = self.soup.new_tag(name, attrs=dict(attrs or {}))
        for child in contents:
            tag.append(child)
        return tag

    def _raw_html(self, content: str) -> PageElement:
        mode = self.options.html_passthrough_mode
        if mode == "drop":
            return NavigableString("")
        if mode == "escape":
            return NavigableString(content)
        return BeautifulSoup(content, HTML_PARSER_FEATURES)

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_heading(self, block: Heading[PageElement]) -> PageElement:
        return self._element(f"h{block.level}", block.children)

    def visit_paragraph(self, block: Paragraph[PageElement]) -> PageElement:
        return self._element("p", block.children)

    def visit_block_quote(self, block: BlockQuote[PageElement]) -> PageElement:
        return self._element("blockquote", block.children)

    def visit_unordered_list(self, block: UnorderedList[PageElement]) -> PageElement:
        ul = self._element("ul")
        for item in block.items:
            li = self._element("li")
            if item.task is not TaskState.NONE:
                checkbox = self._element("input", attrs={"type": "checkbox", "disabled": ""})
                if item.task is TaskState.COMPLETE:
                    checkbox["checked"] = ""
                li.append(checkbox)
            for child in item.children:
                li.append(child)
            ul.append(li)
        return ul

    def visit_ordered_list(self, block: OrderedList[PageElement]) -> PageElement:
        ol = self._element("ol")
        if block.start != 1:
            ol["start"] = str(block.start)
        for item in block.items:
            ol.append(self._element("li", item))
        return ol

    def visit_code_block(self, block: CodeBlock[PageElement]) -> PageElement:
        code = self._element("code", [NavigableString(block.content)])
        if block.language:
            code["class"] = f"{CODE_LANGUAGE_CLASS_PREFIX}{block.language}"
        return self._element("pre", [code])

    def visit_thematic_break(self, block: ThematicBreak[PageElement]) -> PageElement:
        return self._element("hr")

    def visit_html_block(self, block: HtmlBlock[PageElement]) -> PageElement:
        return self._raw_html(block.content)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, block: Table[PageElement]) -> PageElement:
        return self._element("table", block.children)

    def visit_table_header(self, block: TableHeader[PageElement]) -> PageElement:
        return self._element("thead", block.children)

    def visit_table_body(self, block: TableBody[PageElement]) -> PageElement:
        return self._element("tbody", block.children)

    def visit_table_row(self, block: TableRow[PageElement]) -> PageElement:
        return self._element("tr", block.children)

    def visit_table_cell(self, block: TableCell[PageElement]) -> PageElement:
        cell = self._element("td", block.children)
        if block.alignment is not None:
            cell["align"] = block.alignment.value
        return cell

    def visit_table_header_cell(self, block: TableHeaderCell[PageElement]) -> PageElement:
        cell = self._element("th", block.children)
        if block.alignment is not None:
            cell["align"] = block.alignment.value
        return cell

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, block: Text[PageElement]) -> PageElement:
        return NavigableString(block.content)

    def visit_code_span(self, block: CodeSpan[PageElement]) -> PageElement:
        return self._element("code", [NavigableString(block.content)])

    def visit_strong(self, block: Strong[PageElement]) -> PageElement:
        return self._element("strong", block.children)

    def visit_emphasis(self, block: Emphasis[PageElement]) -> PageElement:
        return self._element("em", block.children)

    def visit_strikethrough(self, block: Strikethrough[PageElement]) -> PageElement:
        return self._element("del", block.children)

    def visit_link(self, block: Link[PageElement]) -> PageElement:
        link = self._element("a", block.children, {"href": block.destination})
        if block.title:
            link["title"] = block.title
        return link

    def visit_image(self, block: Image[PageElement]) -> PageElement:
        image = self._element("img", attrs={"src": block.src, "alt": block.alt})
        if block.title:
            image["title"] = block.title
        return image

    def visit_hard_line_break(self, block: HardLineBreak[PageElement]) -> PageElement:
        return self._element("br")

    def visit_soft_line_break(self, block: SoftLineBreak[PageElement]) -> PageElement:
        return NavigableString("\n")

    def visit_html_inline(self, block: HtmlInline[PageElement]) -> PageElement:
        return self._raw_html(block.content)

    def visit_custom(self, block: Custom[PageElement]) -> PageElement:
        handler = self.options.custom_handlers.get(block.tag)
        if handler is not None:
            try:
                return handler(self.soup, block)
            except Exception as e:
                raise RenderingError(
                    f"Custom handler for '{block.tag}' failed: {e}", rendering_stage="custom_handler", original_error=e
                ) from e

        logger.debug("No HTML handler for custom tag '%s', emitting a generic element", block.tag)
        return self._element(block.tag, block.children, block.attributes)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_with_anchor(self, block: Block[PageElement], anchor: Optional[str]) -> PageElement:
        """Render one level, giving headings the ``id`` computed by anchor validation.

        Suitable as the ``render`` argument of
        :func:`mdfold.validation.anchors.lift_with_anchor`.
        """
        element = self(block)
        if anchor and isinstance(block, Heading) and isinstance(element, Tag):
            element["id"] = anchor
        return element

    def _visit_with_words(self, block: Block[tuple[list[str], PageElement]]) -> tuple[list[str], PageElement]:
        """Render one level while collecting words, so headings get their anchor as ``id``."""
        words = words_algebra(fmap(lambda kid: kid[0], block))
        anchor = slugify_words(words) if isinstance(block, Heading) else None
        return words, self.render_with_anchor(fmap(lambda kid: kid[1], block), anchor)

    def render_node(self, node: Node) -> PageElement:
        """Render one top-level tree to an element."""
        if self.options.heading_ids:
            _words, element = fold(self._visit_with_words, node)
            return element
        return fold(self, node)

    def render_to_string(self, nodes: Iterable[Node]) -> str:
        """Render a document to HTML markup, one top-level element per line."""
        return "\n".join(str(self.render_node(node)) for node in nodes)


def render_html(nodes: Iterable[Node], options: HtmlRendererOptions | None = None) -> str:
    """Render a document to an HTML fragment string with :class:`HtmlRenderer`."""
    return HtmlRenderer(options).render_to_string(nodes)
