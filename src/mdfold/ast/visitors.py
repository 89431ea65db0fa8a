#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/ast/visitors.py
"""Visitor-style algebras.

:class:`BlockVisitor` lets a fold be written as one method per node kind
instead of one big ``isinstance`` chain. A visitor instance is itself an
algebra: calling it with a block dispatches to ``visit_<kind>``, where
``<kind>`` is :attr:`Block.kind <mdfold.ast.nodes.Block.kind>`. The block it
receives already has reduced children, so visit methods never recurse.

Kinds without a dedicated method go to :meth:`BlockVisitor.generic_visit`.

Examples
--------
Render plain text, ignoring all formatting:

    >>> from mdfold.ast.nodes import Paragraph, Strong, Text
    >>> from mdfold.ast.recursion import fold
    >>> class PlainText(BlockVisitor[str]):
    ...     def visit_text(self, block):
    ...         return block.content
    ...
    ...     def generic_visit(self, block):
    ...         return "".join(children(block))
    ...
    >>> fold(PlainText(), Paragraph([Text("Hello "), Strong([Text("world")])]))
    'Hello world'

"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

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
    Text,
    ThematicBreak,
    UnorderedList,
    children,
)

A = TypeVar("A")


class BlockVisitor(Generic[A]):
    """Base class for one-level algebras with a method per node kind.

    Subclasses override the ``visit_*`` methods they care about and
    :meth:`generic_visit` for the rest. Every method receives a block whose
    child slots already hold values of type ``A`` and returns an ``A``.
    """

    def __call__(self, block: Block[A]) -> A:
        """Dispatch ``block`` to its ``visit_<kind>`` method."""
        method: Callable[[Block[A]], A] = getattr(self, f"visit_{block.kind}", self.generic_visit)
        return method(block)

    def generic_visit(self, block: Block[A]) -> A:
        """Handle a kind without a dedicated method.

        Raises
        ------
        NotImplementedError
            Always; subclasses either override this or every visit method

        """
        raise NotImplementedError(f"{type(self).__name__} does not handle {block.kind} blocks")

    def visit_heading(self, block: Heading[A]) -> A:
        return self.generic_visit(block)

    def visit_paragraph(self, block: Paragraph[A]) -> A:
        return self.generic_visit(block)

    def visit_block_quote(self, block: BlockQuote[A]) -> A:
        return self.generic_visit(block)

    def visit_text(self, block: Text[A]) -> A:
        return self.generic_visit(block)

    def visit_code_span(self, block: CodeSpan[A]) -> A:
        return self.generic_visit(block)

    def visit_strong(self, block: Strong[A]) -> A:
        return self.generic_visit(block)

    def visit_emphasis(self, block: Emphasis[A]) -> A:
        return self.generic_visit(block)

    def visit_strikethrough(self, block: Strikethrough[A]) -> A:
        return self.generic_visit(block)

    def visit_link(self, block: Link[A]) -> A:
        return self.generic_visit(block)

    def visit_image(self, block: Image[A]) -> A:
        return self.generic_visit(block)

    def visit_unordered_list(self, block: UnorderedList[A]) -> A:
        return self.generic_visit(block)

    def visit_ordered_list(self, block: OrderedList[A]) -> A:
        return self.generic_visit(block)

    def visit_code_block(self, block: CodeBlock[A]) -> A:
        return self.generic_visit(block)

    def visit_hard_line_break(self, block: HardLineBreak[A]) -> A:
        return self.generic_visit(block)

    def visit_soft_line_break(self, block: SoftLineBreak[A]) -> A:
        return self.generic_visit(block)

    def visit_thematic_break(self, block: ThematicBreak[A]) -> A:
        return self.generic_visit(block)

    def visit_html_block(self, block: HtmlBlock[A]) -> A:
        return self.generic_visit(block)

    def visit_html_inline(self, block: HtmlInline[A]) -> A:
        return self.generic_visit(block)

    def visit_table(self, block: Table[A]) -> A:
        return self.generic_visit(block)

    def visit_table_header(self, block: TableHeader[A]) -> A:
        return self.generic_visit(block)

    def visit_table_body(self, block: TableBody[A]) -> A:
        return self.generic_visit(block)

    def visit_table_row(self, block: TableRow[A]) -> A:
        return self.generic_visit(block)

    def visit_table_cell(self, block: TableCell[A]) -> A:
        return self.generic_visit(block)

    def visit_table_header_cell(self, block: TableHeaderCell[A]) -> A:
        return self.generic_visit(block)

    def visit_custom(self, block: Custom[A]) -> A:
        return self.generic_visit(block)

