#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/ast/__init__.py
"""Block algebra and the generic folds over it.

The module consists of several components:

- nodes: node kinds generic over their child type, ``fmap`` and ``children``
- recursion: ``fold`` and the one-level ``reduce_block``
- visitors: ``BlockVisitor`` for algebras written as one method per kind
- transforms: word extraction and heading level adjustment
- sequence: folds that need an environment, can fail, or await effects

Examples
--------
Collect the destinations of every link in a document:

    >>> from mdfold.ast import Link, Paragraph, Text, fold, reduce_block
    >>> def links(block):
    ...     return reduce_block(lambda b: [b.destination] if isinstance(b, Link) else [], lambda xs: sum(xs, []), block)
    >>> fold(links, Paragraph([Link("https://example.com", [Text("site")]), Link("#intro", [])]))
    ['https://example.com', '#intro']

"""

from __future__ import annotations

from mdfold.ast.nodes import (
    LEAF_TYPES,
    Alignment,
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
    children,
    fmap,
    is_leaf,
)
from mdfold.ast.recursion import fold, fold_document, map_tree, rebuild, reduce_block
from mdfold.ast.sequence import (
    distribute_environment,
    fold_effects,
    fold_results,
    fold_with_environment,
    sequence_effects,
    sequence_results,
)
from mdfold.ast.transforms import (
    bump_document_headings,
    bump_headings,
    extract_document_words,
    extract_words,
    heading_anchor,
)
from mdfold.ast.visitors import BlockVisitor

__all__ = [
    "LEAF_TYPES",
    "Alignment",
    "Block",
    "BlockQuote",
    "BlockVisitor",
    "CodeBlock",
    "CodeSpan",
    "Custom",
    "Emphasis",
    "HardLineBreak",
    "Heading",
    "HtmlBlock",
    "HtmlInline",
    "Image",
    "Link",
    "ListItem",
    "Node",
    "OrderedList",
    "Paragraph",
    "SoftLineBreak",
    "Strikethrough",
    "Strong",
    "Table",
    "TableBody",
    "TableCell",
    "TableHeader",
    "TableHeaderCell",
    "TableRow",
    "TaskState",
    "Text",
    "ThematicBreak",
    "UnorderedList",
    "bump_document_headings",
    "bump_headings",
    "children",
    "distribute_environment",
    "extract_document_words",
    "extract_words",
    "fmap",
    "fold",
    "fold_document",
    "fold_effects",
    "fold_results",
    "fold_with_environment",
    "heading_anchor",
    "is_leaf",
    "map_tree",
    "rebuild",
    "reduce_block",
    "sequence_effects",
    "sequence_results",
]
