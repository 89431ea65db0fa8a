#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/ast/transforms.py
"""Ready-made folds and rewrites over the block algebra.

Examples
--------
Extract the words of a document, skipping code blocks:

    >>> from mdfold.ast.nodes import CodeBlock, Paragraph, Text
    >>> extract_document_words([Paragraph([Text("hello world")]), CodeBlock("a b\\nc")])
    ['hello', 'world']

Push every heading one level down:

    >>> from mdfold.ast.nodes import Heading
    >>> bump_headings(1, Heading(level=1, raw_text="Title")).level
    2

"""

from __future__ import annotations

import itertools
from typing import Iterable, Sequence

from mdfold.ast.nodes import Block, CodeSpan, Heading, Node, Text
from mdfold.ast.recursion import fold, map_tree, reduce_block
from mdfold.constants import MAX_HEADING_LEVEL
from mdfold.utils.text import slugify_words, split_words

# ============================================================================
# Word extraction
# ============================================================================


def own_words(block: Block[object]) -> list[str]:
    """Words contributed by a node itself, ignoring its children.

    Only ``Text`` and ``CodeSpan`` contribute; code block bodies, image alt
    text and raw HTML do not.
    """
    if isinstance(block, (Text, CodeSpan)):
        return split_words(block.content)
    return []


def concat_words(parts: Sequence[Sequence[str]]) -> list[str]:
    """Concatenate word lists, keeping order."""
    return list(itertools.chain.from_iterable(parts))


def words_algebra(block: Block[list[str]]) -> list[str]:
    """One-level word extraction: own words followed by the children's words."""
    return reduce_block(own_words, concat_words, block)


def extract_words(node: Node) -> list[str]:
    """Extract the words of a tree in document order.

    Parameters
    ----------
    node : Node
        Tree to read

    Returns
    -------
    list of str
        Words of every ``Text`` and ``CodeSpan`` in the tree

    """
    return fold(words_algebra, node)


def extract_document_words(nodes: Iterable[Node]) -> list[str]:
    """Extract the words of every top-level node of a document."""
    return concat_words([extract_words(node) for node in nodes])


def heading_anchor(heading: Heading[Node]) -> str:
    """Anchor identifier of a heading tree, derived from its words."""
    return slugify_words(extract_words(heading))


# ============================================================================
# Heading levels
# ============================================================================


def bump_headings(by: int, block: Block[object]) -> Block[object]:
    """Push a heading down by ``by`` levels, clamped at h6.

    Every other kind is returned unchanged, and so is any heading when ``by``
    is zero or negative.

    Parameters
    ----------
    by : int
        Number of levels to add
    block : Block
        Block to adjust (children are not visited)

    Returns
    -------
    Block
        Adjusted block

    Examples
    --------
        >>> bump_headings(2, Heading(level=5)).level
        6
        >>> bump_headings(-1, Heading(level=3)).level
        3

    """
    if not isinstance(block, Heading) or by <= 0:
        return block
    return Heading(level=min(MAX_HEADING_LEVEL, block.level + by), raw_text=block.raw_text, children=block.children)


def bump_document_headings(by: int, nodes: Iterable[Node]) -> list[Node]:
    """Apply :func:`bump_headings` to every heading of a document, at any depth."""
    return [map_tree(lambda block: bump_headings(by, block), node) for node in nodes]
