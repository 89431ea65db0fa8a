#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/ast/recursion.py
"""Generic folding over the block algebra.

An *algebra* is any callable taking one block whose children have already
been reduced to some type ``A`` and returning an ``A``. :func:`fold` applies an
algebra bottom-up to a whole tree, so algebras never recurse themselves.

:func:`reduce_block` builds such an algebra out of two smaller functions, an
``extract`` giving each node's own contribution and an ``accumulate``
combining a list of contributions. Counting, concatenation and set union are
all instances of that shape.

Examples
--------
Count the nodes of a tree:

    >>> from mdfold.ast.nodes import Paragraph, Strong, Text
    >>> tree = Paragraph([Text("a"), Strong([Text("b")])])
    >>> fold(lambda b: reduce_block(lambda _: 1, sum, b), tree)
    4

"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

from mdfold.ast.nodes import Block, Node, children, fmap, is_leaf

A = TypeVar("A")
C = TypeVar("C")
D = TypeVar("D")

Algebra = Callable[[Block[A]], A]


def fold(algebra: Callable[[Block[A]], A], node: Node) -> A:
    """Reduce a tree bottom-up with ``algebra``.

    Each node's children are folded first (left to right), then ``algebra``
    receives the node with those results in its child slots.

    Parameters
    ----------
    algebra : callable
        One-level reduction ``Block[A] -> A``
    node : Node
        Root of the tree to fold

    Returns
    -------
    A
        The folded value

    """
    return algebra(fmap(lambda child: fold(algebra, child), node))


def fold_document(algebra: Callable[[Block[A]], A], nodes: Iterable[Node]) -> list[A]:
    """Fold every top-level node of a document, keeping document order."""
    return [fold(algebra, node) for node in nodes]


def reduce_block(
    extract: Callable[[Block[A]], A],
    accumulate: Callable[[Sequence[A]], A],
    block: Block[A],
) -> A:
    """Reduce exactly one level of a block whose children are already reduced.

    Leaves reduce to ``extract(block)``. Containers combine their own
    contribution with the accumulated contribution of their children:
    ``accumulate([extract(block), accumulate(children)])``.

    Parameters
    ----------
    extract : callable
        Contribution of the node itself
    accumulate : callable
        Combines a sequence of contributions into one
    block : Block
        Block whose child slots already hold reduced values

    Returns
    -------
    A
        The reduced value

    Examples
    --------
    >>> from mdfold.ast.nodes import Strong
    >>> reduce_block(lambda b: [b.kind], lambda xs: [k for x in xs for k in x], Strong([["text"]]))
    ['strong', 'text']

    """
    if is_leaf(block):
        return extract(block)
    return accumulate([extract(block), accumulate(children(block))])


def rebuild(block: Block[Any], values: Iterable[D]) -> Block[D]:
    """Put ``values`` into the child slots of ``block``, in :func:`children` order.

    Raises
    ------
    ValueError
        If the number of values differs from the number of child slots

    """
    supplied = list(values)
    slot_count = len(children(block))
    if len(supplied) != slot_count:
        raise ValueError(f"{block.kind} has {slot_count} child slots, got {len(supplied)} values")
    supply = iter(supplied)
    return fmap(lambda _child: next(supply), block)


def map_tree(f: Callable[[Node], Node], node: Node) -> Node:
    """Rewrite a tree bottom-up.

    ``f`` is applied to every node after its children have been rewritten, so
    it always sees a node whose subtree is already final.

    Parameters
    ----------
    f : callable
        Rewrite of a single node
    node : Node
        Root of the tree

    Returns
    -------
    Node
        Rewritten tree

    """
    return fold(f, node)
