#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/validation/slugs.py
"""Anchor checking that always renders.

Same two-phase shape as :mod:`mdfold.validation.anchors`, but instead of
failing, every node is rendered together with a flag saying whether it is
valid. A renderer can then mark broken links or clashing headings in its
output (a CSS class, a warning icon) rather than refusing the document.

A node's own validity is:

- links: the ``#fragment`` names an existing anchor (other links are valid)
- headings: their anchor is generated exactly once in the document
- everything else: valid

Examples
--------
    >>> from mdfold.ast.nodes import Heading, Link, Paragraph, Text
    >>> from mdfold.ast.recursion import fold
    >>> mark = lift_slugs(lambda block, valid: block.kind if valid else f"!{block.kind}")
    >>> doc = [Heading(level=1, children=[Text("A")]), Paragraph([Link("#b", [Text("x")])])]
    >>> resolve_slugs([fold(mark, node) for node in doc])
    Rendered(valid=False, value=['heading', 'paragraph'])

"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Mapping, Sequence, TypeVar

from mdfold.ast.nodes import Block, Heading, Link, Node, children
from mdfold.ast.recursion import fold, rebuild
from mdfold.ast.transforms import concat_words, own_words
from mdfold.validation.anchors import link_is_valid, own_anchor

logger = logging.getLogger(__name__)

V = TypeVar("V")

AnchorCounts = Mapping[str, int]


@dataclass(frozen=True)
class Rendered(Generic[V]):
    """A rendered value and whether its subtree is free of anchor problems."""

    valid: bool
    value: V


@dataclass(frozen=True)
class Slugs(Generic[V]):
    """A node's accumulated anchor data plus its deferred rendering.

    Parameters
    ----------
    render : callable
        Given how often each anchor occurs in the document, renders the
        subtree
    words : list of str
        Words of the subtree in document order
    generated_anchors : list of str
        Anchors generated by headings inside the subtree, in document order

    """

    render: Callable[[AnchorCounts], Rendered[V]]
    words: list[str]
    generated_anchors: list[str]


def lift_slugs(render: Callable[[Block[V], bool], V]) -> Callable[[Block[Slugs[V]]], Slugs[V]]:
    """Build the slug algebra around a renderer that takes the node's own validity.

    Parameters
    ----------
    render : callable
        ``(block, valid) -> value`` rendering one level whose children are
        already rendered

    Returns
    -------
    callable
        Algebra ``Block[Slugs[V]] -> Slugs[V]``

    """

    def algebra(block: Block[Slugs[V]]) -> Slugs[V]:
        kids = children(block)
        words = concat_words([own_words(block), concat_words([kid.words for kid in kids])])
        anchor = own_anchor(block, words)
        generated = ([anchor] if anchor else []) + concat_words([kid.generated_anchors for kid in kids])

        def render_with(counts: AnchorCounts) -> Rendered[V]:
            rendered_kids = [kid.render(counts) for kid in kids]
            own_valid = True
            if isinstance(block, Link):
                own_valid = link_is_valid(block.destination, counts)
            elif isinstance(block, Heading) and anchor:
                own_valid = counts.get(anchor, 0) == 1
            value = render(rebuild(block, [kid.value for kid in rendered_kids]), own_valid)
            return Rendered(valid=own_valid and all(kid.valid for kid in rendered_kids), value=value)

        return Slugs(render=render_with, words=words, generated_anchors=generated)

    return algebra


def resolve_slugs(slugs: Sequence[Slugs[V]]) -> Rendered[list[V]]:
    """Render every top-level node against the document's anchors.

    Rendering always happens; the result is invalid when any anchor repeats
    or any ``#fragment`` link is broken.
    """
    counts = Counter(concat_words([value.generated_anchors for value in slugs]))
    rendered = [value.render(counts) for value in slugs]
    valid = all(item.valid for item in rendered)
    if not valid:
        logger.debug("Document has duplicated anchors or broken links")
    return Rendered(valid=valid, value=[item.value for item in rendered])


def render_document_slugs(nodes: Iterable[Node], render: Callable[[Block[V], bool], V]) -> Rendered[list[V]]:
    """Fold every top-level node with :func:`lift_slugs` and resolve the result."""
    algebra = lift_slugs(render)
    return resolve_slugs([fold(algebra, node) for node in nodes])
