#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/validation/anchors.py
"""Heading anchors and internal link validation.

Checking ``[see intro](#intro)`` needs the anchors of the *whole* document,
yet a fold only ever sees one node at a time. Validation is therefore split
in two phases that still run from a single fold:

1. Folding a tree with :func:`lift` builds a :class:`Validated` value per
   node. Its ``words`` and ``generated_anchors`` are computed immediately;
   its ``validate`` closure is only built, not called.
2. :func:`resolve` concatenates the anchors of every top-level node, rejects
   the document if any anchor repeats, and only then calls each ``validate``
   with the complete anchor set.

Errors are returned as values (:class:`DuplicatedAnchors`,
:class:`InvalidAnchorLink`) inside a :class:`~mdfold.result.Result`.
:func:`format_anchor_error` turns them into messages for people.

Examples
--------
    >>> from mdfold.ast.nodes import Heading, Link, Paragraph, Text
    >>> from mdfold.ast.recursion import fold
    >>> def count(block):
    ...     return 1 + sum(children(block))
    >>> doc = [Heading(level=1, children=[Text("Intro")]), Paragraph([Link("#intro", [Text("up")])])]
    >>> validate_document(doc, count)
    Ok(value=[2, 3])
    >>> validate_document([Paragraph([Link("#into", [Text("up")])])], count)
    Err(error=InvalidAnchorLink(destination='#into'))

"""

from __future__ import annotations

import difflib
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Collection, Generic, Iterable, Optional, Sequence, TypeVar, Union

from mdfold.ast.nodes import Block, Heading, Link, Node, children
from mdfold.ast.recursion import fold, rebuild
from mdfold.ast.transforms import concat_words, own_words
from mdfold.result import Err, Ok, Result
from mdfold.utils.text import slugify_words

logger = logging.getLogger(__name__)

V = TypeVar("V")


# ============================================================================
# Errors
# ============================================================================


@dataclass(frozen=True)
class DuplicatedAnchors:
    """Two or more headings produce the same anchor.

    Parameters
    ----------
    groups : list of list of str
        One group per repeated anchor, in order of first occurrence; each
        group lists every occurrence

    """

    groups: list[list[str]]


@dataclass(frozen=True)
class InvalidAnchorLink:
    """A ``#fragment`` link whose fragment is not an anchor of the document."""

    destination: str


AnchorError = Union[DuplicatedAnchors, InvalidAnchorLink]


# ============================================================================
# Phase 1: accumulation
# ============================================================================


@dataclass(frozen=True)
class Validated(Generic[V]):
    """A node's accumulated anchor data plus its deferred validation.

    Parameters
    ----------
    validate : callable
        Given every anchor of the document, validates the subtree and renders
        it, or returns the first error
    words : list of str
        Words of the subtree in document order
    generated_anchors : list of str
        Anchors generated by headings inside the subtree, in document order

    """

    validate: Callable[[Collection[str]], Result[AnchorError, V]]
    words: list[str]
    generated_anchors: list[str]


def link_is_valid(destination: str, anchors: Collection[str]) -> bool:
    """Return True unless ``destination`` is a fragment missing from ``anchors``.

    Only ``#fragment`` destinations are checked; anything else (absolute URLs,
    relative paths, ``mailto:``) is always valid.
    """
    if not destination.startswith("#"):
        return True
    return destination[1:] in anchors


def own_anchor(block: Block[object], words: Sequence[str]) -> Optional[str]:
    """Anchor generated by ``block`` itself: headings with at least one word only."""
    if not isinstance(block, Heading):
        return None
    return slugify_words(words) or None


def lift_with_anchor(render: Callable[[Block[V], Optional[str]], V]) -> Callable[[Block[Validated[V]]], Validated[V]]:
    """Build the anchor-validation algebra around a single-phase renderer.

    Parameters
    ----------
    render : callable
        ``(block, anchor) -> value`` rendering one level whose children are
        already rendered; ``anchor`` is the heading's generated anchor, or
        None for other kinds

    Returns
    -------
    callable
        Algebra ``Block[Validated[V]] -> Validated[V]`` for
        :func:`~mdfold.ast.recursion.fold`

    Notes
    -----
    A node's own link is checked before any of its children, so a broken
    link reports itself even when its text contains another broken link.

    """

    def algebra(block: Block[Validated[V]]) -> Validated[V]:
        kids = children(block)
        words = concat_words([own_words(block), concat_words([kid.words for kid in kids])])
        anchor = own_anchor(block, words)
        generated = ([anchor] if anchor else []) + concat_words([kid.generated_anchors for kid in kids])

        def validate(anchors: Collection[str]) -> Result[AnchorError, V]:
            if isinstance(block, Link) and not link_is_valid(block.destination, anchors):
                return Err(InvalidAnchorLink(block.destination))
            values: list[V] = []
            for kid in kids:
                result = kid.validate(anchors)
                if isinstance(result, Err):
                    return result
                values.append(result.value)
            return Ok(render(rebuild(block, values), anchor))

        return Validated(validate=validate, words=words, generated_anchors=generated)

    return algebra


def lift(render: Callable[[Block[V]], V]) -> Callable[[Block[Validated[V]]], Validated[V]]:
    """Like :func:`lift_with_anchor` for renderers that do not need the anchor."""
    return lift_with_anchor(lambda block, _anchor: render(block))


# ============================================================================
# Phase 2: resolution
# ============================================================================


def find_duplicate_groups(anchors: Iterable[str]) -> list[list[str]]:
    """Group repeated anchors, in order of first occurrence.

    Examples
    --------
        >>> find_duplicate_groups(["a", "b", "a", "c", "b", "a"])
        [['a', 'a', 'a'], ['b', 'b']]

    """
    counts = Counter(anchors)
    return [[anchor] * count for anchor, count in counts.items() if count > 1]


def resolve(validated: Sequence[Validated[V]]) -> Result[AnchorError, list[V]]:
    """Validate and render a document from the per-node values of phase 1.

    Parameters
    ----------
    validated : sequence of Validated
        One value per top-level node, in document order

    Returns
    -------
    Result
        ``Ok`` with one rendered value per top-level node;
        ``Err(DuplicatedAnchors)`` when any anchor repeats (nothing is
        rendered); otherwise the first ``Err(InvalidAnchorLink)`` in
        document order

    """
    all_anchors = concat_words([value.generated_anchors for value in validated])
    groups = find_duplicate_groups(all_anchors)
    if groups:
        logger.debug("Duplicated anchors: %s", ", ".join(group[0] for group in groups))
        return Err(DuplicatedAnchors(groups))

    anchor_set = frozenset(all_anchors)
    rendered: list[V] = []
    for value in validated:
        result = value.validate(anchor_set)
        if isinstance(result, Err):
            logger.debug("Anchor validation failed: %s", result.error)
            return result
        rendered.append(result.value)
    logger.debug("Resolved %d blocks against %d anchors", len(rendered), len(anchor_set))
    return Ok(rendered)


def validate_document(
    nodes: Iterable[Node], render: Callable[[Block[V]], V], with_anchor: bool = False
) -> Result[AnchorError, list[V]]:
    """Fold every top-level node with :func:`lift` and :func:`resolve` the result.

    Parameters
    ----------
    nodes : iterable of Node
        Top-level trees in document order
    render : callable
        Single-phase renderer; with ``with_anchor=True`` it is called as
        ``render(block, anchor)``
    with_anchor : bool, default False
        Pass each heading's anchor to ``render``

    Returns
    -------
    Result
        See :func:`resolve`

    """
    algebra = lift_with_anchor(render) if with_anchor else lift(render)  # type: ignore[arg-type]
    return resolve([fold(algebra, node) for node in nodes])


def format_anchor_error(error: AnchorError, anchors: Optional[Sequence[str]] = None) -> str:
    """Describe an anchor error for people.

    Parameters
    ----------
    error : DuplicatedAnchors or InvalidAnchorLink
        The error to describe
    anchors : sequence of str, optional
        Anchors of the document; when given, broken links get a "did you
        mean" suggestion

    Returns
    -------
    str
        One-line message

    Examples
    --------
        >>> format_anchor_error(DuplicatedAnchors([["same-title", "same-title"]]))
        "Duplicated heading anchors: 'same-title' (2 headings)"
        >>> format_anchor_error(InvalidAnchorLink("#into"), ["intro", "usage"])
        "Link '#into' does not match any heading anchor; did you mean '#intro'?"

    """
    if isinstance(error, DuplicatedAnchors):
        described = ", ".join(f"'{group[0]}' ({len(group)} headings)" for group in error.groups)
        return f"Duplicated heading anchors: {described}"

    message = f"Link '{error.destination}' does not match any heading anchor"
    if anchors:
        matches = difflib.get_close_matches(error.destination.lstrip("#"), list(anchors), n=1)
        if matches:
            message += f"; did you mean '#{matches[0]}'?"
    return message
