#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/ast/nodes.py
"""Block algebra for markdown documents.

This module defines the closed set of node shapes a markdown document is made
of. Every class is generic over ``C``, the type of its child slots. A parsed
document uses blocks as children (a *tree*, see :data:`Node`); while a fold is
in progress the same classes hold already-reduced values instead, e.g. strings,
HTML elements or deferred render functions.

Only the child slots are generic. The remaining fields (heading level, link
destination, code language, cell alignment, ...) are metadata: generic
traversal copies them unchanged.

Node Kinds
----------
Containers (hold child slots):
    - Heading, Paragraph, BlockQuote
    - Strong, Emphasis, Strikethrough, Link
    - UnorderedList (via ListItem), OrderedList
    - Table, TableHeader, TableBody, TableRow, TableCell, TableHeaderCell
    - Custom

Leaves (no child slots):
    - Text, CodeSpan, Image, CodeBlock
    - HardLineBreak, SoftLineBreak, ThematicBreak
    - HtmlBlock, HtmlInline

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from mdfold.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL

C = TypeVar("C")
D = TypeVar("D")


class Alignment(Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional[Alignment]:
        """Look up an alignment by its lowercase name, ``None`` when absent."""
        if not name:
            return None
        return cls(name.lower())


class TaskState(Enum):
    """Checkbox state of an unordered list item."""

    NONE = "none"
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class Block(Generic[C]):
    """Base class of every node kind.

    Subclasses are frozen dataclasses. Use :meth:`map` (or :func:`fmap`) to
    change the child representation and :func:`children` to list child slots.
    """

    def map(self, f: Callable[[C], D]) -> Block[D]:
        """Apply ``f`` to every child slot, keeping kind and metadata.

        Parameters
        ----------
        f : callable
            Function applied to each child slot

        Returns
        -------
        Block
            Block of the same kind with transformed children

        """
        return fmap(f, self)

    @property
    def kind(self) -> str:
        """Snake-case name of the node kind (``"table_header_cell"`` etc.).

        Subclasses of a node class share the kind of the class they extend.
        """
        for cls in type(self).__mro__:
            name = _KIND_NAMES.get(cls)
            if name is not None:
                return name
        raise TypeError(f"Not a block: {type(self).__name__}")


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Heading(Block[C]):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    raw_text : str
        Plain text of the heading as written in the source
    children : list, default = empty list
        Inline child slots

    """

    level: int
    raw_text: str = ""
    children: list[C] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass(frozen=True)
class Paragraph(Block[C]):
    """Paragraph of inline content."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class BlockQuote(Block[C]):
    """Block quote containing block-level children."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class ListItem(Generic[C]):
    """One item of an unordered list.

    ``ListItem`` is not a node kind of its own: it only groups the children
    of one bullet together with its checkbox state.

    Parameters
    ----------
    children : list, default = empty list
        Block-level child slots of the item
    task : TaskState, default = TaskState.NONE
        Checkbox state for task list items

    """

    children: list[C] = field(default_factory=list)
    task: TaskState = TaskState.NONE

    def map(self, f: Callable[[C], D]) -> ListItem[D]:
        return ListItem(children=[f(child) for child in self.children], task=self.task)


@dataclass(frozen=True)
class UnorderedList(Block[C]):
    """Bullet list.

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items, each with its own children and task state

    """

    items: list[ListItem[C]] = field(default_factory=list)


@dataclass(frozen=True)
class OrderedList(Block[C]):
    """Numbered list.

    Parameters
    ----------
    items : list of list, default = empty list
        One list of block-level child slots per item
    start : int, default = 1
        Number of the first item

    """

    items: list[list[C]] = field(default_factory=list)
    start: int = 1


@dataclass(frozen=True)
class CodeBlock(Block[C]):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Code body, usually ending with a newline
    language : str or None, default = None
        Info-string language, if any

    """

    content: str
    language: Optional[str] = None


@dataclass(frozen=True)
class ThematicBreak(Block[C]):
    """Horizontal rule."""


@dataclass(frozen=True)
class HtmlBlock(Block[C]):
    """Raw HTML block passed through from the source."""

    content: str


@dataclass(frozen=True)
class Table(Block[C]):
    """Table; children are a ``TableHeader`` and/or a ``TableBody``."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class TableHeader(Block[C]):
    """Header section of a table; children are rows."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class TableBody(Block[C]):
    """Body section of a table; children are rows."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class TableRow(Block[C]):
    """Table row; children are cells, in column order."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class TableCell(Block[C]):
    """Body cell with optional column alignment."""

    children: list[C] = field(default_factory=list)
    alignment: Optional[Alignment] = None


@dataclass(frozen=True)
class TableHeaderCell(Block[C]):
    """Header cell with optional column alignment."""

    children: list[C] = field(default_factory=list)
    alignment: Optional[Alignment] = None


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Block[C]):
    """Plain text."""

    content: str


@dataclass(frozen=True)
class CodeSpan(Block[C]):
    """Inline code."""

    content: str


@dataclass(frozen=True)
class Strong(Block[C]):
    """Strong emphasis (bold)."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class Emphasis(Block[C]):
    """Emphasis (italic)."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class Strikethrough(Block[C]):
    """GFM strikethrough."""

    children: list[C] = field(default_factory=list)


@dataclass(frozen=True)
class Link(Block[C]):
    """Hyperlink.

    Parameters
    ----------
    destination : str
        Link target; ``#fragment`` destinations point at heading anchors
    children : list, default = empty list
        Inline child slots forming the link text
    title : str or None, default = None
        Optional link title

    """

    destination: str
    children: list[C] = field(default_factory=list)
    title: Optional[str] = None


@dataclass(frozen=True)
class Image(Block[C]):
    """Image reference.

    Parameters
    ----------
    src : str
        Image URL or path
    alt : str, default = ""
        Alternative text
    title : str or None, default = None
        Optional image title

    """

    src: str
    alt: str = ""
    title: Optional[str] = None


@dataclass(frozen=True)
class HardLineBreak(Block[C]):
    """Forced line break."""


@dataclass(frozen=True)
class SoftLineBreak(Block[C]):
    """Line ending inside a paragraph."""


@dataclass(frozen=True)
class HtmlInline(Block[C]):
    """Raw inline HTML passed through from the source."""

    content: str


@dataclass(frozen=True)
class Custom(Block[C]):
    """Foreign element handled by caller-supplied renderers.

    The children are still folded like any other node; only the element's own
    rendering is delegated to a handler registered under ``tag``.

    Parameters
    ----------
    tag : str
        Handler key, usually an element name
    children : list, default = empty list
        Child slots
    attributes : dict, default = empty dict
        Element attributes

    """

    tag: str
    children: list[C] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


# A tree: a block whose children are trees.
Node = Block[Any]

LEAF_TYPES: tuple[type, ...] = (
    Text,
    CodeSpan,
    Image,
    CodeBlock,
    HardLineBreak,
    SoftLineBreak,
    ThematicBreak,
    HtmlBlock,
    HtmlInline,
)

# Kinds whose only child slots live in a plain ``children`` list
_CHILDREN_TYPES: tuple[type, ...] = (
    Heading,
    Paragraph,
    BlockQuote,
    Strong,
    Emphasis,
    Strikethrough,
    Link,
    Table,
    TableHeader,
    TableBody,
    TableRow,
    TableCell,
    TableHeaderCell,
    Custom,
)

_KIND_NAMES: dict[type, str] = {
    Heading: "heading",
    Paragraph: "paragraph",
    BlockQuote: "block_quote",
    Text: "text",
    CodeSpan: "code_span",
    Strong: "strong",
    Emphasis: "emphasis",
    Strikethrough: "strikethrough",
    Link: "link",
    Image: "image",
    UnorderedList: "unordered_list",
    OrderedList: "ordered_list",
    CodeBlock: "code_block",
    HardLineBreak: "hard_line_break",
    SoftLineBreak: "soft_line_break",
    ThematicBreak: "thematic_break",
    HtmlBlock: "html_block",
    HtmlInline: "html_inline",
    Table: "table",
    TableHeader: "table_header",
    TableBody: "table_body",
    TableRow: "table_row",
    TableCell: "table_cell",
    TableHeaderCell: "table_header_cell",
    Custom: "custom",
}


def is_leaf(block: Block[Any]) -> bool:
    """Return True when ``block`` has no child slots by construction."""
    return isinstance(block, LEAF_TYPES)


def children(block: Block[C]) -> list[C]:
    """Get all child slots of a block, in document order.

    The order matches the order in which :func:`fmap` visits the slots, so a
    list of values computed from ``children(block)`` can be put back with
    :func:`mdfold.ast.recursion.rebuild`.

    Parameters
    ----------
    block : Block
        The block to get children from

    Returns
    -------
    list
        Child slots (empty list for leaves)

    Examples
    --------
    >>> items = UnorderedList(items=[ListItem([Text("a")]), ListItem([Text("b"), Text("c")])])
    >>> len(children(items))
    3

    """
    if isinstance(block, _CHILDREN_TYPES):
        return list(block.children)  # type: ignore[attr-defined]

    if isinstance(block, UnorderedList):
        return [child for item in block.items for child in item.children]

    if isinstance(block, OrderedList):
        return [child for item in block.items for child in item]

    if isinstance(block, LEAF_TYPES):
        return []

    raise TypeError(f"Not a block: {type(block).__name__}")


def fmap(f: Callable[[C], D], block: Block[C]) -> Block[D]:
    """Apply ``f`` to every child slot of ``block``.

    The result is a block of the same kind with identical metadata. ``fmap``
    is total and obeys the functor laws: ``fmap(identity, b) == b`` and
    ``fmap(g, fmap(f, b)) == fmap(lambda x: g(f(x)), b)``.

    Parameters
    ----------
    f : callable
        Function applied to each child slot, left to right
    block : Block
        Block to transform

    Returns
    -------
    Block
        New block with transformed children

    Examples
    --------
    >>> fmap(len, Paragraph(children=["ab", "c"]))
    Paragraph(children=[2, 1])

    """
    if isinstance(block, _CHILDREN_TYPES):
        return replace(block, children=[f(child) for child in block.children])  # type: ignore[attr-defined]

    if isinstance(block, UnorderedList):
        return UnorderedList(items=[item.map(f) for item in block.items])

    if isinstance(block, OrderedList):
        return OrderedList(items=[[f(child) for child in item] for item in block.items], start=block.start)

    if isinstance(block, LEAF_TYPES):
        # Leaves carry no C-typed data, so the same instance is valid at any child type
        return block  # type: ignore[return-value]

    raise TypeError(f"Not a block: {type(block).__name__}")
