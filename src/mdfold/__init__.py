"""mdfold - recursion schemes for markdown documents.

mdfold represents a markdown document as a tree of blocks whose child type is
a parameter, and turns every transformation of that tree into a *fold*: a
one-level function that never recurses itself. HTML rendering, pretty
printing, word extraction, table layout and anchor validation are all folds,
and they compose without anyone writing a tree walk.

Key Features
------------
- Closed block algebra with a structure-preserving ``fmap``
- Generic ``fold`` and ``reduce_block`` plus ``BlockVisitor`` dispatch
- Folds over environments, results and asyncio effects
- Markdown pretty-printer with two-phase table column negotiation
- HTML rendering to BeautifulSoup elements
- Two-phase heading anchor and internal link validation
- Markdown parsing through mistune

Examples
--------
Round-trip a document:

    >>> from mdfold import parse_markdown, render_markdown
    >>> render_markdown(parse_markdown("Hello *world*"))
    'Hello *world*\\n'

Check internal links:

    >>> from mdfold import validate_document
    >>> result = validate_document(parse_markdown("# Intro\\n\\n[up](#intro)"), lambda block: None)
    >>> result.is_ok()
    True

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from mdfold.ast import Block, BlockVisitor, Node, children, fmap, fold, fold_document, map_tree, reduce_block
from mdfold.exceptions import (
    InvalidOptionsError,
    MdfoldError,
    ParsingError,
    RenderingError,
    UnwrapError,
    ValidationError,
)
from mdfold.options import HtmlRendererOptions, MarkdownParserOptions, MarkdownRendererOptions
from mdfold.parsers import MarkdownParser, parse_markdown
from mdfold.renderers import HtmlRenderer, MarkdownRenderer, render_html, render_markdown
from mdfold.result import Err, Ok, Result
from mdfold.validation import DuplicatedAnchors, InvalidAnchorLink, format_anchor_error, resolve, validate_document

__version__ = "0.1.0"

__all__ = [
    "Block",
    "BlockVisitor",
    "DuplicatedAnchors",
    "Err",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "InvalidAnchorLink",
    "InvalidOptionsError",
    "MarkdownParser",
    "MarkdownParserOptions",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "MdfoldError",
    "Node",
    "Ok",
    "ParsingError",
    "RenderingError",
    "Result",
    "UnwrapError",
    "ValidationError",
    "__version__",
    "children",
    "fmap",
    "fold",
    "fold_document",
    "format_anchor_error",
    "map_tree",
    "parse_markdown",
    "reduce_block",
    "render_html",
    "render_markdown",
    "resolve",
    "validate_document",
]
