#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning block trees into markdown text and HTML elements."""

from mdfold.renderers.html import HtmlRenderer, render_html
from mdfold.renderers.markdown import (
    MarkdownPrinter,
    MarkdownRenderer,
    escape_line_starts,
    escape_markdown,
    render_markdown,
)
from mdfold.renderers.tables import (
    COMPACT_STYLE,
    DEFAULT_STYLE,
    ColumnInfo,
    TableInfo,
    TableStyle,
    combine_column_info,
    get_table_style,
)

__all__ = [
    "COMPACT_STYLE",
    "DEFAULT_STYLE",
    "ColumnInfo",
    "HtmlRenderer",
    "MarkdownPrinter",
    "MarkdownRenderer",
    "TableInfo",
    "TableStyle",
    "combine_column_info",
    "escape_line_starts",
    "escape_markdown",
    "get_table_style",
    "render_html",
    "render_markdown",
]
