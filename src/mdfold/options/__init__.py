#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for the markdown adapter and the renderers."""

from mdfold.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdfold.options.html import HtmlRendererOptions
from mdfold.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
]
