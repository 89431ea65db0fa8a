#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Adapters from external markdown parsers to block trees."""

from mdfold.parsers.markdown import MarkdownParser, merge_adjacent_text, parse_markdown

__all__ = ["MarkdownParser", "merge_adjacent_text", "parse_markdown"]
