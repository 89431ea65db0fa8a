#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/utils/__init__.py
"""Utility modules for the mdfold package."""

from mdfold.utils.text import slugify_text, slugify_words, split_words

__all__ = ["slugify_text", "slugify_words", "split_words"]
