#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/utils/text.py
"""Text helpers shared by word extraction and anchor generation.

Functions
---------
split_words : Split text on whitespace, dropping empty pieces
slugify_words : Join a word sequence into a heading anchor
slugify_text : Anchor for a plain string

Examples
--------
    >>> split_words("  hello\\tworld\\n")
    ['hello', 'world']
    >>> slugify_words(["Same", "Title!"])
    'same-title'

"""

from __future__ import annotations

import re
from typing import Iterable

from mdfold.constants import ANCHOR_SEPARATOR, WORD_SPLIT_PATTERN

_WORD_SPLIT_RE = re.compile(WORD_SPLIT_PATTERN, re.IGNORECASE)


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of whitespace.

    Parameters
    ----------
    text : str
        Text to split

    Returns
    -------
    list of str
        Non-empty words, in order

    """
    return [word for word in _WORD_SPLIT_RE.split(text) if word]


def slugify_words(words: Iterable[str], separator: str = ANCHOR_SEPARATOR) -> str:
    """Build an anchor identifier from a sequence of words.

    Every word is lower-cased and reduced to its alphanumeric characters;
    words that end up empty are dropped and the rest are joined with
    ``separator``.

    Parameters
    ----------
    words : iterable of str
        Words of a heading
    separator : str, default = "-"
        Separator between words

    Returns
    -------
    str
        Anchor identifier (possibly empty)

    Examples
    --------
        >>> slugify_words(["API", "Reference", "(v2.0)"])
        'api-reference-v20'
        >>> slugify_words(["--", "Intro"])
        'intro'

    """
    tokens = ("".join(char for char in word.lower() if char.isalnum()) for word in words)
    return separator.join(token for token in tokens if token)


def slugify_text(text: str, separator: str = ANCHOR_SEPARATOR) -> str:
    """Anchor identifier for a plain string, e.g. a heading's raw text."""
    return slugify_words(split_words(text), separator=separator)
