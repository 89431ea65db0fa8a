#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from mdfold.constants import (
    BULLET_SYMBOLS,
    CODE_FENCE_CHARS,
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_ORDERED_DELIMITER,
    DEFAULT_TABLE_STYLE,
    EMPHASIS_SYMBOLS,
    ORDERED_DELIMITERS,
    TABLE_STYLE_NAMES,
    BulletSymbol,
    CodeFenceChar,
    EmphasisSymbol,
    OrderedDelimiter,
    TableStyleName,
)
from mdfold.exceptions import ValidationError
from mdfold.options.base import BaseParserOptions, BaseRendererOptions, validate_choice


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Markdown parsing options.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognise GFM pipe tables.
    parse_strikethrough : bool, default True
        Recognise ``~~strikethrough~~``.
    parse_task_lists : bool, default True
        Recognise ``[ ]`` / ``[x]`` checkboxes at the start of list items.

    """

    parse_tables: bool = field(default=True, metadata={"help": "Parse GFM pipe tables"})
    parse_strikethrough: bool = field(default=True, metadata={"help": "Parse ~~strikethrough~~ text"})
    parse_task_lists: bool = field(default=True, metadata={"help": "Parse [ ] / [x] task list items"})


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown pretty-printing options.

    Parameters
    ----------
    table_style : {"default", "compact"}, default "default"
        "default" pads columns to equal width and writes alignment colons;
        "compact" writes cells unpadded with a minimal delimiter row.
    emphasis_symbol : {"\*", "\_"}, default "\*"
        Symbol used for emphasis and strong emphasis.
    bullet_symbol : {"-", "\*", "+"}, default "-"
        Marker of unordered list items.
    ordered_delimiter : {".", ")"}, default "."
        Character after the number of ordered list items.
    code_fence_char : {"`", "~"}, default "`"
        Character of code block fences.
    code_fence_min : int, default 3
        Minimum fence length; fences grow past any run of the fence
        character inside the code.
    custom_handlers : Mapping[str, callable], default empty
        Renderers for ``Custom`` blocks keyed by tag. A handler receives the
        block with children already rendered to strings and returns a string.

    """

    table_style: TableStyleName = field(
        default=DEFAULT_TABLE_STYLE,
        metadata={"help": "Table layout: padded columns ('default') or unpadded ('compact')"},
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,
        metadata={"help": "Symbol for emphasis and strong emphasis"},
    )
    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Marker for unordered list items"},
    )
    ordered_delimiter: OrderedDelimiter = field(
        default=DEFAULT_ORDERED_DELIMITER,
        metadata={"help": "Character after the number of ordered list items"},
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={"help": "Character for code block fences"},
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Minimum length of code block fences", "type": int},
    )
    custom_handlers: Mapping[str, Callable] = field(
        default_factory=dict,
        metadata={"help": "Renderers for custom blocks keyed by tag", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate choice fields and the fence length.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        validate_choice("table_style", self.table_style, TABLE_STYLE_NAMES)
        validate_choice("emphasis_symbol", self.emphasis_symbol, EMPHASIS_SYMBOLS)
        validate_choice("bullet_symbol", self.bullet_symbol, BULLET_SYMBOLS)
        validate_choice("ordered_delimiter", self.ordered_delimiter, ORDERED_DELIMITERS)
        validate_choice("code_fence_char", self.code_fence_char, CODE_FENCE_CHARS)
        if self.code_fence_min < DEFAULT_CODE_FENCE_MIN:
            raise ValidationError(
                f"code_fence_min must be at least {DEFAULT_CODE_FENCE_MIN}, got {self.code_fence_min}",
                parameter_name="code_fence_min",
                parameter_value=self.code_fence_min,
            )
