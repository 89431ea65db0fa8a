#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdfold library.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and renderers
2. Markdown Structure - heading limits and markers
3. Pretty-printing Defaults
4. HTML Rendering Defaults
5. Command-line Interface
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableStyleName = Literal["default", "compact"]
EmphasisSymbol = Literal["*", "_"]
BulletSymbol = Literal["-", "*", "+"]
OrderedDelimiter = Literal[".", ")"]
CodeFenceChar = Literal["`", "~"]
HtmlPassthroughMode = Literal["pass-through", "escape", "drop"]

TABLE_STYLE_NAMES: tuple[str, ...] = ("default", "compact")
EMPHASIS_SYMBOLS: tuple[str, ...] = ("*", "_")
BULLET_SYMBOLS: tuple[str, ...] = ("-", "*", "+")
ORDERED_DELIMITERS: tuple[str, ...] = (".", ")")
CODE_FENCE_CHARS: tuple[str, ...] = ("`", "~")
HTML_PASSTHROUGH_MODES: tuple[str, ...] = ("pass-through", "escape", "drop")

# =============================================================================
# Markdown Structure
# =============================================================================

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Characters escaped when text is written back as markdown
MARKDOWN_SPECIAL_CHARS = "\\`*_[]|~<"

# Characters that open a block when they start a line of paragraph text.
# A digit run followed by an ordered delimiter is handled separately.
LINE_START_MARKERS = "-+>="

# Marker a list switches to when it directly follows a list of the same kind,
# so the two are not merged on reparse
ALTERNATE_BULLET_SYMBOLS: dict[str, str] = {"-": "*", "*": "-", "+": "-"}
ALTERNATE_ORDERED_DELIMITERS: dict[str, str] = {".": ")", ")": "."}

# Word boundaries used by word extraction
WORD_SPLIT_PATTERN = r"\s+"

# Separator used when joining heading words into an anchor
ANCHOR_SEPARATOR = "-"

# =============================================================================
# Pretty-printing Defaults
# =============================================================================

DEFAULT_TABLE_STYLE: TableStyleName = "default"
DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"
DEFAULT_ORDERED_DELIMITER: OrderedDelimiter = "."
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3
THEMATIC_BREAK_MARKER = "---"

# Minimum cell width of the padded table style; a delimiter cell needs room
# for two colons and one dash
MIN_TABLE_COLUMN_WIDTH = 3

# =============================================================================
# HTML Rendering Defaults
# =============================================================================

DEFAULT_HEADING_IDS = False
DEFAULT_HTML_PASSTHROUGH_MODE: HtmlPassthroughMode = "pass-through"
HTML_PARSER_FEATURES = "html.parser"
CODE_LANGUAGE_CLASS_PREFIX = "language-"

# =============================================================================
# Command-line Interface
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ANCHOR_ERROR = 1
EXIT_INPUT_ERROR = 2

OUTPUT_FORMATS: tuple[str, ...] = ("markdown", "html", "words", "anchors")
DEFAULT_OUTPUT_FORMAT = "markdown"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
