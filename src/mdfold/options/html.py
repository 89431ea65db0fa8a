#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from mdfold.constants import (
    DEFAULT_HEADING_IDS,
    DEFAULT_HTML_PASSTHROUGH_MODE,
    HTML_PASSTHROUGH_MODES,
    HtmlPassthroughMode,
)
from mdfold.options.base import BaseRendererOptions, validate_choice


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering blocks to HTML elements.

    Parameters
    ----------
    heading_ids : bool, default False
        Give every heading an ``id`` derived from its words, the same anchor
        that link validation checks against. Headings without words get none.
    html_passthrough_mode : {"pass-through", "escape", "drop"}, default "pass-through"
        How to handle HtmlBlock and HtmlInline nodes:
        - "pass-through": Parse and insert the markup (use only with trusted content)
        - "escape": Insert the markup as text
        - "drop": Remove HTML content entirely
    custom_handlers : Mapping[str, callable], default empty
        Renderers for ``Custom`` blocks keyed by tag. A handler receives the
        renderer's soup and the block with children already rendered to
        elements, and returns an element.

    """

    heading_ids: bool = field(
        default=DEFAULT_HEADING_IDS,
        metadata={"help": "Add id attributes to headings"},
    )
    html_passthrough_mode: HtmlPassthroughMode = field(
        default=DEFAULT_HTML_PASSTHROUGH_MODE,
        metadata={"help": "How to handle raw HTML: 'pass-through', 'escape' or 'drop'"},
    )
    custom_handlers: Mapping[str, Callable] = field(
        default_factory=dict,
        metadata={"help": "Renderers for custom blocks keyed by tag", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate the passthrough mode.

        Raises
        ------
        ValidationError
            If ``html_passthrough_mode`` is not a known mode.

        """
        validate_choice("html_passthrough_mode", self.html_passthrough_mode, HTML_PASSTHROUGH_MODES)
