#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Two-phase heading anchor and internal link validation."""

from mdfold.validation.anchors import (
    AnchorError,
    DuplicatedAnchors,
    InvalidAnchorLink,
    Validated,
    find_duplicate_groups,
    format_anchor_error,
    lift,
    lift_with_anchor,
    resolve,
    validate_document,
)
from mdfold.validation.slugs import Rendered, Slugs, lift_slugs, render_document_slugs, resolve_slugs

__all__ = [
    "AnchorError",
    "DuplicatedAnchors",
    "InvalidAnchorLink",
    "Rendered",
    "Slugs",
    "Validated",
    "find_duplicate_groups",
    "format_anchor_error",
    "lift",
    "lift_slugs",
    "lift_with_anchor",
    "render_document_slugs",
    "resolve",
    "resolve_slugs",
    "validate_document",
]
