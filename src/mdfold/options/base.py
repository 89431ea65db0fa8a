#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/options/base.py
"""Base classes for parser and renderer options.

Options are frozen dataclasses. Each field carries a ``help`` entry in its
metadata, which the command-line interface reuses for its own help text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any, Iterable

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdfold.exceptions import InvalidOptionsError, ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


def validate_choice(parameter_name: str, value: Any, choices: Iterable[Any]) -> None:
    """Raise :class:`ValidationError` unless ``value`` is one of ``choices``."""
    allowed = tuple(choices)
    if value not in allowed:
        raise ValidationError(
            f"{parameter_name} must be one of {', '.join(repr(choice) for choice in allowed)}, got {value!r}",
            parameter_name=parameter_name,
            parameter_value=value,
        )


def validate_options_type(options: Any, expected_type: type, component_name: str) -> None:
    """Validate that options are of the correct type for a parser or renderer.

    Parameters
    ----------
    options : any
        The options object to validate, or None
    expected_type : type
        The expected options class type
    component_name : str
        Name of the parser or renderer (for error messages)

    Raises
    ------
    InvalidOptionsError
        If options are not None and not an instance of expected_type

    """
    if options is not None and not isinstance(options, expected_type):
        raise InvalidOptionsError(
            component_name=component_name,
            expected_type=expected_type,
            received_type=type(options),
        )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options."""


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options."""
