#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/result.py
"""Success/failure values returned by validating folds.

Folds that can fail never raise: they return ``Ok(value)`` or ``Err(error)``
and the caller decides what a failure means. The two classes share a small
interface so code can chain steps without branching on the type.

Examples
--------
>>> Ok(2).map(lambda v: v + 1)
Ok(value=3)
>>> Err("boom").map(lambda v: v + 1)
Err(error='boom')
>>> Ok(2).bind(lambda v: Err(f"bad {v}"))
Err(error='bad 2')

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from mdfold.exceptions import UnwrapError

V = TypeVar("V")
W = TypeVar("W")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[V]):
    """Successful result carrying ``value``."""

    value: V

    def is_ok(self) -> bool:
        return True

    def map(self, f: Callable[[V], W]) -> Ok[W]:
        return Ok(f(self.value))

    def bind(self, f: Callable[[V], Result[E, W]]) -> Result[E, W]:
        return f(self.value)

    def unwrap(self) -> V:
        return self.value

    def unwrap_or(self, default: V) -> V:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def map(self, f: Callable[[V], W]) -> Err[E]:
        return self

    def bind(self, f: Callable[[V], Result[E, W]]) -> Err[E]:
        return self

    def unwrap(self) -> V:
        """Raise :class:`~mdfold.exceptions.UnwrapError` carrying the error value."""
        raise UnwrapError(self.error)

    def unwrap_or(self, default: V) -> V:
        return default


# Parameterised error first: Result[E, V]
Result = Union[Err[E], Ok[V]]
