#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfold/ast/sequence.py
"""Pulling contexts out of child slots.

The functions here turn a block whose children are wrapped in some context
(a function of an environment, a result, an awaitable) into that context
wrapping a plain block. Combined with :func:`~mdfold.ast.recursion.fold` they
give folds that need runtime state, folds that can fail, and folds that run
effects, without any of the algebras knowing about recursion.

Examples
--------
Render a tree as a function of a user name:

    >>> from mdfold.ast.nodes import Paragraph, Text
    >>> def greet(name, block):
    ...     if isinstance(block, Text):
    ...         return block.content.replace("{name}", name)
    ...     return "".join(children(block))
    >>> view = fold_with_environment(greet, Paragraph([Text("Hi {name}")]))
    >>> view("Ada")
    'Hi Ada'

"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

from mdfold.ast.nodes import Block, Node, children, fmap
from mdfold.ast.recursion import fold, rebuild
from mdfold.result import Err, Ok, Result

E = TypeVar("E")
V = TypeVar("V")
Env = TypeVar("Env")

# ============================================================================
# Environment
# ============================================================================


def distribute_environment(block: Block[Callable[[Env], V]]) -> Callable[[Env], Block[V]]:
    """Turn a block of functions into a function producing blocks.

    The returned function applies the same environment to every child.
    """
    return lambda env: fmap(lambda child: child(env), block)


def fold_with_environment(algebra: Callable[[Env, Block[V]], V], node: Node) -> Callable[[Env], V]:
    """Fold a tree into a function of an environment.

    Parameters
    ----------
    algebra : callable
        ``(env, block) -> value`` where ``block`` has rendered children
    node : Node
        Tree to fold

    Returns
    -------
    callable
        ``env -> value``; every call renders the whole tree again with that
        environment

    """

    def step(block: Block[Callable[[Env], V]]) -> Callable[[Env], V]:
        with_env = distribute_environment(block)
        return lambda env: algebra(env, with_env(env))

    return fold(step, node)


# ============================================================================
# Results
# ============================================================================


def sequence_results(block: Block[Result[E, V]]) -> Result[E, Block[V]]:
    """Turn a block of results into a result holding a block.

    Fails with the first ``Err`` among the children in document order;
    otherwise returns the block with every result unwrapped.
    """
    values: list[V] = []
    for child in children(block):
        if isinstance(child, Err):
            return child
        values.append(child.value)
    return Ok(rebuild(block, values))


def fold_results(algebra: Callable[[Block[V]], Result[E, V]], node: Node) -> Result[E, V]:
    """Fold a tree with an algebra that can fail.

    Subtrees are folded depth-first, left to right, and folding stops at the
    first failure, which is returned unchanged. A node's own algebra runs only
    when all of its children succeeded, so no partial tree is ever built.

    Parameters
    ----------
    algebra : callable
        ``Block[V] -> Result[E, V]``
    node : Node
        Tree to fold

    Returns
    -------
    Result
        ``Ok`` with the folded value or the first ``Err``

    """
    values: list[V] = []
    for child in children(node):
        result = fold_results(algebra, child)
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return algebra(rebuild(node, values))


# ============================================================================
# Effects
# ============================================================================


async def sequence_effects(block: Block[Awaitable[V]]) -> Block[V]:
    """Await every child of ``block`` and rebuild it from the results.

    Siblings are awaited concurrently with :func:`asyncio.gather` and every
    one of them runs to completion, even after another has failed. The
    exception of the first failing child in document order is then raised
    and no block is produced.
    """
    outcomes = await asyncio.gather(*children(block), return_exceptions=True)
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
    return rebuild(block, outcomes)


def fold_effects(algebra: Callable[[Block[V]], Awaitable[V]], node: Node) -> Awaitable[V]:
    """Fold a tree with an asynchronous algebra.

    Parameters
    ----------
    algebra : callable
        ``Block[V] -> Awaitable[V]``, e.g. an ``async def`` that issues a
        request for each link
    node : Node
        Tree to fold

    Returns
    -------
    Awaitable
        Completes once every node of the tree has been processed

    Notes
    -----
    No timeout, retry or cancellation is applied; wrap the algebra's own
    requests if that is needed.

    """

    async def step(block: Block[Awaitable[V]]) -> V:
        return await algebra(await sequence_effects(block))

    return fold(step, node)
