"""Combinator laws and checks for them."""

# Combinators satisfy the following algebraic laws:
#
# 1. Functor identity: map(identity, u) == u
#
# 2. Functor composition: map(compose(g, f), u) == map(g, map(f, u))
#
# 3. Applicative homomorphism: ap(unit(f), unit(x)) == unit(f(x))
#    The combined effect of ap(a, b) is batch([a.cmd, b.cmd])
#
# 4. Monad left identity: and_then(f, unit(x)) == f(x)
#
# 5. Monad right identity: and_then(unit, u) == u
#
# 6. Associativity: and_then(g, and_then(f, u)) == and_then(lambda x: and_then(g, f(x)), u)
#
# Each check below evaluates both sides with the given pipeline and returns
# whether they are structurally equal. Effects are compared with ==, so the
# effect algebra must batch ``none`` away for the identity laws to hold.

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cmdpipe.combinators.ops import Pipeline
from cmdpipe.kernel.functional import identity
from cmdpipe.kernel.update import Update


def functor_identity(pipeline: Pipeline, update: Update) -> bool:
    return pipeline.map(identity, update) == update


def functor_composition(
    pipeline: Pipeline,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    update: Update,
) -> bool:
    lhs = pipeline.map(lambda x: g(f(x)), update)
    rhs = pipeline.map(g, pipeline.map(f, update))
    return lhs == rhs


def applicative_homomorphism(pipeline: Pipeline, f: Callable[[Any], Any], x: Any) -> bool:
    return pipeline.ap(pipeline.unit(f), pipeline.unit(x)) == pipeline.unit(f(x))


def monad_left_identity(pipeline: Pipeline, f: Callable[[Any], Update], x: Any) -> bool:
    return pipeline.and_then(f, pipeline.unit(x)) == f(x)


def monad_right_identity(pipeline: Pipeline, update: Update) -> bool:
    return pipeline.and_then(pipeline.unit, update) == update


def monad_associativity(
    pipeline: Pipeline,
    f: Callable[[Any], Update],
    g: Callable[[Any], Update],
    update: Update,
) -> bool:
    lhs = pipeline.and_then(g, pipeline.and_then(f, update))
    rhs = pipeline.and_then(lambda x: pipeline.and_then(g, f(x)), update)
    return lhs == rhs
