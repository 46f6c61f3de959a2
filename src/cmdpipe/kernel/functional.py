"""Small function-composition helpers shared by the combinators."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from cmdpipe.kernel.errors import ArityError

T = TypeVar("T")


def identity(x: T) -> T:
    return x


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value through unary functions, left to right.

    ``pipe(u, and_then(f), map(g))`` reads like ``u |> andThen f |> map g``.
    """
    return functools.reduce(lambda acc, fn: fn(acc), fns, value)


def curry(f: Callable[..., T], arity: int) -> Callable[[Any], Any]:
    """Turn an n-ary callable into nested unary callables.

    ``curry(lambda a, b: a + b, 2)(1)(2) == 3``
    """
    if arity < 1:
        raise ValueError("arity must be positive")

    def step(args: tuple[Any, ...]) -> Any:
        if len(args) == arity:
            return f(*args)
        return lambda x: step(args + (x,))

    return step(())


def pipeable(fn: Callable[..., T]) -> Callable[..., Any]:
    """Let the trailing argument of a combinator be supplied later.

    With every argument present the wrapped function is applied. With the
    last one missing a unary transformer is returned instead, so the same
    combinator serves both ``and_then(f, u)`` and ``pipe(u, and_then(f))``.
    Keyword arguments are not supported.
    """
    arity = sum(
        1
        for p in inspect.signature(fn).parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    )
    # Bound methods count ``self``; report counts as the caller sees them.
    offset = 1 if "." in fn.__qualname__ else 0

    @functools.wraps(fn)
    def wrapper(*args: Any) -> Any:
        if len(args) == arity:
            return fn(*args)
        if len(args) == arity - 1:
            return functools.partial(fn, *args)
        raise ArityError(fn.__name__, arity - offset, len(args) - offset)

    return wrapper
