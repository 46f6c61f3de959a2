"""Pipeline core: functor, applicative and monad combinators over Update.

Combinators satisfy the laws documented in ``cmdpipe.combinators.laws``.
Effects are batched left to right in argument order everywhere: the
earlier pipeline stage's effect always comes first.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from cmdpipe.kernel.effect import CMD, Effects
from cmdpipe.kernel.functional import curry, pipeable
from cmdpipe.kernel.update import Update

E = TypeVar("E")
M = TypeVar("M")
N = TypeVar("N")

UpdateFn = Callable[[Any], Update[Any, Any]]


class Pipeline(Generic[E]):
    """Update combinators bound to one effect algebra.

    Every combinator whose last parameter is the value being transformed
    may be called without it to obtain a unary transformer for ``pipe``.
    """

    def __init__(self, effects: Effects[E] = CMD) -> None:  # type: ignore[assignment]
        self.effects = effects

    def __repr__(self) -> str:
        return f"Pipeline(effects={self.effects!r})"

    # -- functor / applicative ------------------------------------------

    def unit(self, model: M) -> Update[M, E]:
        """Inject a model with no effect."""
        return Update(model=model, cmd=self.effects.none())

    save = unit

    @pipeable
    def map(self, f: Callable[[M], N], update: Update[M, E]) -> Update[N, E]:
        return Update(model=f(update.model), cmd=update.cmd)

    @pipeable
    def ap(self, update_fn: Update[Callable[[M], N], E], update: Update[M, E]) -> Update[N, E]:
        """Apply the wrapped function to the wrapped model.

        The function's effect is batched before the argument's.
        """
        return Update(
            model=update_fn.model(update.model),
            cmd=self.effects.batch([update_fn.cmd, update.cmd]),
        )

    @pipeable
    def and_map(self, update: Update[M, E], update_fn: Update[Callable[[M], N], E]) -> Update[N, E]:
        """``ap`` with flipped arguments, for threading arguments in a pipe.

        ``pipe(unit(curry(f, 2)), and_map(a), and_map(b))``
        """
        return self.ap(update_fn, update)

    def _map_n(self, f: Callable[..., Any], updates: Sequence[Update[Any, E]]) -> Update[Any, E]:
        first, *rest = updates
        return functools.reduce(self.ap, rest, self.map(curry(f, len(updates)), first))

    def map2(self, f: Callable[..., N], u1: Update, u2: Update) -> Update[N, E]:
        return self._map_n(f, (u1, u2))

    def map3(self, f: Callable[..., N], u1: Update, u2: Update, u3: Update) -> Update[N, E]:
        return self._map_n(f, (u1, u2, u3))

    def map4(self, f: Callable[..., N], u1: Update, u2: Update, u3: Update, u4: Update) -> Update[N, E]:
        return self._map_n(f, (u1, u2, u3, u4))

    def map5(
        self, f: Callable[..., N], u1: Update, u2: Update, u3: Update, u4: Update, u5: Update
    ) -> Update[N, E]:
        return self._map_n(f, (u1, u2, u3, u4, u5))

    def map6(
        self, f: Callable[..., N], u1: Update, u2: Update, u3: Update, u4: Update, u5: Update, u6: Update
    ) -> Update[N, E]:
        return self._map_n(f, (u1, u2, u3, u4, u5, u6))

    def map7(
        self,
        f: Callable[..., N],
        u1: Update,
        u2: Update,
        u3: Update,
        u4: Update,
        u5: Update,
        u6: Update,
        u7: Update,
    ) -> Update[N, E]:
        return self._map_n(f, (u1, u2, u3, u4, u5, u6, u7))

    # -- monad ----------------------------------------------------------

    def join(self, update: Update[Update[M, E], E]) -> Update[M, E]:
        """Flatten one level. The outer effect comes first."""
        inner = update.model
        return Update(model=inner.model, cmd=self.effects.batch([update.cmd, inner.cmd]))

    @pipeable
    def and_then(self, f: Callable[[M], Update[N, E]], update: Update[M, E]) -> Update[N, E]:
        return self.join(self.map(f, update))

    @pipeable
    def kleisli(self, f: Callable[[Any], Update[N, E]], g: Callable[[M], Update[Any, E]], model: M) -> Update[N, E]:
        """Right-to-left composition: run ``g``, then ``f``."""
        return self.and_then(f, g(model))

    @pipeable
    def sequence(self, fns: Sequence[Callable[[M], Update[M, E]]], model: M) -> Update[M, E]:
        """Run every function in order, starting from ``unit(model)``."""
        return functools.reduce(lambda acc, fn: self.and_then(fn, acc), fns, self.unit(model))

    # -- commands -------------------------------------------------------

    @pipeable
    def add_cmd(self, cmd: E, model: M) -> Update[M, E]:
        return Update(model=model, cmd=cmd)

    @pipeable
    def map_cmd(self, f: Callable[[Any], Any], update: Update[M, E]) -> Update[M, E]:
        return Update(model=update.model, cmd=self.effects.map(f, update.cmd))

    @pipeable
    def and_add_cmd(self, cmd: E, update: Update[M, E]) -> Update[M, E]:
        return self.and_then(self.add_cmd(cmd), update)

    # -- pointfree helpers ----------------------------------------------

    @pipeable
    def with_(self, view: Callable[[M], Any], f: Callable[[Any, M], Update[N, E]], model: M) -> Update[N, E]:
        """Call ``f(view(model), model)``."""
        return f(view(model), model)

    @pipeable
    def using(self, f: Callable[[M, M], Update[N, E]], model: M) -> Update[N, E]:
        """Call ``f(model, model)``."""
        return f(model, model)

    @pipeable
    def when(self, cond: bool, f: Callable[[M], Update[M, E]], model: M) -> Update[M, E]:
        """Run ``f`` only if ``cond`` holds, otherwise leave the model alone."""
        return f(model) if cond else self.unit(model)

    @pipeable
    def and_if(self, cond: bool, f: Callable[[M], Update[M, E]], update: Update[M, E]) -> Update[M, E]:
        return self.and_then(self.when(cond, f), update)

    and_then_if = and_if

    @pipeable
    def and_with(
        self, view: Callable[[M], Any], f: Callable[[Any, M], Update[N, E]], update: Update[M, E]
    ) -> Update[N, E]:
        return self.and_then(self.with_(view, f), update)

    @pipeable
    def and_using(self, f: Callable[[M, M], Update[N, E]], update: Update[M, E]) -> Update[N, E]:
        return self.and_then(self.using(f), update)
