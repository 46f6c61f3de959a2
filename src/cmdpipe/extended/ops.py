"""Callback extension: let a nested update signal its ancestors.

A child update works on ``Extended(model, callbacks)`` and appends
parent-directed actions with ``call``. The parent embeds the child with
``run_stack``, which writes the child's model back and then drains the
callbacks against the parent's model, oldest first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from cmdpipe.combinators.ops import Pipeline
from cmdpipe.kernel.effect import Effects
from cmdpipe.kernel.functional import pipeable
from cmdpipe.kernel.update import Extended, Update

logger = logging.getLogger(__name__)

E = TypeVar("E")
M = TypeVar("M")
N = TypeVar("N")
P = TypeVar("P")
C = TypeVar("C")

Stack = Callable[[Extended[Any, Any]], Update[Extended[Any, Any], Any]]


class ExtendedPipeline(Generic[E]):
    """Callback-aware combinators layered on a ``Pipeline``."""

    def __init__(self, pipeline: Pipeline[E] | None = None) -> None:
        self.pipeline: Pipeline[E] = pipeline if pipeline is not None else Pipeline()

    @classmethod
    def for_effects(cls, effects: Effects[E]) -> ExtendedPipeline[E]:
        return cls(Pipeline(effects))

    def __repr__(self) -> str:
        return f"ExtendedPipeline(pipeline={self.pipeline!r})"

    # -- functor --------------------------------------------------------

    def extend(self, model: M) -> Extended[M, Any]:
        """Wrap a model with an empty callback list."""
        return Extended(model=model)

    @pipeable
    def map_e(self, f: Callable[[M], N], ext: Extended[M, C]) -> Extended[N, C]:
        return Extended(model=f(ext.model), callbacks=ext.callbacks)

    def map_e2(self, f: Callable[[Any, Any], N], e1: Extended, e2: Extended) -> Extended[N, Any]:
        return Extended(model=f(e1.model, e2.model), callbacks=e1.callbacks + e2.callbacks)

    def map_e3(self, f: Callable[[Any, Any, Any], N], e1: Extended, e2: Extended, e3: Extended) -> Extended[N, Any]:
        return Extended(
            model=f(e1.model, e2.model, e3.model),
            callbacks=e1.callbacks + e2.callbacks + e3.callbacks,
        )

    # -- lifting plain updates ------------------------------------------

    @pipeable
    def lift(self, f: Callable[[M], Update[N, E]], ext: Extended[M, C]) -> Update[Extended[N, C], E]:
        """Run a plain update on the model, carrying the callbacks through."""
        return self.pipeline.map(lambda model: Extended(model=model, callbacks=ext.callbacks), f(ext.model))

    def lift2(
        self, f: Callable[[Any, Any], Update[N, E]], e1: Extended, e2: Extended
    ) -> Update[Extended[N, Any], E]:
        callbacks = e1.callbacks + e2.callbacks
        return self.pipeline.map(lambda model: Extended(model=model, callbacks=callbacks), f(e1.model, e2.model))

    def lift3(
        self, f: Callable[[Any, Any, Any], Update[N, E]], e1: Extended, e2: Extended, e3: Extended
    ) -> Update[Extended[N, Any], E]:
        callbacks = e1.callbacks + e2.callbacks + e3.callbacks
        return self.pipeline.map(
            lambda model: Extended(model=model, callbacks=callbacks),
            f(e1.model, e2.model, e3.model),
        )

    @pipeable
    def and_lift(
        self, f: Callable[[M], Update[N, E]], update: Update[Extended[M, C], E]
    ) -> Update[Extended[N, C], E]:
        return self.pipeline.and_then(self.lift(f), update)

    # -- callbacks ------------------------------------------------------

    @pipeable
    def call(self, callback: C, ext: Extended[M, C]) -> Update[Extended[M, C], E]:
        """Append a callback for an ancestor to run later."""
        return self.pipeline.unit(Extended(model=ext.model, callbacks=ext.callbacks + (callback,)))

    @pipeable
    def and_call(self, callback: C, update: Update[Extended[M, C], E]) -> Update[Extended[M, C], E]:
        return self.pipeline.and_then(self.call(callback), update)

    def sequence_calls(self, ext: Extended[M, Callable[[M], Update[M, E]]]) -> Update[M, E]:
        """Run every accumulated self-callback against the model, oldest first."""
        if ext.callbacks:
            logger.debug("Running %d callback(s)", len(ext.callbacks))
        return self.pipeline.sequence(ext.callbacks, ext.model)

    # -- stack running --------------------------------------------------

    @pipeable
    def run_stack(
        self,
        getter: Callable[[P], M],
        setter: Callable[[P, M], Update[P, E]],
        to_parent_msg: Callable[[Any], Any],
        stack: Stack,
        parent: P,
    ) -> Update[P, E]:
        """Embed a child update into the parent's update.

        Steps:
            - Extract the child model with ``getter`` and extend it
            - Run the child ``stack`` on it
            - Remap the child's effect with ``to_parent_msg``
            - Write the new child model back with ``setter``
            - Drain the child's callbacks against the parent model

        The resulting effect is batched as (child, setter, callbacks...).
        """
        child = self.pipeline.map_cmd(to_parent_msg, stack(self.extend(getter(parent))))
        logger.debug("Child stack returned %d callback(s)", len(child.model.callbacks))
        return self.pipeline.and_then(
            lambda ext: self.pipeline.and_then(
                lambda model: self.sequence_calls(Extended(model=model, callbacks=ext.callbacks)),
                setter(parent, ext.model),
            ),
            child,
        )

    @pipeable
    def run_stack_e(
        self,
        getter: Callable[[P], M],
        setter: Callable[[P, M], Update[P, E]],
        to_parent_msg: Callable[[Any], Any],
        stack: Stack,
        ext: Extended[P, C],
    ) -> Update[Extended[P, C], E]:
        """``run_stack`` for a parent that is itself an Extended value.

        The parent's own callbacks are carried through untouched.
        """
        return self.lift(self.run_stack(getter, setter, to_parent_msg, stack), ext)
