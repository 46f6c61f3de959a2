"""Update and Extended values - the pairs every combinator threads through."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from cmdpipe.kernel.functional import pipe

M = TypeVar("M")
E = TypeVar("E")
A = TypeVar("A")


@dataclass(frozen=True)
class Update(Generic[M, E]):
    """
    A model paired with the batched effect produced while computing it.

    Attributes:
        model: The next model
        cmd: Effect descriptor for the step, opaque to the combinators
    """

    model: M
    cmd: E

    @classmethod
    def of(cls, pair: tuple[M, E]) -> Update[M, E]:
        """Build from a plain ``(model, cmd)`` pair."""
        model, cmd = pair
        return cls(model=model, cmd=cmd)

    def as_tuple(self) -> tuple[M, E]:
        return (self.model, self.cmd)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())

    def pipe(self, *fns: Callable[[Any], Any]) -> Any:
        """Thread this value through unary transformers, left to right."""
        return pipe(self, *fns)


@dataclass(frozen=True)
class Extended(Generic[M, A]):
    """
    A model paired with the callbacks accumulated during one update step.

    Callbacks are kept oldest first. Each one is typically a suspended
    update ``Parent -> Update[Parent, E]`` to be run against an ancestor.
    """

    model: M
    callbacks: tuple[A, ...] = ()

    def as_tuple(self) -> tuple[M, tuple[A, ...]]:
        return (self.model, self.callbacks)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())
