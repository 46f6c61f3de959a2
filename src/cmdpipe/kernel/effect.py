"""Effect capability interface and the bundled command type.

The combinators never look inside an effect. They only need the three
capabilities described by ``Effects``: an identity, an order-preserving
batch, and a remapping of the message type an effect will produce.
``Cmd`` is a default implementation for hosts that have none of their own.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from cmdpipe.kernel.functional import identity

E = TypeVar("E")


class Effects(Protocol[E]):
    """Capabilities an effect type must supply."""

    def none(self) -> E:
        """Identity effect - nothing to do."""
        ...

    def batch(self, cmds: Sequence[E]) -> E:
        """Combine effects, preserving order. ``batch([])`` is ``none()``."""
        ...

    def map(self, f: Callable[[Any], Any], cmd: E) -> E:
        """Remap the messages ``cmd`` will eventually produce."""
        ...


@dataclass(frozen=True)
class Task:
    """
    Description of work for the host runtime to perform.

    The runtime executes the task identified by ``name`` with ``payload``
    and dispatches ``to_msg(result)`` back into the update loop.
    """

    name: str
    payload: Any = None
    to_msg: Callable[[Any], Any] = field(default=identity, compare=False)

    def map(self, f: Callable[[Any], Any]) -> Task:
        to_msg = self.to_msg
        return Task(name=self.name, payload=self.payload, to_msg=lambda result: f(to_msg(result)))


@dataclass(frozen=True)
class Cmd:
    """
    Ordered batch of effect entries.

    An entry is either a message to dispatch as-is or a ``Task``.
    """

    entries: tuple[Any, ...] = ()

    @staticmethod
    def none() -> Cmd:
        return Cmd()

    @staticmethod
    def send(msg: Any) -> Cmd:
        return Cmd(entries=(msg,))

    @staticmethod
    def perform(task: Task) -> Cmd:
        return Cmd(entries=(task,))

    @staticmethod
    def batch(cmds: Sequence[Cmd]) -> Cmd:
        return Cmd(entries=tuple(itertools.chain.from_iterable(c.entries for c in cmds)))

    def map(self, f: Callable[[Any], Any]) -> Cmd:
        return Cmd(entries=tuple(e.map(f) if isinstance(e, Task) else f(e) for e in self.entries))

    def is_none(self) -> bool:
        return not self.entries


class CmdEffects:
    """``Effects`` implementation for ``Cmd``."""

    def none(self) -> Cmd:
        return Cmd.none()

    def batch(self, cmds: Sequence[Cmd]) -> Cmd:
        return Cmd.batch(cmds)

    def map(self, f: Callable[[Any], Any], cmd: Cmd) -> Cmd:
        return cmd.map(f)

    def __repr__(self) -> str:
        return "CmdEffects()"


CMD: Effects[Cmd] = CmdEffects()
