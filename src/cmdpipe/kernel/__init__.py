"""Kernel layer - pure data types and helpers for cmdpipe."""

from cmdpipe.kernel.effect import CMD, Cmd, CmdEffects, Effects, Task
from cmdpipe.kernel.errors import ArityError
from cmdpipe.kernel.functional import curry, identity, pipe, pipeable
from cmdpipe.kernel.update import Extended, Update

__all__ = [
    "Update",
    "Extended",
    # Effects
    "Effects",
    "Cmd",
    "CmdEffects",
    "Task",
    "CMD",
    # Helpers
    "pipe",
    "curry",
    "identity",
    "pipeable",
    # Errors
    "ArityError",
]
