"""Extended - callback propagation between nested update functions."""

from __future__ import annotations

from cmdpipe.combinators import default_pipeline
from cmdpipe.extended.ops import ExtendedPipeline, Stack

default_extended: ExtendedPipeline = ExtendedPipeline(default_pipeline)

extend = default_extended.extend
map_e = default_extended.map_e
map_e2 = default_extended.map_e2
map_e3 = default_extended.map_e3
lift = default_extended.lift
lift2 = default_extended.lift2
lift3 = default_extended.lift3
and_lift = default_extended.and_lift
call = default_extended.call
and_call = default_extended.and_call
sequence_calls = default_extended.sequence_calls
run_stack = default_extended.run_stack
run_stack_e = default_extended.run_stack_e

__all__ = [
    "ExtendedPipeline",
    "Stack",
    "default_extended",
    "extend",
    "map_e",
    "map_e2",
    "map_e3",
    "lift",
    "lift2",
    "lift3",
    "and_lift",
    "call",
    "and_call",
    "sequence_calls",
    "run_stack",
    "run_stack_e",
]
