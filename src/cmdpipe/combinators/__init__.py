"""Combinators - update pipeline composition primitives.

The functions exported here are bound to a default ``Pipeline`` using the
bundled ``Cmd`` effect. Build your own ``Pipeline(effects)`` to use a
different effect type.
"""

from __future__ import annotations

from cmdpipe.combinators.ops import Pipeline, UpdateFn
from cmdpipe.kernel.effect import CMD

default_pipeline: Pipeline = Pipeline(CMD)

unit = default_pipeline.unit
save = default_pipeline.save
map = default_pipeline.map
ap = default_pipeline.ap
and_map = default_pipeline.and_map
map2 = default_pipeline.map2
map3 = default_pipeline.map3
map4 = default_pipeline.map4
map5 = default_pipeline.map5
map6 = default_pipeline.map6
map7 = default_pipeline.map7
join = default_pipeline.join
and_then = default_pipeline.and_then
kleisli = default_pipeline.kleisli
sequence = default_pipeline.sequence
add_cmd = default_pipeline.add_cmd
map_cmd = default_pipeline.map_cmd
and_add_cmd = default_pipeline.and_add_cmd
with_ = default_pipeline.with_
using = default_pipeline.using
when = default_pipeline.when
and_if = default_pipeline.and_if
and_then_if = default_pipeline.and_then_if
and_with = default_pipeline.and_with
and_using = default_pipeline.and_using

__all__ = [
    "Pipeline",
    "UpdateFn",
    "default_pipeline",
    # Functor / applicative
    "unit",
    "save",
    "map",
    "ap",
    "and_map",
    "map2",
    "map3",
    "map4",
    "map5",
    "map6",
    "map7",
    # Monad
    "join",
    "and_then",
    "kleisli",
    "sequence",
    # Commands
    "add_cmd",
    "map_cmd",
    "and_add_cmd",
    # Pointfree helpers
    "with_",
    "using",
    "when",
    "and_if",
    "and_then_if",
    "and_with",
    "and_using",
]
