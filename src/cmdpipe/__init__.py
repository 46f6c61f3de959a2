from .combinators import (
    Pipeline,
    add_cmd,
    and_add_cmd,
    and_if,
    and_map,
    and_then,
    and_then_if,
    and_using,
    and_with,
    ap,
    join,
    kleisli,
    map,
    map2,
    map3,
    map4,
    map5,
    map6,
    map7,
    map_cmd,
    save,
    sequence,
    unit,
    using,
    when,
    with_,
)
from .extended import (
    ExtendedPipeline,
    and_call,
    and_lift,
    call,
    extend,
    lift,
    lift2,
    lift3,
    map_e,
    map_e2,
    map_e3,
    run_stack,
    run_stack_e,
    sequence_calls,
)
from .kernel import CMD, ArityError, Cmd, Effects, Extended, Task, Update, curry, pipe

__all__ = [
    # Core
    "Update",
    "Extended",
    "Effects",
    "Cmd",
    "Task",
    "CMD",
    "ArityError",
    # Helpers
    "pipe",
    "curry",
    # Pipeline core
    "Pipeline",
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
    "join",
    "and_then",
    "kleisli",
    "sequence",
    "add_cmd",
    "map_cmd",
    "and_add_cmd",
    "with_",
    "using",
    "when",
    "and_if",
    "and_then_if",
    "and_with",
    "and_using",
    # Callback extension
    "ExtendedPipeline",
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
