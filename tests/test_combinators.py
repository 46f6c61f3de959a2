from __future__ import annotations

from cmdpipe import (
    Cmd,
    Update,
    add_cmd,
    and_add_cmd,
    and_if,
    and_map,
    and_then,
    and_then_if,
    and_using,
    and_with,
    ap,
    curry,
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
    pipe,
    save,
    sequence,
    unit,
    using,
    when,
    with_,
)

from fakes import emit, make_pipeline


def test_unit_carries_no_effect() -> None:
    assert unit(3) == Update(3, Cmd.none())
    assert save(3) == unit(3)


def test_map_touches_model_only() -> None:
    result = map(lambda x: x + 1, Update(41, Cmd.send("keep")))
    assert result == Update(42, Cmd.send("keep"))


def test_map_scenario() -> None:
    assert map(lambda x: x + 1, unit(41)) == Update(42, Cmd.none())


def test_map2_scenario() -> None:
    assert map2(lambda x, y: x + y, unit(5), unit(8)) == Update(13, Cmd.none())


def test_ap_batches_function_effect_first() -> None:
    f = Update(lambda x: x * 2, Cmd.send("f"))
    x = Update(21, Cmd.send("x"))
    assert ap(f, x) == Update(42, Cmd(entries=("f", "x")))


def test_and_map_threads_arguments_in_a_pipe() -> None:
    result = pipe(
        unit(curry(lambda a, b, c: (a, b, c), 3)),
        and_map(Update(1, Cmd.send("a"))),
        and_map(Update(2, Cmd.send("b"))),
        and_map(Update(3, Cmd.send("c"))),
    )
    assert result == Update((1, 2, 3), Cmd(entries=("a", "b", "c")))


def test_map_n_batches_in_argument_order() -> None:
    args = [Update(i, Cmd.send(i)) for i in range(7)]

    assert map3(lambda *xs: xs, *args[:3]) == Update((0, 1, 2), Cmd(entries=(0, 1, 2)))
    assert map4(lambda *xs: sum(xs), *args[:4]) == Update(6, Cmd(entries=(0, 1, 2, 3)))
    assert map5(lambda *xs: xs[-1], *args[:5]).cmd == Cmd(entries=(0, 1, 2, 3, 4))
    assert map6(lambda *xs: len(xs), *args[:6]).model == 6
    assert map7(lambda *xs: xs, *args) == Update(tuple(range(7)), Cmd(entries=tuple(range(7))))


def test_map_n_of_units_is_unit() -> None:
    f = lambda a, b, c, d, e, g, h: a + b + c + d + e + g + h  # noqa: E731
    assert map7(f, *[unit(i) for i in range(7)]) == unit(21)


def test_join_outer_effect_first() -> None:
    nested = Update(Update("m", Cmd.send("inner")), Cmd.send("outer"))
    assert join(nested) == Update("m", Cmd(entries=("outer", "inner")))


def test_and_then_scenario() -> None:
    result = and_then(lambda x: unit(x + 1), and_then(lambda _: unit(7), unit(5)))
    assert result.model == 8


def test_and_then_batches_original_then_new() -> None:
    result = pipe(
        Update(1, Cmd.send("first")),
        and_then(lambda x: Update(x + 1, Cmd.send("second"))),
        and_then(lambda x: Update(x * 3, Cmd.send("third"))),
    )
    assert result == Update(6, Cmd(entries=("first", "second", "third")))


def test_kleisli_runs_right_function_first() -> None:
    f = lambda x: Update(x + 1, Cmd.send("f"))  # noqa: E731
    g = lambda x: Update(x * 2, Cmd.send("g"))  # noqa: E731

    composed = kleisli(f, g)
    assert composed(5) == Update(11, Cmd(entries=("g", "f")))
    assert kleisli(f, g, 5) == composed(5)


def test_sequence_scenario() -> None:
    assert sequence([lambda _: unit(1), lambda _: unit(3)], 5).model == 3


def test_sequence_empty_is_unit() -> None:
    assert sequence([], 5) == unit(5)


def test_sequence_applies_in_order_and_batches_effects() -> None:
    fns = [
        lambda m: Update(m + ["a"], Cmd.send(1)),
        lambda m: Update(m + ["b"], Cmd.send(2)),
        lambda m: Update(m + ["c"], Cmd.send(3)),
    ]
    assert sequence(fns, []) == Update(["a", "b", "c"], Cmd(entries=(1, 2, 3)))
    assert sequence(fns)([]) == sequence(fns, [])


def test_add_cmd_and_and_add_cmd() -> None:
    assert add_cmd(Cmd.send("x"), 1) == Update(1, Cmd.send("x"))
    result = pipe(unit(1), and_add_cmd(Cmd.send("a")), and_add_cmd(Cmd.send("b")))
    assert result == Update(1, Cmd(entries=("a", "b")))


def test_map_cmd_remaps_effect_only() -> None:
    result = map_cmd(lambda m: ("Child", m), Update("model", Cmd.batch([Cmd.send(1), Cmd.send(2)])))
    assert result == Update("model", Cmd(entries=(("Child", 1), ("Child", 2))))


def test_with_passes_projection_and_model() -> None:
    handler = lambda count, model: unit({**model, "double": count * 2})  # noqa: E731
    step = with_(lambda model: model["count"], handler)

    assert step({"count": 4}) == unit({"count": 4, "double": 8})
    assert and_with(lambda m: m["count"], handler, unit({"count": 1})).model["double"] == 2


def test_using_passes_model_twice() -> None:
    assert using(lambda a, b: unit(a + b), 4) == unit(8)
    assert pipe(unit(4), and_using(lambda a, b: unit(a * b))) == unit(16)


def test_when() -> None:
    f = lambda x: Update(x + 1, Cmd.send("ran"))  # noqa: E731
    assert when(True, f)(1) == f(1)
    assert when(False, f)(1) == unit(1)
    assert when(False, f, 1).cmd == Cmd.none()


def test_and_if_skips_when_false() -> None:
    result = pipe(
        unit(0),
        and_if(True, lambda x: Update(x + 1, Cmd.send("yes"))),
        and_then_if(False, lambda x: Update(x + 100, Cmd.send("no"))),
    )
    assert result == Update(1, Cmd.send("yes"))


def test_custom_effects_are_never_inspected() -> None:
    pipeline, effects = make_pipeline()
    result = pipeline.and_then(emit("b", "c"), pipeline.add_cmd(("a",), 0))

    assert result.model == 0
    assert result.cmd == ("a", "b", "c")
    assert effects.batches[-1] == (("a",), ("b", "c"))


def test_custom_effects_map_cmd() -> None:
    pipeline, _ = make_pipeline()
    assert pipeline.map_cmd(str.upper, pipeline.add_cmd(("x", "y"), 1)) == Update(1, ("X", "Y"))
    assert pipeline.unit(1) == Update(1, ())


def test_combinators_are_deterministic() -> None:
    def build() -> Update:
        return pipe(unit(2), and_then(lambda x: Update(x * 2, Cmd.send(x))), and_add_cmd(Cmd.send("done")))

    assert build() == build()
