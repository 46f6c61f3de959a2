import pytest

from cmdpipe import ArityError, Cmd, Extended, Task, Update, curry, pipe
from cmdpipe.kernel import CMD


def test_update_unpacks_as_pair() -> None:
    model, cmd = Update(1, Cmd.send("a"))
    assert model == 1
    assert cmd == Cmd.send("a")
    assert Update.of((1, Cmd.none())) == Update(1, Cmd())


def test_update_pipe_threads_left_to_right() -> None:
    result = Update(1, Cmd.none()).pipe(lambda u: u.model + 1, lambda x: x * 10)
    assert result == 20


def test_extended_defaults_to_no_callbacks() -> None:
    ext = Extended("m")
    assert ext.callbacks == ()
    assert ext.as_tuple() == ("m", ())


def test_cmd_batch_is_ordered_and_flattens() -> None:
    a, b, c = Cmd.send(1), Cmd.send(2), Cmd.send(3)
    assert Cmd.batch([a, Cmd.batch([b, c])]) == Cmd(entries=(1, 2, 3))
    assert Cmd.batch([Cmd.batch([a, b]), c]) == Cmd.batch([a, Cmd.batch([b, c])])


def test_cmd_batch_identity() -> None:
    assert Cmd.batch([]) == Cmd.none()
    assert Cmd.batch([Cmd.none()]) == Cmd.none()
    assert Cmd.batch([Cmd.none(), Cmd.send("x"), Cmd.none()]) == Cmd.send("x")
    assert Cmd.none().is_none()


def test_cmd_map_remaps_messages_and_tasks() -> None:
    task = Task("http.get", payload="/users")
    cmd = CMD.map(lambda m: ("wrapped", m), Cmd.batch([Cmd.send("a"), Cmd.perform(task)]))

    assert cmd.entries[0] == ("wrapped", "a")
    mapped_task = cmd.entries[1]
    assert isinstance(mapped_task, Task)
    assert mapped_task.name == "http.get"
    assert mapped_task.payload == "/users"
    assert mapped_task.to_msg({"id": 1}) == ("wrapped", {"id": 1})


def test_task_map_composes_in_order() -> None:
    task = Task("t", to_msg=lambda r: r + 1).map(lambda m: m * 10).map(str)
    assert task.to_msg(1) == "20"


def test_curry() -> None:
    assert curry(lambda a, b, c: a + b + c, 3)(1)(2)(3) == 6
    with pytest.raises(ValueError):
        curry(lambda: None, 0)


def test_pipe_with_no_functions_is_identity() -> None:
    assert pipe(5) == 5


def test_arity_error_reports_caller_counts() -> None:
    from cmdpipe import and_then

    with pytest.raises(ArityError) as info:
        and_then()
    assert info.value.name == "and_then"
    assert info.value.expected == 2
    assert info.value.received == 0
    assert isinstance(info.value, TypeError)


def test_arity_error_on_too_many_arguments() -> None:
    from cmdpipe import map

    with pytest.raises(ArityError):
        map(lambda x: x, Update(1, Cmd()), "extra")
