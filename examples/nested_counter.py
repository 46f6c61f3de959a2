"""Nested counter - a child component that reports back to its parent.

The child counts clicks. Every third click it calls the ``on_milestone``
callback its parent handed down, and the parent records the milestone and
asks the runtime to save.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from cmdpipe import Cmd, Extended, Update, and_add_cmd, pipe, unit
from cmdpipe.extended import and_call, lift, run_stack


@dataclass(frozen=True)
class Counter:
    clicks: int = 0


@dataclass(frozen=True)
class App:
    counter: Counter = Counter()
    milestones: tuple[int, ...] = ()


@dataclass(frozen=True)
class Click:
    pass


@dataclass(frozen=True)
class CounterMsg:
    inner: Any


def counter_update(msg: Any, on_milestone: Any, ext: Extended[Counter, Any]) -> Update[Extended[Counter, Any], Cmd]:
    if not isinstance(msg, Click):
        return unit(ext)

    def bump(counter: Counter) -> Update[Counter, Cmd]:
        return pipe(
            unit(replace(counter, clicks=counter.clicks + 1)),
            and_add_cmd(Cmd.send("tick")),
        )

    bumped = lift(bump, ext)
    clicks = bumped.model.model.clicks
    if clicks % 3 == 0:
        return and_call(on_milestone(clicks), bumped)
    return bumped


def record_milestone(clicks: int) -> Any:
    def apply(app: App) -> Update[App, Cmd]:
        return Update(replace(app, milestones=app.milestones + (clicks,)), Cmd.send("save"))

    return apply


def update(msg: Any, app: App) -> Update[App, Cmd]:
    if isinstance(msg, CounterMsg):
        return run_stack(
            lambda a: a.counter,
            lambda a, counter: unit(replace(a, counter=counter)),
            CounterMsg,
            lambda ext: counter_update(msg.inner, record_milestone, ext),
            app,
        )
    return unit(app)


def main() -> App:
    app = App()
    cmds: list[Any] = []
    for _ in range(6):
        app, cmd = update(CounterMsg(Click()), app)
        cmds.extend(cmd.entries)
    print(f"clicks={app.counter.clicks} milestones={app.milestones} commands={len(cmds)}")
    return app


if __name__ == "__main__":
    main()
