"""Error types for the curried call convention."""

from __future__ import annotations


class ArityError(TypeError):
    """Raised when a combinator receives neither its full argument list
    nor its full list minus the trailing value.
    """

    def __init__(self, name: str, expected: int, received: int) -> None:
        self.name = name
        self.expected = expected
        self.received = received
        super().__init__(
            f"{name}() takes {expected} argument(s), or {expected - 1} to build "
            f"a transformer, but {received} were given"
        )

    def __repr__(self) -> str:
        return f"ArityError(name={self.name!r}, expected={self.expected}, received={self.received})"
