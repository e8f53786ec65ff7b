"""Append-only store of function bodies for one top-level evaluation.

Every definition appends its raw body text. Application always reads the
first body ever defined; later entries are kept but never applied.
"""

from __future__ import annotations

from typing import Iterator

from prefn import Body
from prefn.errors import PrefnUnboundFunction


class FunctionStore:
    __slots__ = ("bodies",)

    def __init__(self):
        self.bodies: list[Body] = []

    def define(self, body: Body) -> None:
        self.bodies.append(body)

    def first(self) -> Body:
        """Body used by every application. Raises PrefnUnboundFunction if nothing is defined."""
        if not self.bodies:
            raise PrefnUnboundFunction("function applied before any definition")
        return self.bodies[0]

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    def __repr__(self):
        return f"FunctionStore({self.bodies!r})"
