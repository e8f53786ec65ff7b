from __future__ import annotations
from typing import Protocol

from prefn import Value
from prefn.types.function_store import FunctionStore


class Backend(Protocol):
    def eval(self, source: str, store: FunctionStore, int_width: int | None = None) -> Value: ...
