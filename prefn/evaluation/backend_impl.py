from __future__ import annotations

from prefn import Value
from prefn.evaluation.evaluator import evaluate
from prefn.evaluation.stack_machine import StackMachine
from prefn.reader.cursor import Cursor
from prefn.reader.parser import Parser
from prefn.types.function_store import FunctionStore


class StreamBackend:
    """Fused scan-and-evaluate over the raw characters, seeded with argument 0."""
    name = "stream"

    def eval(self, source: str, store: FunctionStore, int_width: int | None = None) -> Value:
        return evaluate(Cursor(source), 0, store, int_width)


class TreeBackend:
    """
    Parses the whole expression into a tree first, then runs it on the stack machine.
    Syntax and end-of-input errors surface before any evaluation happens.
    """
    name = "tree"

    def eval(self, source: str, store: FunctionStore, int_width: int | None = None) -> Value:
        tree = Parser(source, int_width).parse_expr()
        return StackMachine(store, int_width).run(tree, 0, source)


BACKENDS = {
    StreamBackend.name: StreamBackend,
    TreeBackend.name: TreeBackend,
}
