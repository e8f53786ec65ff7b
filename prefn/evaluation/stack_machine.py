"""Iterative evaluator over the expression tree.

Evaluation is driven by an explicit work stack of (step, node, argument,
source) entries and a value stack of ints, so neither operator nesting nor
nested applications consume Python stack frames. Steps are pushed in
reverse so that left operands, and any definitions inside them, finish
before right operands begin.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Callable

from prefn import Value
from prefn.evaluation.arithmetic import apply_operator
from prefn.evaluation.evaluator import read_argument
from prefn.reader.parser import Parser
from prefn.types.function_store import FunctionStore
from prefn.types.nodes import BinOp, FnApply, FnDef, Node, Number, Placeholder

logger = logging.getLogger(__name__)


class Step(IntEnum):
    EVAL = 0x00
    COMBINE = 0x01  # pop y, pop x, push x op y
    DEFINE = 0x02   # append a body to the store
    APPLY = 0x03    # pop nested results, read argument, evaluate first body


WorkItem = tuple[Step, Any, Value, str]


class StackMachine:
    def __init__(self, store: FunctionStore, int_width: int | None = None):
        self.store = store
        self.int_width = int_width
        self.work: list[WorkItem] = []
        self.values: list[Value] = []
        self._dispatch: dict[Step, Callable[[Any, Value, str], None]] = {
            Step.EVAL: self.op_eval,
            Step.COMBINE: self.op_combine,
            Step.DEFINE: self.op_define,
            Step.APPLY: self.op_apply,
        }

    def run(self, node: Node, argument: Value = 0, source: str = "") -> Value:
        self.work.append((Step.EVAL, node, argument, source))
        while self.work:
            step, item, arg, src = self.work.pop()
            self._dispatch[step](item, arg, src)
        return self.values.pop()

    # --- Per-step handlers ---
    def op_eval(self, node: Node, argument: Value, source: str) -> None:
        push = self.work.append
        match node:
            case Number(value=value):
                self.values.append(value)
            case Placeholder():
                self.values.append(argument)
            case BinOp(left=left, right=right):
                push((Step.COMBINE, node, argument, source))
                push((Step.EVAL, right, argument, source))
                push((Step.EVAL, left, argument, source))
            case FnDef(then=then):
                push((Step.EVAL, then, argument, source))
                push((Step.DEFINE, node, argument, source))
            case FnApply(parts=parts):
                push((Step.APPLY, node, argument, source))
                for part in reversed(parts):
                    if isinstance(part, FnApply):
                        push((Step.EVAL, part, argument, source))
            case _:
                raise TypeError(f"not an expression node: {node!r}")

    def op_combine(self, node: BinOp, argument: Value, source: str) -> None:
        y = self.values.pop()
        x = self.values.pop()
        self.values.append(apply_operator(node.symbol, x, y, self.int_width, source, node.position))

    def op_define(self, node: FnDef, argument: Value, source: str) -> None:
        self.store.define(node.body)
        logger.debug("defined function #%d: [%s]", len(self.store), node.body)

    def op_apply(self, node: FnApply, argument: Value, source: str) -> None:
        nested = sum(1 for part in node.parts if isinstance(part, FnApply))
        results = iter(self.values[len(self.values) - nested:])
        del self.values[len(self.values) - nested:]
        text = "".join(part if isinstance(part, str) else str(next(results)) for part in node.parts)

        value = read_argument(text, source, node.position, self.int_width)
        body = self.store.first()
        logger.debug("applying [%s] to %d", body, value)
        # No parse caching: the body is read again on every application.
        tree = Parser(body, self.int_width).parse_expr()
        self.work.append((Step.EVAL, tree, value, body))


def run_tree(node: Node, store: FunctionStore, argument: Value = 0, int_width: int | None = None, source: str = "") -> Value:
    return StackMachine(store, int_width).run(node, argument, source)
