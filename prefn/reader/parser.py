"""
  Parser for the tree-building engine

- Reads one expression from a source string into `prefn.types.nodes`
- Iterative: operators and definitions waiting for their operands are kept
  on an explicit stack, so deeply nested input does not hit Python's
  recursion limit
- Same character rules as the streaming evaluator: '.' owns one trailing
  character, function bodies are captured raw, argument text drops
  whitespace and keeps nested applications as nodes
"""

from __future__ import annotations

from dataclasses import dataclass, field

from prefn.errors import PrefnSyntaxError
from prefn.evaluation.arithmetic import OPERATORS
from prefn.reader.cursor import Cursor
from prefn.reader.scanner import (
    expect_keyword_tail,
    is_digit,
    next_significant_character,
    read_function_body,
    scan_integer,
)
from prefn.types.nodes import BinOp, FnApply, FnDef, Node, Number, Placeholder


@dataclass
class _Pending:
    """An operator or definition still collecting the expressions that follow it."""
    symbol: str  # operator, or the raw body for a definition
    position: int
    is_definition: bool = False
    operands: list[Node] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return len(self.operands) == (1 if self.is_definition else 2)

    def build(self) -> Node:
        if self.is_definition:
            return FnDef(self.symbol, self.operands[0], self.position)
        return BinOp(self.symbol, *self.operands, position=self.position)


class Parser:
    def __init__(self, source: str, int_width: int | None = None):
        self.cursor = Cursor(source)
        self.int_width = int_width

    def parse_expr(self) -> Node:
        """Parse exactly one expression from the current position."""
        pending: list[_Pending] = []
        while True:
            node = self._parse_step(pending)
            if node is None:
                continue
            while pending:
                frame = pending[-1]
                frame.operands.append(node)
                if not frame.complete:
                    break
                pending.pop()
                node = frame.build()
            else:
                return node

    def _parse_step(self, pending: list[_Pending]) -> Node | None:
        """Consume one token. Returns a finished leaf, or None after pushing a pending frame."""
        cursor = self.cursor
        c = next_significant_character(cursor)
        position = cursor.position - 1

        if c == ".":
            cursor.advance()
            return Placeholder(position)

        if is_digit(c):
            return Number(scan_integer(c, cursor, self.int_width), position)

        if c == "f":
            expect_keyword_tail(cursor, position)
            opener = next_significant_character(cursor)
            if opener == "[":
                pending.append(_Pending(read_function_body(cursor), position, is_definition=True))
                return None
            if opener == "(":
                return self._parse_application(position)
            raise PrefnSyntaxError(
                f"expected '[' or '(' after 'fn', got {opener!r}", cursor.source, cursor.position - 1
            )

        if c in OPERATORS:
            pending.append(_Pending(c, position))
            return None

        raise PrefnSyntaxError(f"unexpected character {c!r}", cursor.source, position)

    def _parse_application(self, position: int) -> FnApply:
        """Parse the argument of `fn(...)`, with 'fn(' already consumed."""
        cursor = self.cursor
        stack: list[tuple[int, list]] = [(position, [])]
        while True:
            c = next_significant_character(cursor)
            if c == ")":
                start, parts = stack.pop()
                node = FnApply(tuple(parts), start)
                if not stack:
                    return node
                stack[-1][1].append(node)
            elif c == "f":
                nested = cursor.position - 1
                expect_keyword_tail(cursor, nested)
                opener = next_significant_character(cursor)
                if opener != "(":
                    raise PrefnSyntaxError(
                        f"expected '(' after 'fn' in argument, got {opener!r}", cursor.source, cursor.position - 1
                    )
                stack.append((nested, []))
            else:
                parts = stack[-1][1]
                if parts and isinstance(parts[-1], str):
                    parts[-1] += c
                else:
                    parts.append(c)


def parse(source: str, int_width: int | None = None) -> Node:
    return Parser(source, int_width).parse_expr()
