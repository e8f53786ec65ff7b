"""Fused scanner/parser/evaluator for prefix expressions.

There is no intermediate tree: `evaluate` pulls characters from the cursor,
branches on the first significant one and recurses once per sub-expression.
Recursion depth equals expression nesting depth.

Functions take a single argument. A definition `fn[...]` stores its raw body
text; an application `fn(...)` re-reads the first stored body from scratch
with the argument bound to every `.` in it.
"""

from __future__ import annotations

import logging

from prefn import Body, Value
from prefn.errors import PrefnSyntaxError
from prefn.evaluation.arithmetic import OPERATORS, apply_operator
from prefn.reader.cursor import Cursor
from prefn.reader.scanner import (
    expect_keyword_tail,
    is_digit,
    next_significant_character,
    read_function_body,
    scan_integer,
)
from prefn.types.function_store import FunctionStore

logger = logging.getLogger(__name__)


def evaluate(
    cursor: Cursor, argument: Value, store: FunctionStore, int_width: int | None = None
) -> Value:
    """Consume exactly one expression from the front of `cursor` and return its value."""
    while True:
        c = next_significant_character(cursor)
        position = cursor.position - 1

        if c == ".":
            cursor.advance()  # the placeholder owns one trailing delimiter
            return argument

        if is_digit(c):
            return scan_integer(c, cursor, int_width)

        if c == "f":
            expect_keyword_tail(cursor, position)
            opener = next_significant_character(cursor)
            if opener == "[":
                fn_define(cursor, store)
                continue  # a definition is followed by the expression that gives the value
            if opener == "(":
                return fn_apply(cursor, store, int_width, position)
            raise PrefnSyntaxError(
                f"expected '[' or '(' after 'fn', got {opener!r}", cursor.source, cursor.position - 1
            )

        if c in OPERATORS:
            x = evaluate(cursor, argument, store, int_width)
            y = evaluate(cursor, argument, store, int_width)
            return apply_operator(c, x, y, int_width, cursor.source, position)

        raise PrefnSyntaxError(f"unexpected character {c!r}", cursor.source, position)


def fn_define(cursor: Cursor, store: FunctionStore) -> Body:
    """Store the raw text of `fn[...]`, with 'fn[' already consumed. The body is not interpreted here."""
    body = read_function_body(cursor)
    store.define(body)
    logger.debug("defined function #%d: [%s]", len(store), body)
    return body


def fn_apply(cursor: Cursor, store: FunctionStore, int_width: int | None, position: int) -> Value:
    """Evaluate `fn(...)`, with 'fn(' already consumed.

    The argument text is collected up to the matching ')'. Nested `fn(...)`
    forms are applied first and their results spliced in as decimal text,
    so `fn(fn(2))` resolves the inner call before the outer one.
    """
    buffer: list[str] = []
    while True:
        c = next_significant_character(cursor)
        if c == ")":
            break
        if c == "f":
            nested = cursor.position - 1
            expect_keyword_tail(cursor, nested)
            opener = next_significant_character(cursor)
            if opener != "(":
                raise PrefnSyntaxError(
                    f"expected '(' after 'fn' in argument, got {opener!r}", cursor.source, cursor.position - 1
                )
            buffer.append(str(fn_apply(cursor, store, int_width, nested)))
        else:
            buffer.append(c)

    return call_function(
        store, read_argument("".join(buffer), cursor.source, position, int_width), int_width
    )


def read_argument(text: str, source: str = "", position: int | None = None, int_width: int | None = None) -> Value:
    """Read a completed argument buffer as a single integer literal."""
    if not text:
        raise PrefnSyntaxError("function applied without an argument", source, position)
    if not all(map(is_digit, text)):
        raise PrefnSyntaxError(f"argument {text!r} is not an integer", source, position)
    arg_cursor = Cursor(text)
    return scan_integer(arg_cursor.advance(), arg_cursor, int_width)


def call_function(store: FunctionStore, argument: Value, int_width: int | None = None) -> Value:
    """Re-read the first stored body as a fresh expression with `argument` bound to '.'."""
    body = store.first()
    logger.debug("applying [%s] to %d", body, argument)
    return evaluate(Cursor(body), argument, store, int_width)
