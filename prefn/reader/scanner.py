"""Character-level scanning shared by the evaluator, lexer and parser.

There is no token list: callers ask for the next significant character and
branch on it, and numbers are folded digit by digit straight off the cursor.
"""

from __future__ import annotations

from prefn import Body, Value
from prefn.errors import PrefnEndOfInput, PrefnSyntaxError
from prefn.evaluation.arithmetic import wrap
from prefn.reader.cursor import Cursor


def next_significant_character(cursor: Cursor) -> str:
    """Skip whitespace and return the first non-whitespace character.

    e.g. "  \t a" -> 'a'
    """
    for c in cursor:
        if not c.isspace():
            return c
    raise PrefnEndOfInput("unexpected end of input", cursor.source, cursor.position)


def is_digit(c: str | None) -> bool:
    return c is not None and "0" <= c <= "9"


def scan_integer(first_digit: str, cursor: Cursor, int_width: int | None = None) -> Value:
    """Fold `first_digit` and the digits that follow it into an integer.

    e.g. '1' + "00 ..." -> 100, leaving the cursor on the space.
    Stops at the first non-digit without consuming it.
    """
    if not is_digit(first_digit):
        raise PrefnSyntaxError(
            f"expected a digit, got {first_digit!r}", cursor.source, max(cursor.position - 1, 0)
        )
    value = ord(first_digit) - ord("0")
    while is_digit(cursor.peek()):
        value = wrap(10 * value + ord(cursor.advance()) - ord("0"), int_width)
    return wrap(value, int_width)


def expect_keyword_tail(cursor: Cursor, position: int) -> None:
    """The function keyword is 'f' followed by 'n'; 'f' has already been consumed."""
    c = next_significant_character(cursor)
    if c != "n":
        raise PrefnSyntaxError(f"expected 'fn', got 'f{c}'", cursor.source, position)


def read_function_body(cursor: Cursor) -> Body:
    """Read raw characters up to the next ']', with 'fn[' already consumed.

    Brackets are not counted, so a body cannot itself contain ']'.
    """
    start = cursor.position
    chars = []
    while (c := cursor.advance()) != "]":
        if c is None:
            raise PrefnEndOfInput("unterminated function body, expected ']'", cursor.source, start)
        chars.append(c)
    return "".join(chars)
