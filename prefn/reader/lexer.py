"""
  Pre-tokenizing lexer

- Splits a whole source string into (token_type, token_value) tuples
- Purely lexical: nothing is evaluated, function bodies are tokenized like
  any other text
- Used for inspection (`prefn --tokens`); the evaluators read characters
  directly and never go through this token list

    fn[+ . .] fn(1)  ->  function lbracket plus dot dot rbracket
                         function lparen number rparen
"""

from __future__ import annotations

from typing import Iterator

from prefn.errors import PrefnEndOfInput, PrefnSyntaxError
from prefn.reader.cursor import Cursor
from prefn.reader.scanner import is_digit, next_significant_character, scan_integer

PUNCTUATION: dict[str, str] = {
    "+": "plus",
    "-": "minus",
    "*": "asterisk",
    "/": "slash",
    "[": "lbracket",
    "]": "rbracket",
    "(": "lparen",
    ")": "rparen",
    ".": "dot",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    cursor = Cursor(source)
    while True:
        try:
            c = next_significant_character(cursor)
        except PrefnEndOfInput:
            return
        start = cursor.position - 1

        if c in PUNCTUATION:
            yield PUNCTUATION[c], c
        elif is_digit(c):
            scan_integer(c, cursor)
            yield "number", source[start:cursor.position]
        elif c == "f" and cursor.peek() == "n":
            cursor.advance()
            yield "function", "fn"
        else:
            raise PrefnSyntaxError(f"unexpected character {c!r}", source, start)


def token_kinds(source: str) -> list[str]:
    return [kind for kind, _ in lex(source)]
