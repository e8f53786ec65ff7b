"""Binary operators of the prefix language.

Integer division truncates toward zero, matching fixed-width machine integers
rather than Python's floor division. When an `int_width` is given, results
wrap to that many bits in two's complement; overflow is never reported.
"""

from __future__ import annotations

from typing import Callable

from prefn import Value
from prefn.errors import PrefnArithmeticError

OPERATORS = "+-*/"


def wrap(value: Value, int_width: int | None) -> Value:
    if not int_width:
        return value
    modulus = 1 << int_width
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def _truncating_div(x: Value, y: Value) -> Value:
    quotient = abs(x) // abs(y)
    return -quotient if (x < 0) != (y < 0) else quotient


_TABLE: dict[str, Callable[[Value, Value], Value]] = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": _truncating_div,
}


def apply_operator(
    symbol: str,
    x: Value,
    y: Value,
    int_width: int | None = None,
    source: str = "",
    position: int | None = None,
) -> Value:
    """Combine two evaluated operands. `source`/`position` locate the operator for errors."""
    if symbol == "/" and y == 0:
        raise PrefnArithmeticError("division by zero", source, position)
    return wrap(_TABLE[symbol](x, y), int_width)
