"""Expression tree produced by `prefn.reader.parser`.

Tagged variants mirror the grammar one to one:

    Number       digit+
    Placeholder  '.'
    BinOp        op Expr Expr
    FnDef        'fn' '[' raw ']' Expr   (the definition, then the expression after it)
    FnApply      'fn' '(' parts ')'

`FnApply.parts` keeps digit runs as strings and nested applications as
nodes; evaluation splices each nested result in as decimal text before the
whole argument is read as one integer. Function bodies stay raw text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from prefn import Body, Value


@dataclass(frozen=True)
class Number:
    value: Value
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Placeholder:
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BinOp:
    symbol: str
    left: Node
    right: Node
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class FnDef:
    body: Body
    then: Node
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class FnApply:
    parts: tuple[Union[str, FnApply], ...]
    position: int = field(default=0, compare=False)


Node = Union[Number, Placeholder, BinOp, FnDef, FnApply]


def to_source(node: Node) -> str:
    """Render a tree back to prefix source text."""
    match node:
        case Number(value=value):
            return str(value)
        case Placeholder():
            return "."
        case BinOp(symbol=symbol, left=left, right=right):
            return f"{symbol} {to_source(left)} {to_source(right)}"
        case FnDef(body=body, then=then):
            return f"fn[{body}] {to_source(then)}"
        case FnApply(parts=parts):
            inner = "".join(p if isinstance(p, str) else to_source(p) for p in parts)
            return f"fn({inner})"
    raise TypeError(f"not an expression node: {node!r}")
