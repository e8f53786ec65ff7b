"""Forward-only character cursor over a single source string.

The cursor is shared by reference across one evaluation. Once a character is
advanced past it cannot be revisited: `peek` is the only lookahead, and it
never moves the cursor.
"""

from __future__ import annotations


class Cursor:
    __slots__ = ("source", "position")

    def __init__(self, source: str):
        self.source = source
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.source)

    def peek(self) -> str | None:
        if self.position < len(self.source):
            return self.source[self.position]
        return None

    def advance(self) -> str | None:
        """Consume and return the next character, or None at end of input."""
        if self.position < len(self.source):
            c = self.source[self.position]
            self.position += 1
            return c
        return None

    def __iter__(self):
        while (c := self.advance()) is not None:
            yield c

    def __repr__(self):
        return f"Cursor({self.source!r}, position={self.position})"
