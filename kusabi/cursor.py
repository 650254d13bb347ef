from dataclasses import dataclass, field
from typing import NamedTuple


class Position(NamedTuple):
    offset: int
    line: int
    column: int


@dataclass
class Cursor:
    """
    Single-pass reader over a document with one character of lookahead.

    Every parsing routine shares the same cursor; once a character has been
    advanced past it can not be inspected again.
    """

    source: str
    offset: int = 0
    line: int = 1
    column: int = 1

    _length: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._length = len(self.source)

    @property
    def exhausted(self) -> bool:
        return self.offset >= self._length

    @property
    def position(self) -> Position:
        return Position(offset=self.offset, line=self.line, column=self.column)

    @property
    def remaining(self) -> int:
        return max(self._length - self.offset, 0)

    def peek(self) -> str | None:
        if self.exhausted:
            return None
        return self.source[self.offset]

    def advance(self) -> str | None:
        if self.exhausted:
            return None
        c = self.source[self.offset]
        self.offset += 1
        if c == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c
