from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .buffer import EdBuffer
from .errors import AddressOutOfRangeError


def _checked(buffer: EdBuffer, line: int) -> int:
    """Return `line` if it is addressable in `buffer`.

    -1 is allowed: it's the start-of-file line ("line 0" to the user).
    """
    if not -1 <= line <= buffer.last_line:
        raise AddressOutOfRangeError(line, buffer.line_count)
    return line


@dataclass(frozen=True)
class _Adjusted:
    offset: int = field(default=0, kw_only=True)
    move: bool = field(default=False, kw_only=True)

    def requires_cursor_move(self) -> bool:
        """Should the cursor go to this address before the next is resolved?"""
        return self.move


@dataclass(frozen=True)
class LineNumber(_Adjusted):
    """An absolute zero-based line, or -1 for the start of the file."""

    line: int

    def resolve(self, buffer: EdBuffer, last_zero: bool) -> int:
        return _checked(buffer, self.line + self.offset)


@dataclass(frozen=True)
class CurrentLine(_Adjusted):
    """The cursor line, also used for bare offsets like "+3"."""

    def resolve(self, buffer: EdBuffer, last_zero: bool) -> int:
        return _checked(buffer, buffer.cursor_line + self.offset)


@dataclass(frozen=True)
class LastLine(_Adjusted):
    def resolve(self, buffer: EdBuffer, last_zero: bool) -> int:
        return _checked(buffer, buffer.last_line + self.offset)


@dataclass(frozen=True)
class Mark(_Adjusted):
    name: str

    def resolve(self, buffer: EdBuffer, last_zero: bool) -> int:
        return _checked(buffer, buffer.mark_line(self.name) + self.offset)


@dataclass(frozen=True)
class Pattern(_Adjusted):
    """The next line matching a regex, searching from the cursor line.

    Forward searches start on the line after the cursor, backward searches on
    the line before it. After a start-of-file address, a forward search
    starts on the first line and a backward search on the last line.
    """

    regex: str
    backward: bool = False

    def resolve(self, buffer: EdBuffer, last_zero: bool) -> int:
        if last_zero:
            start = buffer.last_line if self.backward else 0
        elif self.backward:
            start = buffer.cursor_line - 1
        else:
            start = buffer.cursor_line + 1
        found = buffer.search(self.regex, start, backward=self.backward)
        return _checked(buffer, found + self.offset)


Address = Union[LineNumber, CurrentLine, LastLine, Mark, Pattern]


def whole_file() -> list[Address]:
    """The addresses that "%" stands for: from the first line to the last."""
    return [LineNumber(0), LastLine()]
