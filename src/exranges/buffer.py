from __future__ import annotations

import itertools
import logging
import re
from typing import TYPE_CHECKING

from .errors import InvalidPatternError, MarkNotSetError, PatternNotFoundError

if TYPE_CHECKING:
    from .ranges import TextRange

logger = logging.getLogger(__name__)


class EdBuffer:
    """A string-like buffer with a cursor and marks, addressed by line.

    Lines are zero-based. The buffer always has at least one line, even when
    the text is empty.
    """

    def __init__(
        self,
        text: str,
        lines: list[str] | None = None,
        *,
        cursor_line: int = 0,
        wrapscan: bool = True,
    ) -> None:
        self._text = text
        if lines is not None:
            self._lines = lines
        else:
            self._lines = text.splitlines(keepends=True)
        self._starts = [0, *itertools.accumulate(len(line) for line in self._lines)]
        self.wrapscan = wrapscan
        self.marks: dict[str, int] = {}
        self.cursor_line = 0
        self.move_cursor(cursor_line)

    @classmethod
    def from_lines(cls, lines: list[str], **kwargs) -> EdBuffer:
        return cls("".join(lines), lines=lines, **kwargs)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        shown = self._text
        if len(shown) > 40:
            shown = shown[:37] + "..."
        return f"EdBuffer({shown!r}, {len(self._lines)} lines)"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EdBuffer):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __len__(self) -> int:
        return len(self._text)

    @property
    def file_size(self) -> int:
        return len(self._text)

    @property
    def line_count(self) -> int:
        return max(len(self._lines), 1)

    @property
    def last_line(self) -> int:
        return self.line_count - 1

    def line_start_offset(self, line: int) -> int:
        """Return the offset of the first character of `line`.

        Lines before the start map to 0, lines past the end to the file size.
        """
        if line < 0:
            return 0
        if line >= len(self._lines):
            return self.file_size
        return self._starts[line]

    def line_end_offset(self, line: int, allow_end: bool = True) -> int:
        """Return the offset where the content of `line` ends.

        With `allow_end`, that's the position of the line terminator (or the
        end of the text for an unterminated last line). Without it, it's the
        offset of the last character of the line. Past the last line, the
        end of the file (or its last character without `allow_end`).
        """
        if line < 0:
            return 0
        if line >= len(self._lines):
            if allow_end:
                return self.file_size
            return max(self.file_size - 1, 0)
        start = self._starts[line]
        end = start + len(self._lines[line].rstrip("\r\n"))
        if not allow_end and end > start:
            end -= 1
        return end

    def text_of(self, text_range: TextRange) -> str:
        return self._text[text_range.start : text_range.end]

    def move_cursor(self, line: int) -> None:
        """Put the cursor on `line`, clamped to the lines of the buffer."""
        self.cursor_line = min(max(line, 0), self.last_line)
        logger.debug("cursor moved to line %d (asked for %d)", self.cursor_line, line)

    def set_mark(self, name: str, line: int) -> None:
        self.marks[name] = line

    def mark_line(self, name: str) -> int:
        try:
            return self.marks[name]
        except KeyError:
            raise MarkNotSetError(name) from None

    def search(self, regex: str, start_line: int, backward: bool = False) -> int:
        """Return the first line matching `regex`, scanning from `start_line`.

        `start_line` itself is checked first. The scan wraps around the end
        (or start) of the buffer once if `wrapscan` is on.
        """
        try:
            pattern = re.compile(regex)
        except re.error as err:
            raise InvalidPatternError(regex, str(err)) from err
        n = len(self._lines)
        if backward:
            order = range(min(start_line, n - 1), -1, -1)
            wrapped = range(n - 1, max(start_line, -1), -1)
        else:
            order = range(max(start_line, 0), n)
            wrapped = range(0, min(start_line, n))
        if self.wrapscan:
            order = itertools.chain(order, wrapped)
        for num in order:
            if pattern.search(self._lines[num]):
                return num
        raise PatternNotFoundError(regex)
