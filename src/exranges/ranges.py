from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, NamedTuple, Union

from .address import Address, whole_file
from .buffer import EdBuffer
from .errors import AddressError, RangesError

logger = logging.getLogger(__name__)

NO_COUNT = -1
"""The count to pass when the command had no explicit count."""


class LineRange(NamedTuple):
    """Inclusive zero-based lines. `start_line` may be after `end_line`."""

    start_line: int
    end_line: int


class TextRange(NamedTuple):
    """Buffer offsets, `end` exclusive."""

    start: int
    end: int


@dataclass(frozen=True)
class Fold:
    """What's carried from one address to the next while resolving."""

    start_line: int
    end_line: int
    last_zero: bool = False
    visited: int = 0


def fold_addresses(
    addresses: Iterable[Address],
    initial_line: int,
    buffer: EdBuffer,
    move_cursor: Callable[[int], None],
) -> Fold:
    """Resolve `addresses` in order into a start and end line.

    Each address starts where the previous one ended. Addresses that ask for
    it move the cursor (with `move_cursor`) before the next one is resolved.
    A single address is both the start and the end of the range.

    An `AddressError` from any address stops the fold and propagates.
    """
    acc = Fold(start_line=initial_line, end_line=initial_line)
    for address in addresses:
        end_line = address.resolve(buffer, acc.last_zero)
        logger.debug("address %r resolved to line %d", address, end_line)
        if address.requires_cursor_move():
            move_cursor(end_line)
        acc = Fold(
            start_line=acc.end_line,
            end_line=end_line,
            last_zero=end_line < 0,
            visited=acc.visited + 1,
        )
    if acc.visited == 1:
        acc = Fold(acc.end_line, acc.end_line, acc.last_zero, acc.visited)
    return acc


@dataclass
class Unresolved:
    addresses: list[Address] = field(default_factory=list)
    default_line: int = -1


@dataclass(frozen=True)
class Resolved:
    start_line: int
    end_line: int


@dataclass(frozen=True)
class Failed:
    error: AddressError


class Ranges:
    """The line addresses given to one Ex command.

    The addresses are resolved the first time a line is asked for, and the
    result is kept from then on, even if the buffer or cursor changes.
    """

    def __init__(self) -> None:
        self._state: Union[Unresolved, Resolved, Failed] = Unresolved()
        self._size = 0

    def __repr__(self) -> str:
        if isinstance(self._state, Unresolved):
            return f"Ranges(ranges={self._state.addresses!r})"
        return f"Ranges({self._state!r})"

    def __len__(self) -> int:
        return self._size

    def _unresolved(self) -> Unresolved:
        if not isinstance(self._state, Unresolved):
            raise RangesError("Can't change Ranges after they are resolved")
        return self._state

    def add_range(self, *addresses: Address) -> None:
        self._unresolved().addresses.extend(addresses)
        self._size += len(addresses)

    def set_default_line(self, line: int) -> None:
        """Set the line to use when no addresses were given.

        -1 means the cursor line at the time the range is resolved.
        """
        self._unresolved().default_line = line

    def _resolve(self, buffer: EdBuffer) -> Resolved:
        state = self._state
        if isinstance(state, Resolved):
            return state
        if isinstance(state, Failed):
            raise state.error
        if state.default_line == -1:
            initial = buffer.cursor_line
        else:
            initial = state.default_line
        try:
            acc = fold_addresses(state.addresses, initial, buffer, buffer.move_cursor)
        except AddressError as err:
            self._state = Failed(err)
            raise
        self._state = Resolved(acc.start_line, acc.end_line)
        logger.debug("resolved %r", self._state)
        return self._state

    def line(self, buffer: EdBuffer) -> int:
        """The last line of the range."""
        return self._resolve(buffer).end_line

    def first_line(self, buffer: EdBuffer) -> int:
        return self._resolve(buffer).start_line

    def count(self, buffer: EdBuffer, count: int = NO_COUNT) -> int:
        """The explicit count if there is one, otherwise the last line."""
        if count == NO_COUNT:
            return self.line(buffer)
        return count

    def line_range(self, buffer: EdBuffer, count: int = NO_COUNT) -> LineRange:
        """The lines of the range.

        With a count, the range is `count` lines starting at the last line.
        """
        resolved = self._resolve(buffer)
        if count == NO_COUNT:
            return LineRange(resolved.start_line, resolved.end_line)
        return LineRange(resolved.end_line, resolved.end_line + count - 1)

    def text_range(self, buffer: EdBuffer, count: int = NO_COUNT) -> TextRange:
        """The text from the start of the first line through the end of the
        last line, including its line ending.
        """
        lr = self.line_range(buffer, count)
        start = buffer.line_start_offset(lr.start_line)
        end = buffer.line_end_offset(lr.end_line, allow_end=True) + 1
        return TextRange(start, min(end, buffer.file_size))

    @classmethod
    def current_line_range(cls, buffer: EdBuffer) -> TextRange:
        return cls().text_range(buffer)

    @classmethod
    def file_text_range(cls, buffer: EdBuffer) -> TextRange:
        ranges = cls()
        ranges.add_range(*whole_file())
        return ranges.text_range(buffer)
