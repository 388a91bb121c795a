from __future__ import annotations


class AddressError(ValueError):
    """An address that can't be resolved to a line."""


class MarkNotSetError(AddressError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Mark not set: {name!r}")
        self.name = name


class PatternNotFoundError(AddressError):
    def __init__(self, regex: str) -> None:
        super().__init__(f"Pattern not found: /{regex}/")
        self.regex = regex


class InvalidPatternError(AddressError):
    def __init__(self, regex: str, reason: str) -> None:
        super().__init__(f"Invalid pattern: /{regex}/: {reason}")
        self.regex = regex


class AddressOutOfRangeError(AddressError):
    def __init__(self, line: int, line_count: int) -> None:
        # Reported one-based, the way the user typed it.
        super().__init__(f"Address {line + 1} outside of range 0-{line_count}")
        self.line = line
        self.line_count = line_count


class RangesError(ValueError):
    """A Ranges object used out of order."""
