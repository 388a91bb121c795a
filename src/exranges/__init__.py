"""Resolve Ex-style line addresses into line and text ranges."""

from .address import (
    Address,
    CurrentLine,
    LastLine,
    LineNumber,
    Mark,
    Pattern,
    whole_file,
)
from .buffer import EdBuffer
from .errors import (
    AddressError,
    AddressOutOfRangeError,
    InvalidPatternError,
    MarkNotSetError,
    PatternNotFoundError,
    RangesError,
)
from .ranges import NO_COUNT, Fold, LineRange, Ranges, TextRange, fold_addresses

__all__ = [
    "NO_COUNT",
    "Address",
    "AddressError",
    "AddressOutOfRangeError",
    "CurrentLine",
    "EdBuffer",
    "Fold",
    "InvalidPatternError",
    "LastLine",
    "LineNumber",
    "LineRange",
    "Mark",
    "MarkNotSetError",
    "Pattern",
    "PatternNotFoundError",
    "Ranges",
    "RangesError",
    "TextRange",
    "fold_addresses",
    "whole_file",
]
