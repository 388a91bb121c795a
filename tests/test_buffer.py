from __future__ import annotations

import re
from contextlib import nullcontext as produces

import pytest
from pytest import raises

from exranges import (
    EdBuffer,
    InvalidPatternError,
    MarkNotSetError,
    PatternNotFoundError,
    TextRange,
)


ten_lines = "\n".join(f"line {i + 1}" for i in range(10)) + "\n"


@pytest.mark.parametrize(
    "text, shown",
    [
        ("", "EdBuffer('', 0 lines)"),
        ("one\ntwo", "EdBuffer('one\\ntwo', 2 lines)"),
        ("x" * 40 + "\n", f"EdBuffer('{'x' * 37}...', 1 lines)"),
    ],
)
def test_text_and_repr(text, shown):
    buf = EdBuffer(text, cursor_line=1)
    assert str(buf) == text
    assert repr(buf) == shown


def test_equality_ignores_cursor_and_marks():
    moved = EdBuffer(ten_lines, cursor_line=6)
    moved.set_mark("a", 2)
    assert moved == EdBuffer(ten_lines)
    assert moved == ten_lines
    assert moved != EdBuffer("line 1\n")
    assert moved != 10  # NotImplemented makes it false.


def test_from_lines():
    buf = EdBuffer.from_lines(["a\n", "b\n"], cursor_line=1)
    assert buf == "a\nb\n"
    assert buf.line_count == 2
    assert buf.cursor_line == 1


def test_sizes():
    buf = EdBuffer(ten_lines)
    assert buf.file_size == len(buf) == 71
    assert buf.line_count == 10
    assert buf.last_line == 9


def test_empty_buffer_has_one_line():
    buf = EdBuffer("")
    assert buf.line_count == 1
    assert buf.line_start_offset(0) == 0
    assert buf.line_end_offset(0) == 0
    assert buf.line_end_offset(0, allow_end=False) == 0


@pytest.mark.parametrize(
    "line, start",
    [(0, 0), (1, 7), (3, 21), (9, 63), (-1, 0), (-5, 0), (10, 71), (100, 71)],
)
def test_line_start_offset(line, start):
    assert EdBuffer(ten_lines).line_start_offset(line) == start


@pytest.mark.parametrize(
    "line, allow_end, end",
    [
        (0, True, 6),
        (0, False, 5),
        (9, True, 70),
        (9, False, 69),
        (-1, True, 0),
        (-1, False, 0),
        (12, True, 71),
        (12, False, 70),
        (10, False, 70),
    ],
)
def test_line_end_offset(line, allow_end, end):
    assert EdBuffer(ten_lines).line_end_offset(line, allow_end) == end


def test_line_end_offset_unterminated_and_blank():
    buf = EdBuffer("abc\n\ndef")
    assert buf.line_end_offset(1) == 4
    assert buf.line_end_offset(1, allow_end=False) == 4
    assert buf.line_end_offset(2) == buf.file_size == 8


@pytest.mark.parametrize("line, cursor", [(3, 3), (9, 9), (20, 9), (-1, 0)])
def test_move_cursor(line, cursor):
    buf = EdBuffer(ten_lines)
    buf.move_cursor(line)
    assert buf.cursor_line == cursor


def test_cursor_line_clamped_at_construction():
    assert EdBuffer(ten_lines, cursor_line=50).cursor_line == 9


def test_marks():
    buf = EdBuffer(ten_lines)
    buf.set_mark("a", 3)
    assert buf.mark_line("a") == 3
    with raises(MarkNotSetError, match=r"Mark not set: 'b'"):
        buf.mark_line("b")


@pytest.mark.parametrize(
    "regex, start, backward, wrapscan, result",
    [
        ("line 1", 0, False, True, produces(0)),
        ("line 1", 1, False, True, produces(9)),
        ("line 2", 5, False, True, produces(1)),
        (
            "line 2",
            5,
            False,
            False,
            raises(PatternNotFoundError, match=r"Pattern not found: /line 2/"),
        ),
        ("line", 10, False, True, produces(0)),
        ("line [23]", 5, True, True, produces(2)),
        ("line 9", 5, True, True, produces(8)),
        ("line 9", 5, True, False, raises(PatternNotFoundError)),
        ("line", -1, True, True, produces(9)),
        ("8$", 0, False, True, produces(7)),
        ("hello", 3, False, True, raises(PatternNotFoundError)),
        (
            "line (",
            0,
            False,
            True,
            raises(InvalidPatternError, match=r"Invalid pattern: /line \(/"),
        ),
    ],
)
def test_search(regex, start, backward, wrapscan, result):
    buf = EdBuffer(ten_lines, wrapscan=wrapscan)
    with result as expected:
        assert buf.search(regex, start, backward=backward) == expected


def test_text_of():
    assert EdBuffer(ten_lines).text_of(TextRange(7, 14)) == "line 2\n"


def test_invalid_pattern_keeps_regex_error():
    with raises(InvalidPatternError) as exc_info:
        EdBuffer(ten_lines).search("[line", 0)
    assert exc_info.value.regex == "[line"
    assert isinstance(exc_info.value.__cause__, re.error)
