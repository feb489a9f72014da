from __future__ import annotations

import pytest

from expand_engine.buffer import Buffer
from expand_engine.generators import comment, string
from expand_engine.generators.comments import comment_spans
from expand_engine.generators.strings import string_spans
from expand_engine.spans import Span
from expand_engine.syntax import C_TABLE, ScanError, SyntaxView

STRING_TEXT = 'say "hi there" now'
COMMENT_TEXT = "# one\n# two\nx = 1  # tail\n"


def spans_of(candidates) -> list[Span]:
    return [candidate.span for candidate in candidates]


@pytest.mark.parametrize("position", [4, 6, 14])
def test_string_with_and_without_quotes(position: int) -> None:
    results = string_spans(SyntaxView(STRING_TEXT), position)

    assert spans_of(results) == [Span(4, 14), Span(5, 13)]
    assert [c.producer for c in results] == ["string", "string--inside"]


def test_no_string_outside_quotes() -> None:
    assert string_spans(SyntaxView(STRING_TEXT), 1) == []


def test_unterminated_string_raises() -> None:
    with pytest.raises(ScanError):
        string_spans(SyntaxView('x "abc'), 4)


def test_string_generator_shifts_narrowed_results() -> None:
    buffer = Buffer.from_text('a = "xy"', cursor=5)

    with buffer.narrowed(4, 8):
        results = string(buffer)

    assert spans_of(results) == [Span(4, 8), Span(5, 7)]


def test_adjacent_line_comments_merge() -> None:
    results = comment_spans(SyntaxView(COMMENT_TEXT), 2)

    assert spans_of(results) == [Span(0, 11)]
    assert results[0].producer == "comment"


def test_trailing_comment_stands_alone() -> None:
    assert spans_of(comment_spans(SyntaxView(COMMENT_TEXT), 21)) == [Span(19, 25)]


def test_blank_line_separates_comment_blocks() -> None:
    assert spans_of(comment_spans(SyntaxView("# a\n\n# b"), 1)) == [Span(0, 3)]


def test_cursor_at_end_of_comment_line() -> None:
    assert spans_of(comment_spans(SyntaxView("# one\n# two"), 5)) == [Span(0, 11)]


def test_no_comment_in_code() -> None:
    assert comment_spans(SyntaxView(COMMENT_TEXT), 13) == []


def test_block_comment_with_c_table() -> None:
    buffer = Buffer.from_text("/* a */\nint x;", cursor=3, syntax=C_TABLE)

    assert spans_of(comment(buffer)) == [Span(0, 7)]


def test_trailing_comment_does_not_merge_forward() -> None:
    view = SyntaxView("x = 1  # a\n# b\n")

    assert spans_of(comment_spans(view, 8)) == [Span(7, 10)]
    assert spans_of(comment_spans(view, 12)) == [Span(11, 14)]
