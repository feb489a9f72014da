from __future__ import annotations

from expand_engine.buffer import Buffer
from expand_engine.generators import subword, word
from expand_engine.generators.words import subword_segments, subword_spans, word_spans
from expand_engine.spans import Span
from expand_engine.syntax import SyntaxView


def spans_of(candidates) -> list[Span]:
    return [candidate.span for candidate in candidates]


def test_word_symbol_and_within_space_runs() -> None:
    results = word_spans(SyntaxView("foo_bar(1, 2)"), 2)

    assert spans_of(results) == [Span(0, 3), Span(0, 7), Span(0, 7)]
    assert [c.producer for c in results] == [
        "word",
        "word--symbol",
        "word--within-space",
    ]


def test_within_space_run_crosses_punctuation() -> None:
    results = word_spans(SyntaxView("a.b.c d"), 2)

    assert spans_of(results) == [Span(2, 3), Span(0, 5)]
    assert results[-1].producer == "word--within-space"


def test_word_generator_uses_buffer_cursor() -> None:
    buffer = Buffer.from_text("alpha beta", cursor=7)

    assert Span(6, 10) in spans_of(word(buffer))
    assert buffer.cursor == 7


def test_subword_segments_split_camel_case() -> None:
    view = SyntaxView("HTTPServer")

    assert subword_segments(view, 0, 10) == [(0, 4), (4, 10)]


def test_subword_inside_hump() -> None:
    results = subword_spans(SyntaxView("fooBarBaz"), 4)

    assert set(spans_of(results)) == {Span(3, 6)}
    assert all(c.producer == "subword" for c in results)


def test_subword_at_hump_boundary_offers_both_sides() -> None:
    results = subword_spans(SyntaxView("fooBarBaz"), 3)

    assert set(spans_of(results)) == {Span(0, 3), Span(3, 6)}


def test_subword_generator_respects_buffer_mode() -> None:
    plain = Buffer.from_text("fooBar", cursor=1)
    camel = Buffer.from_text("fooBar", cursor=1, subword_mode=True)

    assert subword(plain) == []
    assert Span(0, 3) in spans_of(subword(camel))


def test_subword_outside_word_is_empty() -> None:
    assert subword_spans(SyntaxView("a  b"), 2) == []
