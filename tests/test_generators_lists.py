from __future__ import annotations

from expand_engine.buffer import Buffer
from expand_engine.generators import climb_lists, list_family, list_walker
from expand_engine.generators.lists import (
    inside_list_spans,
    list_at_point_spans,
    outside_list_spans,
)
from expand_engine.spans import Span
from expand_engine.syntax import SyntaxView


def spans_of(candidates) -> list[Span]:
    return [candidate.span for candidate in candidates]


def test_inside_list_trimmed_then_padded() -> None:
    results = inside_list_spans(SyntaxView("( a b )"), 2)

    assert spans_of(results) == [Span(2, 5), Span(1, 6)]
    assert {c.producer for c in results} == {"inside-list"}


def test_outside_list_climbs_innermost_first() -> None:
    view = SyntaxView("f(a, (b c))")

    assert spans_of(outside_list_spans(view, 6)) == [Span(5, 10), Span(1, 11)]
    assert climb_lists(view, 6).anchor == 5
    assert climb_lists(SyntaxView("abc"), 1).anchor is None


def test_list_at_point_before_and_after() -> None:
    view = SyntaxView("x (a b) y")

    assert spans_of(list_at_point_spans(view, 1)) == [Span(2, 7)]
    assert spans_of(list_at_point_spans(view, 7)) == [Span(2, 7)]
    assert list_at_point_spans(view, 0) == []


def test_list_at_point_ignores_strings() -> None:
    assert list_at_point_spans(SyntaxView('"(a)"'), 1) == []


def test_list_family_recurses_into_string_interior() -> None:
    view = SyntaxView('x = "f(a b)"')

    results = list_family(view, 7)

    assert Span(7, 10) in spans_of(results)
    assert Span(6, 11) in spans_of(results)
    assert all(c.producer in {"inside-list", "outside-list"} for c in results)


def test_list_family_swallows_unbalanced_input() -> None:
    assert list_family(SyntaxView("(a b"), 2) == []


def test_list_walker_respects_narrowing() -> None:
    buffer = Buffer.from_text("zz (a b) zz", cursor=4)

    with buffer.narrowed(3, 8):
        results = list_walker(buffer)

    assert set(spans_of(results)) == {Span(4, 7), Span(3, 8)}
    assert buffer.point_min == 0
