from __future__ import annotations

import pytest

from expand_engine.buffer import Buffer, BufferValidationError
from expand_engine.spans import Candidate, Span


def test_span_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        Span(3, 1)


def test_candidate_equality_ignores_producer() -> None:
    assert Candidate.of(0, 3, "word") == Candidate.of(0, 3, "string")
    assert Candidate.of(1, 2, "word").shifted(4).span == Span(5, 6)


def test_goto_validates_positions() -> None:
    buffer = Buffer.from_text("hello")

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.goto(9)

    assert excinfo.value.position == 9
    assert buffer.goto(5) == 5


def test_select_places_cursor_at_begin() -> None:
    buffer = Buffer.from_text("hello world", cursor=8)

    buffer.select(Span(6, 11))

    assert buffer.cursor == 6
    assert buffer.selection == Span(6, 11)


def test_excursion_restores_state_on_error() -> None:
    buffer = Buffer.from_text("hello world", cursor=2)
    buffer.select(Span(0, 5))

    with pytest.raises(RuntimeError):
        with buffer.excursion("probe"):
            buffer.goto(9)
            buffer.deactivate()
            raise RuntimeError("fail")

    assert buffer.cursor == 0
    assert buffer.selection == Span(0, 5)


def test_narrowed_clamps_and_restores() -> None:
    buffer = Buffer.from_text("0123456789", cursor=1)

    with buffer.narrowed(3, 6) as narrowed:
        assert narrowed.cursor == 3
        assert narrowed.view().text == "345"
        assert narrowed.goto(8) == 6

    assert buffer.cursor == 1
    assert (buffer.point_min, buffer.point_max) == (0, 10)


def test_replace_range_bumps_version() -> None:
    buffer = Buffer.from_text("hello", cursor=1)
    buffer.select(Span(0, 5))

    document = buffer.replace_range(0, 5, "bye")

    assert document.version == 1
    assert buffer.text == "bye"
    assert buffer.cursor == 3
    assert buffer.selection is None
