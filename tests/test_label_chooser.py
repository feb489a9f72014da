from __future__ import annotations

from typing import Any, List

import pytest

from expand_engine.adapters import LabelChooser, LabelHooks
from expand_engine.buffer import Buffer
from expand_engine.navigation import ExpansionSession
from expand_engine.parsers import IndentedDeclarations
from expand_engine.spans import Span


class RecordingHooks:
    def __init__(self) -> None:
        self.shown: List[Any] = []
        self.cleared = 0
        self.statuses: List[str] = []

    def as_hooks(self) -> LabelHooks:
        return LabelHooks(
            show=self.shown.append,
            clear=self._clear,
            update_status=self.statuses.append,
        )

    def _clear(self) -> None:
        self.cleared += 1


def make_chooser(
    text: str = "foo_bar(1, 2)", cursor: int = 2, **kwargs: Any
) -> tuple[LabelChooser, RecordingHooks]:
    buffer = Buffer.from_text(text, cursor=cursor, declarations=IndentedDeclarations())
    recorder = RecordingHooks()
    chooser = LabelChooser(ExpansionSession(buffer), recorder.as_hooks(), **kwargs)
    return chooser, recorder


def test_assignments_label_pending_candidates() -> None:
    chooser, _ = make_chooser()

    labels = [(key, candidate.span) for key, candidate in chooser.assignments()]

    assert labels == [("a", Span(0, 3)), ("b", Span(0, 7)), ("c", Span(0, 13))]


def test_choose_selects_labelled_candidate() -> None:
    chooser, recorder = make_chooser()

    result = chooser.choose(lambda: "b")

    assert result.status == "selected"
    assert chooser.session.active == Span(0, 7)
    assert len(recorder.shown[0]) == 3
    assert recorder.cleared == 1
    assert recorder.statuses[-1] == "word--symbol"


def test_unknown_key_is_not_a_cancel() -> None:
    chooser, recorder = make_chooser()

    result = chooser.choose(lambda: "z")

    assert result.status == "no_selection"
    assert chooser.session.active is None
    assert recorder.cleared == 1


def test_cancel_key_cancels() -> None:
    chooser, recorder = make_chooser()

    result = chooser.choose(lambda: "ESC")

    assert result.status == "cancelled"
    assert recorder.cleared == 1


def test_overlay_cleared_on_interrupt() -> None:
    chooser, recorder = make_chooser()

    def interrupted() -> str:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        chooser.choose(interrupted)

    assert recorder.cleared == 1


def test_nothing_to_label() -> None:
    chooser, recorder = make_chooser(text="", cursor=0)

    result = chooser.choose(lambda: "a")

    assert result.status == "no_candidates"
    assert recorder.shown == []
    assert recorder.statuses == ["nothing to expand"]


def test_label_alphabet_limits_offers() -> None:
    chooser, _ = make_chooser(labels="jk")

    assert [key for key, _ in chooser.assignments()] == ["j", "k"]
    assert chooser.choose(lambda: "k").span == Span(0, 7)


def test_labels_must_be_unique() -> None:
    with pytest.raises(ValueError):
        make_chooser(labels="aa")
