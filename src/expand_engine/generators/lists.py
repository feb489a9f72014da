"""Delimited-list candidates and the combined list/string walker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from expand_engine.runtime import telemetry
from expand_engine.spans import Candidate
from expand_engine.syntax import WHITESPACE, ScanError, SyntaxClass, SyntaxView

from .models import absolute, focus

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer

ListProducer = Callable[[SyntaxView, int], List[Candidate]]


@dataclass(slots=True)
class ListClimb:
    """Enclosing lists from innermost outwards plus where the climb stopped."""

    candidates: List[Candidate] = field(default_factory=list)
    anchor: Optional[int] = None


def inside_list_spans(view: SyntaxView, position: int) -> List[Candidate]:
    start = view.state_at(position).innermost_start
    if start is None:
        return []
    end = view.list_end(start)
    padded_begin, padded_end = start + 1, end - 1
    begin = view.skip_forward(padded_begin, WHITESPACE, limit=padded_end)
    trimmed_end = view.skip_backward(padded_end, WHITESPACE, limit=begin)
    return [
        Candidate.of(begin, trimmed_end, "inside-list"),
        Candidate.of(padded_begin, padded_end, "inside-list"),
    ]


def list_at_point_spans(view: SyntaxView, position: int) -> List[Candidate]:
    if view.state_at(position).enclosing is not None:
        return []
    start = view.skip_forward(position, WHITESPACE)
    if view.syntax_after(start) is SyntaxClass.OPEN:
        return [Candidate.of(start, view.list_end(start), "list-at-point")]
    if (
        view.syntax_before(position) is SyntaxClass.CLOSE
        and view.syntax_after(position) is not SyntaxClass.OPEN
    ):
        return [Candidate.of(view.list_start(position - 1), position, "list-at-point")]
    return []


def climb_lists(view: SyntaxView, position: int) -> ListClimb:
    """Walk every enclosing list; ``anchor`` is the innermost list start."""

    state = view.state_at(position)
    climb = ListClimb(anchor=state.innermost_start)
    for start in reversed(state.open_positions):
        climb.candidates.append(
            Candidate.of(start, view.list_end(start), "outside-list")
        )
    return climb


def outside_list_spans(view: SyntaxView, position: int) -> List[Candidate]:
    return climb_lists(view, position).candidates


def _attempt(producer: ListProducer, view: SyntaxView, position: int) -> List[Candidate]:
    try:
        return producer(view, position)
    except ScanError as exc:
        telemetry.record_event(
            "generator.scan_error",
            level="debug",
            data={"producer": producer.__name__, "position": exc.position},
        )
        return []


def narrowed_interior(view: SyntaxView, position: int) -> Optional[Tuple[int, int]]:
    """Bounds of the string interior or comment body enclosing ``position``."""

    token = view.state_at(position).enclosing
    if token is None:
        return None
    return token.body()


def list_family(
    view: SyntaxView, position: int, *, no_recurse: bool = False
) -> List[Candidate]:
    """Inside-list, list-at-point and outside-list candidates.

    Inside a string or comment the same candidates are first recomputed
    over the narrowed interior, shifted back into ``view`` coordinates,
    and then merged with the ordinary ones.
    """

    results: List[Candidate] = []
    if not no_recurse:
        interior = narrowed_interior(view, position)
        if interior is not None:
            begin, end = interior
            inner = view.narrowed(begin, end)
            relative = max(0, min(position - begin, end - begin))
            results.extend(
                absolute(list_family(inner, relative, no_recurse=True), begin)
            )
    for producer in (inside_list_spans, list_at_point_spans, outside_list_spans):
        results.extend(_attempt(producer, view, position))
    return results


def inside_list(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    return absolute(inside_list_spans(view, position), base)


def list_at_point(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    return absolute(list_at_point_spans(view, position), base)


def outside_list(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    return absolute(outside_list_spans(view, position), base)


def list_walker(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    return absolute(list_family(view, position), base)


__all__ = [
    "ListClimb",
    "climb_lists",
    "inside_list_spans",
    "list_at_point_spans",
    "outside_list_spans",
    "list_family",
    "narrowed_interior",
    "inside_list",
    "list_at_point",
    "outside_list",
    "list_walker",
]
