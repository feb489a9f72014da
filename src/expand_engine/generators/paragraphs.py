"""Declaration and paragraph candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from expand_engine.spans import Candidate, Span
from expand_engine.syntax import WHITESPACE, SyntaxView

from .models import absolute, focus

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer


def paragraph_bounds(view: SyntaxView, position: int) -> Optional[Span]:
    """Blank-line separated paragraph around ``position``, whitespace trimmed."""

    text = view.text
    line_begin = view.line_start(position)
    line_end = view.line_end(position)
    if view.blank_between(line_begin, line_end):
        return None

    begin = line_begin
    while begin > 0:
        previous = view.line_start(begin - 1)
        if view.blank_between(previous, begin - 1):
            break
        begin = previous
    end = line_end
    while end < len(text):
        following = view.line_end(end + 1)
        if view.blank_between(end + 1, following):
            break
        end = following

    begin = view.skip_forward(begin, WHITESPACE, limit=end)
    end = view.skip_backward(end, WHITESPACE, limit=begin)
    return Span(begin, end)


def paragraph(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    results: List[Candidate] = []
    if buffer.declarations is not None:
        bounds = buffer.declarations.bounds_at(view.text, position)
        if bounds is not None and position != bounds.end:
            results.append(Candidate(bounds, "paragraph-defun"))
    if buffer.prose:
        bounds = paragraph_bounds(view, position)
        if bounds is not None:
            results.append(Candidate(bounds, "paragraph"))
    return absolute(results, base)


__all__ = ["paragraph", "paragraph_bounds"]
