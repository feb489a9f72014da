"""Comment-block candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from expand_engine.spans import Candidate
from expand_engine.syntax import WHITESPACE, SyntaxView, Token, TokenKind

from .models import absolute, focus

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer


def _comment_at(view: SyntaxView, position: int) -> Optional[Token]:
    state = view.state_at(position)
    if state.comment is not None:
        return state.comment
    if state.string is not None:
        return None
    if view.comment_starter_at(position) is not None:
        return view.token_at(position)
    return _comment_ending_at(view, position)


def _comment_ending_at(view: SyntaxView, position: int) -> Optional[Token]:
    for probe in (position, position - 1):
        if probe <= 0:
            continue
        comment = view.state_at(probe).comment
        if comment is not None and comment.end >= position:
            return comment
    return None


def _owns_line(view: SyntaxView, token: Token) -> bool:
    return view.blank_between(view.line_start(token.start), token.start)


def _adjacent_gap(view: SyntaxView, begin: int, end: int) -> bool:
    # whitespace only, spanning at most one line break
    return view.blank_between(begin, end) and view.text.count("\n", begin, end) <= 1


def _previous_comment(view: SyntaxView, token: Token) -> Optional[Token]:
    if not _owns_line(view, token):
        return None
    gap_start = view.skip_backward(token.start, WHITESPACE)
    if not _adjacent_gap(view, gap_start, token.start):
        return None
    previous = _comment_ending_at(view, gap_start)
    if previous is None or not _owns_line(view, previous):
        return None
    return previous


def _next_comment(view: SyntaxView, token: Token) -> Optional[Token]:
    if not _owns_line(view, token):
        return None
    gap_end = view.skip_forward(token.end, WHITESPACE)
    if gap_end >= len(view) or not _adjacent_gap(view, token.end, gap_end):
        return None
    if view.comment_starter_at(gap_end) is None:
        return None
    following = view.token_at(gap_end)
    return following if following.kind is TokenKind.COMMENT else None


def comment_spans(view: SyntaxView, position: int) -> List[Candidate]:
    current = _comment_at(view, position)
    if current is None:
        return []

    first = current
    while True:
        previous = _previous_comment(view, first)
        if previous is None:
            break
        first = previous
    last = current
    while True:
        following = _next_comment(view, last)
        if following is None:
            break
        last = following

    end = view.skip_backward(last.end, WHITESPACE, limit=last.start)
    return [Candidate.of(first.start, end, "comment")]


def comment(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    return absolute(comment_spans(view, position), base)


__all__ = ["comment", "comment_spans"]
