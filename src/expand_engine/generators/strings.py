"""Quoted-string candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from expand_engine.spans import Candidate
from expand_engine.syntax import ScanError, SyntaxClass, SyntaxView, TokenKind

from .models import absolute, focus

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer


def _string_start(view: SyntaxView, position: int) -> Optional[int]:
    state = view.state_at(position)
    if state.string is not None:
        return state.string.start
    if state.comment is not None:
        return None
    if view.syntax_after(position) is SyntaxClass.QUOTE:
        return position
    if view.syntax_before(position) is SyntaxClass.QUOTE:
        previous = view.state_at(position - 1).string
        if previous is not None and previous.end == position:
            return previous.start
    return None


def string_spans(view: SyntaxView, position: int) -> List[Candidate]:
    start = _string_start(view, position)
    if start is None:
        return []
    token = view.token_at(start)
    if token.kind is not TokenKind.STRING:
        return []
    if not token.terminated:
        raise ScanError("Unterminated string", position=start)
    inner_begin, inner_end = token.body()
    return [
        Candidate.of(token.start, token.end, "string"),
        Candidate.of(inner_begin, inner_end, "string--inside"),
    ]


def string(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    return absolute(string_spans(view, position), base)


__all__ = ["string", "string_spans"]
