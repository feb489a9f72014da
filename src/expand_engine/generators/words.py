"""Word, symbol and subword candidates."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from expand_engine.spans import Candidate
from expand_engine.syntax import SyntaxClass, SyntaxView

from .models import absolute, focus

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer

WORD = frozenset({SyntaxClass.WORD})
SYMBOL_RUN = frozenset({SyntaxClass.WORD, SyntaxClass.SYMBOL})
WITHIN_SPACE = frozenset(
    {
        SyntaxClass.WORD,
        SyntaxClass.SYMBOL,
        SyntaxClass.PUNCTUATION,
        SyntaxClass.PREFIX,
    }
)

# camelCase humps, ALLCAPS runs not followed by a lowercase letter, digit runs
_SUBWORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+|[^\W\d_]+|.", re.DOTALL)

Segment = Tuple[int, int]


def _run(view: SyntaxView, position: int, classes: frozenset) -> Tuple[int, int]:
    return view.skip_backward(position, classes), view.skip_forward(position, classes)


def word_spans(view: SyntaxView, position: int) -> List[Candidate]:
    begin, end = _run(view, position, WORD)
    results = [Candidate.of(begin, end, "word")]

    begin, end = _run(view, position, SYMBOL_RUN)
    if end - begin > 1:
        results.append(Candidate.of(begin, end, "word--symbol"))

    begin, end = _run(view, position, WITHIN_SPACE)
    if end - begin > 1:
        results.append(Candidate.of(begin, end, "word--within-space"))
    return results


def subword_segments(view: SyntaxView, begin: int, end: int) -> List[Segment]:
    return [
        (begin + match.start(), begin + match.end())
        for match in _SUBWORD.finditer(view.text[begin:end])
    ]


def _forward(segments: Sequence[Segment], position: int) -> Optional[int]:
    for _, end in segments:
        if end > position:
            return end
    return None


def _backward(segments: Sequence[Segment], position: int) -> Optional[int]:
    for begin, _ in reversed(segments):
        if begin < position:
            return begin
    return None


def subword_spans(view: SyntaxView, position: int) -> List[Candidate]:
    word_begin, word_end = _run(view, position, WORD)
    if word_begin == word_end:
        return []
    segments = subword_segments(view, word_begin, word_end)
    results: List[Candidate] = []

    end = _forward(segments, position)
    begin = _backward(segments, end) if end is not None else None
    if begin is not None and end is not None:
        results.append(Candidate.of(begin, end, "subword"))

    begin = _backward(segments, position)
    end = _forward(segments, begin) if begin is not None else None
    if begin is not None and end is not None:
        results.append(Candidate.of(begin, end, "subword"))

    return [
        candidate
        for candidate in results
        if word_begin <= candidate.begin and candidate.end <= word_end
    ]


def word(buffer: "Buffer") -> List[Candidate]:
    view, base, position = focus(buffer)
    return absolute(word_spans(view, position), base)


def subword(buffer: "Buffer") -> List[Candidate]:
    if not buffer.subword_mode:
        return []
    view, base, position = focus(buffer)
    return absolute(subword_spans(view, position), base)


__all__ = ["word", "subword", "word_spans", "subword_spans", "subword_segments"]
