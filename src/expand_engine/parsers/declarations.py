"""Top-level declaration boundaries."""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from expand_engine.spans import Span

_CLOSERS = ")]}"


class DeclarationFinder(Protocol):
    def bounds_at(self, text: str, position: int) -> Optional[Span]:
        """Span of the top-level declaration enclosing ``position``, if any."""
        ...


class IndentedDeclarations:
    """Treat every unindented line as the head of a declaration.

    A declaration runs from its head through the indented, blank and
    closing-bracket lines that follow, minus trailing blank lines. Heads
    starting with ``decorator_prefix`` attach to the declaration below them.
    """

    def __init__(self, *, decorator_prefix: str = "@") -> None:
        self.decorator_prefix = decorator_prefix

    def bounds_at(self, text: str, position: int) -> Optional[Span]:
        lines = _line_table(text)
        row = _row_for(lines, position)
        head = row
        while head >= 0 and not self._is_head(text, lines[head]):
            head -= 1
        if head < 0:
            return None
        while head > 0 and self._is_decorator(text, lines[head - 1]):
            head -= 1

        last = head
        index = head + 1
        decorated = self._is_decorator(text, lines[head])
        while index < len(lines):
            line = lines[index]
            if self._is_head(text, line):
                if not decorated:
                    break
                decorated = self._is_decorator(text, line)
            if not _is_blank(text, line):
                last = index
            index += 1

        span = Span(lines[head][0], lines[last][1])
        if not span.covers(position):
            return None
        return span

    def _is_head(self, text: str, line: Tuple[int, int]) -> bool:
        begin, end = line
        if begin == end:
            return False
        first = text[begin]
        return not first.isspace() and first not in _CLOSERS

    def _is_decorator(self, text: str, line: Tuple[int, int]) -> bool:
        begin, end = line
        return bool(self.decorator_prefix) and text.startswith(
            self.decorator_prefix, begin, end
        )


def _line_table(text: str) -> List[Tuple[int, int]]:
    lines: List[Tuple[int, int]] = []
    begin = 0
    for chunk in text.split("\n"):
        lines.append((begin, begin + len(chunk)))
        begin += len(chunk) + 1
    return lines


def _row_for(lines: List[Tuple[int, int]], position: int) -> int:
    for row, (_, end) in enumerate(lines):
        if position <= end:
            return row
    return len(lines) - 1


def _is_blank(text: str, line: Tuple[int, int]) -> bool:
    return not text[line[0] : line[1]].strip()


__all__ = ["DeclarationFinder", "IndentedDeclarations"]
