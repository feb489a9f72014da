"""Position-level classification queries over a slice of text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Optional

from . import scanner
from .scanner import ParseState, Token
from .table import DEFAULT_TABLE, SyntaxClass, SyntaxTable


@dataclass(frozen=True, slots=True)
class SyntaxView:
    """Read-only syntactic view of ``text``.

    Positions are relative to the start of ``text``. A view over a narrowed
    region knows nothing about the surrounding buffer; callers shift
    results back to absolute offsets themselves.
    """

    text: str
    table: SyntaxTable = DEFAULT_TABLE

    def __len__(self) -> int:
        return len(self.text)

    def char_after(self, position: int) -> Optional[str]:
        if 0 <= position < len(self.text):
            return self.text[position]
        return None

    def char_before(self, position: int) -> Optional[str]:
        return self.char_after(position - 1)

    def syntax_after(self, position: int) -> Optional[SyntaxClass]:
        char = self.char_after(position)
        return None if char is None else self.table.classify(char)

    def syntax_before(self, position: int) -> Optional[SyntaxClass]:
        char = self.char_before(position)
        return None if char is None else self.table.classify(char)

    def skip_forward(
        self,
        position: int,
        classes: AbstractSet[SyntaxClass],
        limit: Optional[int] = None,
    ) -> int:
        stop = len(self.text) if limit is None else min(limit, len(self.text))
        while position < stop and self.table.classify(self.text[position]) in classes:
            position += 1
        return position

    def skip_backward(
        self,
        position: int,
        classes: AbstractSet[SyntaxClass],
        limit: int = 0,
    ) -> int:
        stop = max(limit, 0)
        while position > stop and self.table.classify(self.text[position - 1]) in classes:
            position -= 1
        return position

    def state_at(self, position: int) -> ParseState:
        return scanner.parse_state(self.text, self.table, position)

    def list_end(self, open_position: int) -> int:
        return scanner.forward_list(self.text, self.table, open_position)

    def list_start(self, close_position: int) -> int:
        return scanner.backward_list(self.text, self.table, close_position)

    def token_at(self, start: int) -> Token:
        return scanner.token_at(self.text, self.table, start)

    def comment_starter_at(self, position: int) -> Optional[str]:
        return self.table.comment_starter_at(self.text, position)

    def line_start(self, position: int) -> int:
        return self.text.rfind("\n", 0, position) + 1

    def line_end(self, position: int) -> int:
        found = self.text.find("\n", position)
        return len(self.text) if found < 0 else found

    def blank_between(self, begin: int, end: int) -> bool:
        return not self.text[begin:end].strip()

    def narrowed(self, begin: int, end: int) -> "SyntaxView":
        """View over ``text[begin:end]``; positions restart at zero."""

        return SyntaxView(self.text[begin:end], self.table)


WHITESPACE = frozenset({SyntaxClass.WHITESPACE})

__all__ = ["SyntaxView", "WHITESPACE"]
