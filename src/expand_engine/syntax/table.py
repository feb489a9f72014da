"""Character classification tables and the built-in presets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class SyntaxClass(str, Enum):
    """Syntactic role of a single character."""

    WORD = "w"
    SYMBOL = "_"
    PUNCTUATION = "."
    WHITESPACE = "-"
    QUOTE = '"'
    OPEN = "("
    CLOSE = ")"
    PREFIX = "'"
    COMMENT = "<"
    ESCAPE = "\\"


@dataclass(frozen=True, slots=True)
class SyntaxTable:
    """Maps characters to :class:`SyntaxClass` and knows the delimiters.

    Alphanumeric characters are word constituents and whitespace is
    whitespace unless a more specific entry claims them. Comment starters
    may span several characters (``//``); only single-character starters
    classify as :attr:`SyntaxClass.COMMENT` on their own.
    """

    name: str = "default"
    symbol_chars: frozenset[str] = frozenset("_")
    prefix_chars: frozenset[str] = frozenset()
    word_chars: frozenset[str] = frozenset()
    quote_chars: frozenset[str] = frozenset("\"'")
    brackets: tuple[tuple[str, str], ...] = (("(", ")"), ("[", "]"), ("{", "}"))
    line_comments: tuple[str, ...] = ("#",)
    block_comments: tuple[tuple[str, str], ...] = ()
    escape_char: str = "\\"

    def classify(self, char: str) -> SyntaxClass:
        if char == self.escape_char:
            return SyntaxClass.ESCAPE
        if char in self.quote_chars:
            return SyntaxClass.QUOTE
        if self.is_open(char):
            return SyntaxClass.OPEN
        if self.is_close(char):
            return SyntaxClass.CLOSE
        if char in self.line_comments or any(
            start == char for start, _ in self.block_comments
        ):
            return SyntaxClass.COMMENT
        if char in self.symbol_chars:
            return SyntaxClass.SYMBOL
        if char in self.prefix_chars:
            return SyntaxClass.PREFIX
        if char in self.word_chars or char.isalnum():
            return SyntaxClass.WORD
        if char.isspace():
            return SyntaxClass.WHITESPACE
        return SyntaxClass.PUNCTUATION

    def is_open(self, char: str) -> bool:
        return any(char == opener for opener, _ in self.brackets)

    def is_close(self, char: str) -> bool:
        return any(char == closer for _, closer in self.brackets)

    def comment_starter_at(self, text: str, position: int) -> Optional[str]:
        """Return the comment starter beginning at ``position``, longest first."""

        starters = list(self.line_comments) + [start for start, _ in self.block_comments]
        for starter in sorted(starters, key=len, reverse=True):
            if starter and text.startswith(starter, position):
                return starter
        return None

    def comment_closer(self, starter: str) -> str:
        """Closing delimiter for ``starter``; empty for line comments."""

        for start, end in self.block_comments:
            if start == starter:
                return end
        return ""

    @classmethod
    def named(cls, name: str) -> "SyntaxTable":
        try:
            return TABLES[name]
        except KeyError as exc:
            raise KeyError(f"Unknown syntax table '{name}'") from exc


DEFAULT_TABLE = SyntaxTable()

C_TABLE = SyntaxTable(
    name="c",
    line_comments=("//",),
    block_comments=(("/*", "*/"),),
)

LISP_TABLE = SyntaxTable(
    name="lisp",
    symbol_chars=frozenset("_-+*/<>=!?$%&:^~"),
    prefix_chars=frozenset("'`,@#"),
    quote_chars=frozenset('"'),
    line_comments=(";",),
)

TEXT_TABLE = SyntaxTable(
    name="text",
    symbol_chars=frozenset("_-'"),
    quote_chars=frozenset('"'),
    line_comments=(),
)

TABLES: Dict[str, SyntaxTable] = {
    table.name: table for table in (DEFAULT_TABLE, C_TABLE, LISP_TABLE, TEXT_TABLE)
}

__all__ = [
    "SyntaxClass",
    "SyntaxTable",
    "DEFAULT_TABLE",
    "C_TABLE",
    "LISP_TABLE",
    "TEXT_TABLE",
    "TABLES",
]
