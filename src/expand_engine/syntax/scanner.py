"""Linear scanner yielding delimiters, strings and comments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .table import SyntaxTable


class ScanError(RuntimeError):
    """Raised when delimiters are unbalanced or a string never terminates."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class TokenKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    STRING = "string"
    COMMENT = "comment"


@dataclass(frozen=True, slots=True)
class Token:
    """A bracket, string or comment found by :func:`iter_tokens`.

    ``opener`` is the quote character or comment starter, ``closer`` the
    block-comment terminator (empty for line comments and strings).
    """

    kind: TokenKind
    start: int
    end: int
    opener: str = ""
    closer: str = ""
    terminated: bool = True

    @property
    def is_line_comment(self) -> bool:
        return self.kind is TokenKind.COMMENT and not self.closer

    def encloses(self, position: int) -> bool:
        """True when ``position`` is inside this string or comment.

        The end of a line comment (the newline position) still counts as
        inside, as does the end of anything left unterminated.
        """

        if self.kind not in (TokenKind.STRING, TokenKind.COMMENT):
            return False
        if self.is_line_comment or not self.terminated:
            return self.start < position <= self.end
        return self.start < position < self.end

    def body(self) -> tuple[int, int]:
        """Offsets of the content between the delimiters."""

        begin = self.start + len(self.opener)
        if self.kind is TokenKind.STRING:
            end = self.end - 1 if self.terminated else self.end
        elif self.closer and self.terminated:
            end = self.end - len(self.closer)
        else:
            end = self.end
        return begin, max(begin, end)


@dataclass(frozen=True, slots=True)
class ParseState:
    """Syntactic context at a position: open lists and any enclosing token."""

    open_positions: tuple[int, ...] = ()
    string: Optional[Token] = None
    comment: Optional[Token] = None

    @property
    def depth(self) -> int:
        return len(self.open_positions)

    @property
    def innermost_start(self) -> Optional[int]:
        return self.open_positions[-1] if self.open_positions else None

    @property
    def in_string(self) -> bool:
        return self.string is not None

    @property
    def in_comment(self) -> bool:
        return self.comment is not None

    @property
    def enclosing(self) -> Optional[Token]:
        return self.string or self.comment


def _skip_string(text: str, table: SyntaxTable, start: int, limit: int) -> tuple[int, bool]:
    quote = text[start]
    index = start + 1
    while index < limit:
        char = text[index]
        if char == table.escape_char:
            index += 2
            continue
        if char == quote:
            return index + 1, True
        index += 1
    return limit, False


def _skip_comment(
    text: str, starter: str, closer: str, start: int, limit: int
) -> tuple[int, bool]:
    body = start + len(starter)
    if not closer:
        newline = text.find("\n", body, limit)
        return (limit if newline < 0 else newline), True
    found = text.find(closer, body, limit)
    if found < 0:
        return limit, False
    return found + len(closer), True


def iter_tokens(
    text: str, table: SyntaxTable, start: int = 0, end: int | None = None
) -> Iterator[Token]:
    """Yield brackets, strings and comments of ``text[start:end]`` in order."""

    limit = len(text) if end is None else min(end, len(text))
    index = start
    while index < limit:
        char = text[index]
        starter = table.comment_starter_at(text, index)
        if starter is not None:
            closer = table.comment_closer(starter)
            stop, terminated = _skip_comment(text, starter, closer, index, limit)
            yield Token(TokenKind.COMMENT, index, stop, starter, closer, terminated)
            index = stop
            continue
        if char == table.escape_char:
            index += 2
            continue
        if char in table.quote_chars:
            stop, terminated = _skip_string(text, table, index, limit)
            yield Token(TokenKind.STRING, index, min(stop, limit), char, "", terminated)
            index = stop
            continue
        if table.is_open(char):
            yield Token(TokenKind.OPEN, index, index + 1, char)
        elif table.is_close(char):
            yield Token(TokenKind.CLOSE, index, index + 1, char)
        index += 1


def parse_state(text: str, table: SyntaxTable, position: int) -> ParseState:
    """Scan from the start of ``text`` up to ``position``."""

    stack: list[int] = []
    for token in iter_tokens(text, table):
        if token.start >= position:
            break
        if token.kind is TokenKind.OPEN:
            stack.append(token.start)
        elif token.kind is TokenKind.CLOSE:
            if stack:
                stack.pop()
        elif token.encloses(position):
            if token.kind is TokenKind.STRING:
                return ParseState(tuple(stack), string=token)
            return ParseState(tuple(stack), comment=token)
    return ParseState(tuple(stack))


def forward_list(text: str, table: SyntaxTable, open_position: int) -> int:
    """Return the offset just past the delimiter closing ``open_position``."""

    if not (0 <= open_position < len(text)) or not table.is_open(text[open_position]):
        raise ScanError("No list starts here", position=open_position)
    depth = 0
    for token in iter_tokens(text, table, open_position):
        if token.kind is TokenKind.OPEN:
            depth += 1
        elif token.kind is TokenKind.CLOSE:
            depth -= 1
            if depth == 0:
                return token.end
    raise ScanError("Unbalanced parentheses", position=open_position)


def backward_list(text: str, table: SyntaxTable, close_position: int) -> int:
    """Return the offset of the delimiter matched by ``close_position``."""

    if not (0 <= close_position < len(text)) or not table.is_close(text[close_position]):
        raise ScanError("No list ends here", position=close_position)
    state = parse_state(text, table, close_position)
    if state.enclosing is not None or state.innermost_start is None:
        raise ScanError("Unbalanced parentheses", position=close_position)
    return state.innermost_start


def token_at(text: str, table: SyntaxTable, start: int) -> Token:
    """Return the string or comment token beginning exactly at ``start``."""

    for token in iter_tokens(text, table, start):
        if token.start == start and token.kind in (TokenKind.STRING, TokenKind.COMMENT):
            return token
        break
    raise ScanError("No string or comment starts here", position=start)


__all__ = [
    "ScanError",
    "TokenKind",
    "Token",
    "ParseState",
    "iter_tokens",
    "parse_state",
    "forward_list",
    "backward_list",
    "token_at",
]
