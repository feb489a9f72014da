"""Syntax classification: character tables, scanning and views."""

from .scanner import (
    ParseState,
    ScanError,
    Token,
    TokenKind,
    backward_list,
    forward_list,
    iter_tokens,
    parse_state,
    token_at,
)
from .table import (
    C_TABLE,
    DEFAULT_TABLE,
    LISP_TABLE,
    TABLES,
    TEXT_TABLE,
    SyntaxClass,
    SyntaxTable,
)
from .view import WHITESPACE, SyntaxView

__all__ = [
    "SyntaxClass",
    "SyntaxTable",
    "DEFAULT_TABLE",
    "C_TABLE",
    "LISP_TABLE",
    "TEXT_TABLE",
    "TABLES",
    "ParseState",
    "ScanError",
    "Token",
    "TokenKind",
    "backward_list",
    "forward_list",
    "iter_tokens",
    "parse_state",
    "token_at",
    "SyntaxView",
    "WHITESPACE",
]
