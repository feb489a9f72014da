"""Structural parser protocol and per-buffer parser attachments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Protocol, Tuple, TypeVar

from expand_engine.spans import Span

NodeT = TypeVar("NodeT")


class StructuralParser(Protocol[NodeT]):
    """Anything that can answer "which node encloses this offset"."""

    language: str

    def node_at(self, position: int) -> Optional[NodeT]:
        """Smallest node containing ``position``."""
        ...

    def parent(self, node: NodeT) -> Optional[NodeT]:
        ...

    def node_range(self, node: NodeT) -> Tuple[int, int]:
        """Character offsets ``(begin, end)`` of ``node``."""
        ...

    def is_root(self, node: NodeT) -> bool:
        ...


@dataclass(slots=True)
class ParserAttachment:
    parser: StructuralParser[Any]
    scope: Optional[Span] = None

    @property
    def local(self) -> bool:
        return self.scope is not None

    def active_at(self, position: int) -> bool:
        return self.scope is None or self.scope.covers(position)


class ParserSet:
    """Parsers attached to a buffer, globally or over a local range.

    Locally scoped parsers model embedded languages (a code block inside
    Markdown, a script inside HTML) and are only consulted when the
    position falls within their range.
    """

    def __init__(self) -> None:
        self._attachments: List[ParserAttachment] = []

    def __len__(self) -> int:
        return len(self._attachments)

    def __iter__(self) -> Iterator[StructuralParser]:
        return (attachment.parser for attachment in self._attachments)

    def attach(self, parser: StructuralParser, *, scope: Optional[Span] = None) -> None:
        self._attachments.append(ParserAttachment(parser, scope))

    def detach(self, parser: StructuralParser) -> bool:
        for attachment in self._attachments:
            if attachment.parser is parser:
                self._attachments.remove(attachment)
                return True
        return False

    def at(self, position: int) -> list[StructuralParser]:
        """Global parsers first, then local ones covering ``position``."""

        shared = [a.parser for a in self._attachments if not a.local]
        local = [
            a.parser for a in self._attachments if a.local and a.active_at(position)
        ]
        return shared + local


__all__ = ["StructuralParser", "ParserAttachment", "ParserSet"]
