"""Candidates from structural parser nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from expand_engine.spans import Candidate

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer


def syntax_tree(buffer: "Buffer") -> List[Candidate]:
    """Every non-root ancestor of the smallest node at the cursor, per parser."""

    position = buffer.cursor
    results: List[Candidate] = []
    for parser in buffer.parsers.at(position):
        node = parser.node_at(position)
        while node is not None:
            if not parser.is_root(node):
                begin, end = parser.node_range(node)
                results.append(Candidate.of(begin, end, parser.language))
            node = parser.parent(node)
    return results


__all__ = ["syntax_tree"]
