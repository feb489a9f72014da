"""Adapter exposing a tree-sitter ``Tree`` through :class:`StructuralParser`.

The adapter only relies on the node attributes tree-sitter exposes
(``root_node``, ``descendant_for_byte_range``, ``parent``, ``start_byte``,
``end_byte``), so hosts bring their own ``tree_sitter`` installation and
grammar packages.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Any, List, Optional, Tuple


class TreeSitterParser:
    """Translate character offsets to tree-sitter byte offsets and back."""

    def __init__(self, tree: Any, text: str, *, language: str) -> None:
        self.tree = tree
        self.text = text
        self.language = language
        self._byte_starts = _byte_offsets(text)

    def node_at(self, position: int) -> Optional[Any]:
        offset = self.byte_offset(position)
        return self.tree.root_node.descendant_for_byte_range(offset, offset)

    def parent(self, node: Any) -> Optional[Any]:
        return node.parent

    def node_range(self, node: Any) -> Tuple[int, int]:
        return self.char_offset(node.start_byte), self.char_offset(node.end_byte)

    def is_root(self, node: Any) -> bool:
        return node.parent is None

    def byte_offset(self, position: int) -> int:
        position = max(0, min(position, len(self.text)))
        return self._byte_starts[position]

    def char_offset(self, byte_offset: int) -> int:
        return bisect_right(self._byte_starts, byte_offset) - 1


def _byte_offsets(text: str) -> List[int]:
    # offsets[i] is the UTF-8 byte offset of character i; the last entry is the total size
    offsets = [0]
    running = 0
    for char in text:
        running += len(char.encode("utf-8"))
        offsets.append(running)
    return offsets


__all__ = ["TreeSitterParser"]
