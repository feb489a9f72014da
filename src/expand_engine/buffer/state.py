"""Cursor, selection and restriction state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from expand_engine.spans import Span

Restriction = Tuple[int, int]


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + selection info tied to a Document version.

    ``selection`` is the active region (``None`` when inactive) and
    ``restriction`` the accessible region when the buffer is narrowed.
    """

    cursor: int = 0
    selection: Optional[Span] = None
    restriction: Optional[Restriction] = None

    def set_cursor(self, position: int) -> None:
        self.cursor = position

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, span: Span) -> None:
        self.selection = span
