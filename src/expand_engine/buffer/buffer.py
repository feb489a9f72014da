"""High-level buffer façade combining document, state and syntax capabilities."""

from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from typing import ContextManager, Iterator, Optional

from expand_engine.parsers import DeclarationFinder, ParserSet
from expand_engine.runtime import telemetry
from expand_engine.spans import Span
from expand_engine.syntax import DEFAULT_TABLE, SyntaxTable, SyntaxView

from .document import Document
from .state import BufferState, Restriction
from .validation import ensure_position, ensure_region


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[Document] = None,
        state: Optional[BufferState] = None,
        syntax: Optional[SyntaxTable] = None,
        parsers: Optional[ParserSet] = None,
        declarations: Optional[DeclarationFinder] = None,
        prose: bool = False,
        subword_mode: bool = False,
    ) -> None:
        self.name = name
        self.document = document or Document()
        self.state = state or BufferState()
        self.syntax = syntax or DEFAULT_TABLE
        self.parsers = parsers or ParserSet()
        self.declarations = declarations
        self.prose = prose
        self.subword_mode = subword_mode

    @classmethod
    def from_text(
        cls, text: str, *, cursor: int = 0, name: str = "default", **options: object
    ) -> "Buffer":
        buffer = cls(name=name, document=Document.from_text(text), **options)  # type: ignore[arg-type]
        buffer.goto(cursor)
        return buffer

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def version(self) -> int:
        return self.document.version

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def selection(self) -> Optional[Span]:
        return self.state.selection

    @property
    def point_min(self) -> int:
        restriction = self.state.restriction
        return 0 if restriction is None else restriction[0]

    @property
    def point_max(self) -> int:
        restriction = self.state.restriction
        return len(self.document) if restriction is None else restriction[1]

    def goto(self, position: int) -> int:
        ensure_position(self.document, position)
        clamped = max(self.point_min, min(position, self.point_max))
        self.state.set_cursor(clamped)
        return clamped

    def select(self, span: Span) -> None:
        """Activate ``span`` with the cursor at its beginning."""

        ensure_region(self.document, span.begin, span.end)
        self.state.set_selection(span)
        self.state.set_cursor(span.begin)

    def deactivate(self) -> None:
        self.state.clear_selection()

    def view(self) -> SyntaxView:
        """Syntax view of the accessible region; offsets start at ``point_min``."""

        return SyntaxView(self.text[self.point_min : self.point_max], self.syntax)

    def replace_range(self, begin: int, end: int, text: str) -> Document:
        """Edit the text; the selection is dropped and the cursor lands after ``text``."""

        ensure_region(self.document, begin, end)
        with telemetry.span(
            "buffer::replace_range",
            component="buffer",
            metadata={"buffer": self.name, "begin": begin, "end": end},
        ):
            self.document = self.document.replace(begin, end, text)
            self.state.restriction = None
            self.state.clear_selection()
            self.state.set_cursor(begin + len(text))
        return self.document

    def excursion(self, label: str = "excursion") -> ContextManager["Excursion"]:
        return Excursion(self, label)

    @contextmanager
    def narrowed(self, begin: int, end: int) -> Iterator["Buffer"]:
        """Restrict the accessible region for the duration of the block."""

        ensure_region(self.document, begin, end)
        with self.excursion("narrow"):
            self.state.restriction = (begin, end)
            self.state.set_cursor(max(begin, min(self.cursor, end)))
            yield self


class Excursion(AbstractContextManager["Excursion"]):
    """Save cursor, selection and restriction; restore them on every exit."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._cursor = 0
        self._selection: Optional[Span] = None
        self._restriction: Optional[Restriction] = None

    def __enter__(self) -> "Excursion":
        state = self.buffer.state
        self._cursor = state.cursor
        self._selection = state.selection
        self._restriction = state.restriction
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        state = self.buffer.state
        state.cursor = self._cursor
        state.selection = self._selection
        state.restriction = self._restriction
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
