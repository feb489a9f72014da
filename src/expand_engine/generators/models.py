"""Generator metadata and helpers shared by the generator modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List

from expand_engine.spans import Candidate
from expand_engine.syntax import SyntaxView

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer

GeneratorHandler = Callable[["Buffer"], List[Candidate]]


@dataclass(frozen=True, slots=True)
class GeneratorRef:
    """Callable metadata for one candidate generator."""

    id: str
    handler: GeneratorHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("GeneratorRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, buffer: "Buffer") -> List[Candidate]:
        return self.handler(buffer)


def focus(buffer: "Buffer") -> tuple[SyntaxView, int, int]:
    """Return the accessible view, its absolute start and the relative cursor."""

    base = buffer.point_min
    return buffer.view(), base, buffer.cursor - base


def absolute(candidates: Iterable[Candidate], base: int) -> List[Candidate]:
    return [candidate.shifted(base) for candidate in candidates]


__all__ = ["GeneratorRef", "GeneratorHandler", "focus", "absolute"]
