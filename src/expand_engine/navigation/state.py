"""Pending/visited stacks behind expand and contract."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterable, Optional

from expand_engine.spans import Candidate, Span


@dataclass(slots=True)
class NavigationState:
    """Per-session stacks.

    ``pending`` is ascending by size with the smallest at the front;
    ``visited`` keeps the most recent selection at the front, so its head
    is the active selection whenever one exists.
    """

    origin: Optional[int] = None
    initial_point: Optional[int] = None
    version: Optional[int] = None
    pending: Deque[Candidate] = field(default_factory=deque)
    visited: Deque[Candidate] = field(default_factory=deque)

    @property
    def fresh(self) -> bool:
        return not self.pending and not self.visited

    @property
    def head(self) -> Optional[Candidate]:
        return self.visited[0] if self.visited else None

    def reset(self, cursor: int, version: int) -> None:
        self.pending.clear()
        self.visited.clear()
        self.origin = cursor
        self.initial_point = cursor
        self.version = version

    def load(self, candidates: Iterable[Candidate]) -> None:
        self.pending.clear()
        self.pending.extend(candidates)
        self.visited.clear()

    def advance(self) -> Candidate:
        candidate = self.pending.popleft()
        self.visited.appendleft(candidate)
        return candidate

    def retreat(self) -> Candidate:
        candidate = self.visited.popleft()
        self.pending.appendleft(candidate)
        return candidate

    def catch_up(self, selection: Span) -> int:
        """Move every pending span inside ``selection`` onto ``visited``."""

        moved = 0
        while self.pending and selection.contains(self.pending[0].span):
            self.advance()
            moved += 1
        return moved

    def describe(self) -> Dict[str, object]:
        return {
            "origin": self.origin,
            "initial_point": self.initial_point,
            "pending": [candidate.describe() for candidate in self.pending],
            "visited": [candidate.describe() for candidate in self.visited],
        }


__all__ = ["NavigationState"]
