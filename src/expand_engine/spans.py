"""Span and candidate value types shared by generators and navigation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open region ``[begin, end)`` of buffer offsets."""

    begin: int
    end: int

    def __post_init__(self) -> None:
        if self.begin > self.end:
            raise ValueError(f"Span begin {self.begin} is after end {self.end}")

    @property
    def length(self) -> int:
        return self.end - self.begin

    @property
    def empty(self) -> bool:
        return self.begin == self.end

    def covers(self, position: int) -> bool:
        """True when ``position`` lies within the span, boundaries included."""

        return self.begin <= position <= self.end

    def contains(self, other: "Span") -> bool:
        return self.begin <= other.begin and other.end <= self.end

    def shifted(self, delta: int) -> "Span":
        return Span(self.begin + delta, self.end + delta)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A span tagged with the generator that produced it.

    ``producer`` is diagnostic only: it takes no part in equality, hashing or
    ordering, so two candidates over the same span are the same candidate.
    """

    span: Span
    producer: str = field(default="", compare=False)

    @classmethod
    def of(cls, begin: int, end: int, producer: str) -> "Candidate":
        return cls(Span(begin, end), producer)

    @property
    def begin(self) -> int:
        return self.span.begin

    @property
    def end(self) -> int:
        return self.span.end

    @property
    def length(self) -> int:
        return self.span.length

    def shifted(self, delta: int) -> "Candidate":
        if not delta:
            return self
        return Candidate(self.span.shifted(delta), self.producer)

    def describe(self) -> str:
        return f"{self.producer}[{self.begin}:{self.end}]"


CandidateList = Tuple[Candidate, ...]

__all__ = ["Span", "Candidate", "CandidateList"]
