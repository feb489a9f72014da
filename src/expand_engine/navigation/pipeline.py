"""Candidate pipeline: fan out, validate, disambiguate, sort and dedup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence

from expand_engine.runtime import telemetry
from expand_engine.spans import Candidate, CandidateList
from expand_engine.syntax import ScanError, SyntaxClass

if TYPE_CHECKING:
    from expand_engine.buffer import Buffer
    from expand_engine.generators import GeneratorRef

UNFILTERED_PRODUCERS = frozenset({"list-at-point"})

_KEEP_SINGLE = frozenset({SyntaxClass.WORD, SyntaxClass.SYMBOL})


def is_valid(candidate: Candidate, origin: int, buffer: "Buffer") -> bool:
    begin, end = candidate.begin, candidate.end
    if not (begin <= origin <= end) or begin >= end:
        return False
    if end - begin == 1:
        return buffer.syntax.classify(buffer.text[begin]) in _KEEP_SINGLE
    return True


def resolve_cursor_side(
    candidates: Sequence[Candidate], origin: int
) -> List[Candidate]:
    """Prefer spans after the cursor over spans that end at it."""

    if any(candidate.begin == origin for candidate in candidates):
        return [candidate for candidate in candidates if candidate.end != origin]
    if any(candidate.end == origin for candidate in candidates):
        return [candidate for candidate in candidates if candidate.begin <= origin]
    return list(candidates)


def filter_candidates(
    candidates: Iterable[Candidate], origin: int, buffer: "Buffer"
) -> List[Candidate]:
    valid = [
        candidate
        for candidate in candidates
        if candidate.producer in UNFILTERED_PRODUCERS
        or is_valid(candidate, origin, buffer)
    ]
    return resolve_cursor_side(valid, origin)


def sort_candidates(candidates: Iterable[Candidate]) -> CandidateList:
    """Stable sort by length; the first candidate over a span wins."""

    seen = set()
    unique: List[Candidate] = []
    for candidate in sorted(candidates, key=lambda c: c.length):
        if candidate.span in seen:
            continue
        seen.add(candidate.span)
        unique.append(candidate)
    return tuple(unique)


def run_generator(buffer: "Buffer", generator: "GeneratorRef") -> List[Candidate]:
    """Run one generator; faults degrade to an empty result."""

    with buffer.excursion(f"generator::{generator.id}"):
        try:
            return list(generator(buffer))
        except ScanError as exc:
            telemetry.record_event(
                "generator.scan_error",
                level="debug",
                data={"generator": generator.id, "position": exc.position},
            )
        except Exception as exc:
            telemetry.record_event(
                "generator.fault",
                level="warning",
                data={
                    "generator": generator.id,
                    "error": type(exc).__name__,
                    "message": str(exc),
                },
            )
    return []


def collect_candidates(
    buffer: "Buffer", generators: Sequence["GeneratorRef"]
) -> List[Candidate]:
    raw: List[Candidate] = []
    with buffer.excursion("collect"):
        for generator in generators:
            raw.extend(run_generator(buffer, generator))
    return raw


def compute_candidates(
    buffer: "Buffer", generators: Sequence["GeneratorRef"], origin: int
) -> CandidateList:
    with telemetry.span(
        "pipeline::compute",
        component="pipeline",
        metadata={"buffer": buffer.name, "origin": origin},
    ) as handle:
        raw = collect_candidates(buffer, generators)
        result = sort_candidates(filter_candidates(raw, origin, buffer))
        handle.add_metadata("raw", len(raw))
        handle.add_metadata("kept", len(result))
    return result


__all__ = [
    "UNFILTERED_PRODUCERS",
    "is_valid",
    "resolve_cursor_side",
    "filter_candidates",
    "sort_candidates",
    "run_generator",
    "collect_candidates",
    "compute_candidates",
]
