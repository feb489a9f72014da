"""Expand/contract state machine bound to one buffer."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from expand_engine.buffer import Buffer
from expand_engine.config import EngineConfig
from expand_engine.runtime import telemetry
from expand_engine.runtime.telemetry import SpanHandle
from expand_engine.spans import Candidate, CandidateList, Span

from .events import EventBus
from .pipeline import compute_candidates
from .state import NavigationState


class ReentrantExpansionError(RuntimeError):
    """Raised when a session entry point is called while another is running."""


@dataclass(slots=True)
class ExpandResult:
    """Outcome of a session transition."""

    status: str
    span: Optional[Span] = None
    message: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.status in {"expanded", "contracted", "selected", "cancelled"}


class ExpansionSession:
    """Owns the navigation stacks for a single buffer.

    Create one per open document. ``expand`` and ``contract`` move through
    the candidate sequence and keep ``buffer.selection`` in step with the
    head of the visited stack. A selection changed by other means is
    detected on the next ``expand`` and triggers a fresh sequence.
    """

    def __init__(
        self,
        buffer: Buffer,
        config: Optional[EngineConfig] = None,
        *,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.buffer = buffer
        self.config = config or EngineConfig()
        self.bus = bus or EventBus()
        self.state = NavigationState()
        self._busy = False

    @property
    def pending(self) -> CandidateList:
        return tuple(self.state.pending)

    @property
    def visited(self) -> CandidateList:
        return tuple(self.state.visited)

    @property
    def active(self) -> Optional[Span]:
        return self.buffer.selection

    def refresh(self) -> CandidateList:
        """Synchronize the stacks with the buffer without selecting anything."""

        with self._operation("refresh"):
            self._synchronize()
            return self.pending

    def expand(self) -> ExpandResult:
        with self._operation("expand") as handle:
            self._synchronize()
            if not self.state.pending:
                handle.add_metadata("status", "no_candidates")
                self.bus.emit("expand.empty", self.buffer.selection)
                return ExpandResult(
                    status="no_candidates",
                    span=self.buffer.selection,
                    message="nothing to expand",
                )
            candidate = self.state.advance()
            self._activate(candidate)
            handle.add_metadata("status", "expanded")
            self.bus.emit("expand.select", candidate)
            return ExpandResult(
                status="expanded", span=candidate.span, message=candidate.producer
            )

    def contract(self) -> ExpandResult:
        with self._operation("contract") as handle:
            if self.buffer.selection is None or len(self.state.visited) <= 1:
                handle.add_metadata("status", "noop")
                return ExpandResult(status="noop", span=self.buffer.selection)
            self.state.retreat()
            head = self.state.head
            assert head is not None
            self._activate(head)
            handle.add_metadata("status", "contracted")
            self.bus.emit("expand.contract", head)
            return ExpandResult(status="contracted", span=head.span, message=head.producer)

    def cancel(self) -> ExpandResult:
        """Handle a quit signal: optionally restore the cursor, drop the region."""

        with self._operation("cancel") as handle:
            restored = False
            if self.config.restore_on_cancel and self.state.initial_point is not None:
                self.buffer.goto(min(self.state.initial_point, len(self.buffer.text)))
                restored = True
            self.state.initial_point = None
            self.buffer.deactivate()
            handle.add_metadata("restored", restored)
            self.bus.emit("expand.cancel", self.buffer.cursor)
            return ExpandResult(
                status="cancelled", message="restored" if restored else None
            )

    def select(self, index: int) -> ExpandResult:
        """Jump to the ``index``-th pending candidate (1-based)."""

        with self._operation("select") as handle:
            limit = min(len(self.state.pending), self.config.max_candidates)
            if not 1 <= index <= limit:
                handle.add_metadata("status", "no_selection")
                return ExpandResult(
                    status="no_selection",
                    span=self.buffer.selection,
                    message=f"no candidate {index}",
                )
            candidate = self.state.advance()
            for _ in range(index - 1):
                candidate = self.state.advance()
            self._activate(candidate)
            handle.add_metadata("status", "selected")
            self.bus.emit("expand.pick", candidate)
            return ExpandResult(
                status="selected", span=candidate.span, message=candidate.producer
            )

    def describe(self) -> Dict[str, object]:
        snapshot = self.state.describe()
        snapshot["selection"] = self.buffer.selection
        return snapshot

    def _synchronize(self) -> None:
        buffer = self.buffer
        state = self.state
        selection = buffer.selection
        head = state.head
        if (
            selection is None
            or head is None
            or head.span != selection
            or state.version != buffer.version
        ):
            state.reset(buffer.cursor, buffer.version)
        if state.fresh:
            origin = state.origin if state.origin is not None else buffer.cursor
            state.load(compute_candidates(buffer, self.config.generators, origin))
        if selection is not None:
            state.catch_up(selection)

    def _activate(self, candidate: Candidate) -> None:
        self.buffer.select(candidate.span)

    @contextmanager
    def _operation(self, name: str) -> Iterator[SpanHandle]:
        if self._busy:
            raise ReentrantExpansionError(f"'{name}' called while the session is busy")
        self._busy = True
        try:
            with telemetry.span(
                f"navigation::{name}",
                component="navigation",
                metadata={"buffer": self.buffer.name},
            ) as handle:
                yield handle
                if self.config.verbose:
                    telemetry.record_event(
                        "navigation.stacks",
                        level="debug",
                        data={"operation": name, **self.describe()},
                        logger_name="expand_engine.navigation",
                    )
        finally:
            self._busy = False


__all__ = ["ExpansionSession", "ExpandResult", "ReentrantExpansionError"]
