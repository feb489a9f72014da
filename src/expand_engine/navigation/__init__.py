"""Candidate pipeline and the expand/contract navigation state machine."""

from .events import EventBus
from .pipeline import (
    UNFILTERED_PRODUCERS,
    compute_candidates,
    filter_candidates,
    is_valid,
    resolve_cursor_side,
    sort_candidates,
)
from .session import ExpandResult, ExpansionSession, ReentrantExpansionError
from .state import NavigationState

__all__ = [
    "EventBus",
    "ExpandResult",
    "ExpansionSession",
    "NavigationState",
    "ReentrantExpansionError",
    "UNFILTERED_PRODUCERS",
    "compute_candidates",
    "filter_candidates",
    "is_valid",
    "resolve_cursor_side",
    "sort_candidates",
]
