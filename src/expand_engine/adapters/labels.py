"""Label front end: tag pending candidates with keys and jump to one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from expand_engine.navigation import ExpandResult, ExpansionSession
from expand_engine.runtime import telemetry
from expand_engine.spans import Candidate

DEFAULT_LABELS = "abcdefghijklmnopqrstuvwxyz"
DEFAULT_CANCEL_KEYS: Tuple[str, ...] = ("ESC", "C-g")

Assignment = Tuple[str, Candidate]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class LabelHooks:
    """Callbacks a host uses to draw and remove the label overlay."""

    show: Callable[[Sequence[Assignment]], None] = _noop
    clear: Callable[[], None] = _noop
    update_status: Callable[[str], None] = _noop


class LabelChooser:
    """Offers every pending candidate behind a single key press."""

    def __init__(
        self,
        session: ExpansionSession,
        hooks: Optional[LabelHooks] = None,
        *,
        labels: str = DEFAULT_LABELS,
        cancel_keys: Sequence[str] = DEFAULT_CANCEL_KEYS,
    ) -> None:
        if not labels:
            raise ValueError("labels cannot be empty")
        if len(set(labels)) != len(labels):
            raise ValueError("labels must be unique")
        self.session = session
        self.hooks = hooks or LabelHooks()
        self.labels = labels
        self.cancel_keys = tuple(cancel_keys)

    def assignments(self) -> List[Assignment]:
        pending = self.session.refresh()
        limit = min(len(self.labels), self.session.config.max_candidates)
        return list(zip(self.labels, pending[:limit]))

    def choose(self, read_key: Callable[[], str]) -> ExpandResult:
        """Show the labels, read one key and act on it.

        The overlay is cleared on every exit, including interrupts raised
        by ``read_key``.
        """

        assignments = self.assignments()
        if not assignments:
            self.hooks.update_status("nothing to expand")
            return ExpandResult(status="no_candidates", message="nothing to expand")

        self.hooks.show(assignments)
        try:
            key = read_key()
        finally:
            self.hooks.clear()

        telemetry.record_event(
            "labels.key",
            level="debug",
            data={"key": key, "offered": len(assignments)},
            logger_name="expand_engine.adapters",
        )
        if key in self.cancel_keys:
            result = self.session.cancel()
        else:
            index = self._index_for(key, len(assignments))
            if index is None:
                result = ExpandResult(
                    status="no_selection",
                    span=self.session.active,
                    message=f"no candidate for '{key}'",
                )
            else:
                result = self.session.select(index)
        self.hooks.update_status(result.message or result.status)
        return result

    def _index_for(self, key: str, offered: int) -> Optional[int]:
        if len(key) != 1:
            return None
        position = self.labels.find(key)
        if position < 0 or position >= offered:
            return None
        return position + 1


__all__ = ["LabelChooser", "LabelHooks", "DEFAULT_LABELS", "DEFAULT_CANCEL_KEYS"]
