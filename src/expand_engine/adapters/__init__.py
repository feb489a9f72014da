"""Front-end helpers built on top of :class:`ExpansionSession`."""

from .labels import DEFAULT_CANCEL_KEYS, DEFAULT_LABELS, LabelChooser, LabelHooks

__all__ = ["DEFAULT_CANCEL_KEYS", "DEFAULT_LABELS", "LabelChooser", "LabelHooks"]
