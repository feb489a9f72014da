"""Buffer abstractions: text, cursor/selection state and scope guards."""

from .buffer import Buffer, Excursion
from .document import Document
from .state import BufferState
from .validation import BufferValidationError, ensure_position, ensure_region

__all__ = [
    "Buffer",
    "BufferState",
    "BufferValidationError",
    "Document",
    "Excursion",
    "ensure_position",
    "ensure_region",
]
