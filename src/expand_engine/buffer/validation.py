"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import Document


class BufferValidationError(RuntimeError):
    """Raised when callers provide out-of-bounds positions or regions."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(document: Document, position: int) -> int:
    if position < 0 or position > len(document):
        raise BufferValidationError("Position out of range", position=position)
    return position


def ensure_region(document: Document, begin: int, end: int) -> tuple[int, int]:
    ensure_position(document, begin)
    ensure_position(document, end)
    if begin > end:
        raise BufferValidationError("Region begins after it ends", position=begin)
    return begin, end
