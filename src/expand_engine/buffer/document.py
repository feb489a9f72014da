"""Text storage for buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable text snapshot with a version counter.

    Edits return a new document with ``version`` bumped, so anything
    computed against an older version can tell it is stale.
    """

    text: str = ""
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(text=text, version=0)

    def __len__(self) -> int:
        return len(self.text)

    def replace(self, begin: int, end: int, text: str) -> "Document":
        """Return a document with ``[begin:end]`` replaced by ``text``."""

        updated = self.text[:begin] + text + self.text[end:]
        return Document(text=updated, version=self.version + 1)
