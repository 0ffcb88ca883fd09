"""In-memory document store backing the resolver state."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


def now_millis() -> int:
    """Return the current UNIX timestamp in milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True, eq=False)
class Document:
    """An uploaded file's extracted text tagged with its inferred topic."""

    topic: str
    content: str
    name: str = ""
    mime_type: str = ""
    uploaded_at: int = field(default_factory=now_millis)


class DocumentStore:
    """Ordered, append-only collection of uploaded documents."""

    def __init__(self) -> None:
        self._documents: List[Document] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents))

    def append(self, document: Document) -> None:
        self._documents.append(document)

    def get(self, index: int) -> Optional[Document]:
        """Return the document at ``index`` or None when the store is too short."""
        if 0 <= index < len(self._documents):
            return self._documents[index]
        return None

    def latest(self) -> Optional[Document]:
        if not self._documents:
            return None
        return self._documents[-1]

    def find_by_topic(self, fragment: str) -> Optional[Document]:
        """Return the first document whose topic contains ``fragment``."""
        needle = (fragment or "").lower()
        for document in self._documents:
            if needle in document.topic.lower():
                return document
        return None
