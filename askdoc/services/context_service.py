"""File context resolution for questions about uploaded documents.

The resolver owns the uploaded documents together with the selection state
("active" document and comparison mode) that follow-up questions rely on.
One instance is created per application and shared by every request; all
operations are serialized through the instance lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from flask import current_app

from askdoc.storage import Document, DocumentStore
from askdoc.utils.intent import CompareTopics, SetCompareMode, SwitchTo, parse_intent
from askdoc.utils.text import make_text_excerpt

_LOGGER = logging.getLogger(__name__)

COMPARISON_UNAVAILABLE_MESSAGE = "One or both files are not available for comparison."

# Key under app.extensions holding the application's resolver.
RESOLVER_EXTENSION = "file_context"


class ComparisonUnavailable(LookupError):
    """Raised when a topic comparison references a file that was never uploaded."""

    def __init__(self, first_topic: str, second_topic: str) -> None:
        super().__init__(COMPARISON_UNAVAILABLE_MESSAGE)
        self.first_topic = first_topic
        self.second_topic = second_topic


class FileContextResolver:
    """Decide which uploaded documents supply the context for a question."""

    def __init__(self, store: Optional[DocumentStore] = None) -> None:
        self.store = store if store is not None else DocumentStore()
        self._active_document: Optional[Document] = None
        self._compare_mode = False
        self._lock = threading.RLock()

    @property
    def active_document(self) -> Optional[Document]:
        return self._active_document

    @property
    def compare_mode(self) -> bool:
        return self._compare_mode

    def ingest(self, document: Document) -> None:
        """Store a freshly uploaded document and make it the active one."""
        with self._lock:
            self.store.append(document)
            self._active_document = document
            _LOGGER.info("Stored document %d with topic %r", len(self.store) - 1, document.topic)

    def resolve_context(self, question: str, new_document_ingested: bool = False) -> str:
        """Return the context text for ``question``, updating the selection state.

        Raises ComparisonUnavailable when the question asks to compare two
        topics and either topic has no matching document.
        """
        with self._lock:
            intent = parse_intent(question)

            if isinstance(intent, CompareTopics):
                return self._compare_topics(intent.first_topic, intent.second_topic)

            if isinstance(intent, SwitchTo):
                self._active_document = self.store.get(intent.index)
                self._compare_mode = False
                if self._active_document is None:
                    _LOGGER.warning(
                        "Question refers to file %d but only %d file(s) are stored",
                        intent.index + 1,
                        len(self.store),
                    )
            elif isinstance(intent, SetCompareMode):
                self._compare_mode = True

            return self._materialize(question, new_document_ingested)

    def prepare_context(self, question: str, document: Optional[Document] = None) -> str:
        """Ingest ``document`` (if any) and resolve the context as one step."""
        with self._lock:
            if document is not None:
                self.ingest(document)
            return self.resolve_context(question, new_document_ingested=document is not None)

    def describe_documents(self) -> List[Dict[str, Any]]:
        """Return a listing of the stored documents in upload order."""
        with self._lock:
            return [
                {
                    "index": index,
                    "topic": document.topic,
                    "name": document.name,
                    "mimeType": document.mime_type,
                    "uploadedAt": document.uploaded_at,
                    "excerpt": make_text_excerpt(document.content),
                    "active": document is self._active_document,
                }
                for index, document in enumerate(self.store)
            ]

    def _compare_topics(self, first_topic: str, second_topic: str) -> str:
        first = self.store.find_by_topic(first_topic)
        second = self.store.find_by_topic(second_topic)
        if first is None or second is None:
            _LOGGER.info("No stored files match %r and %r", first_topic, second_topic)
            raise ComparisonUnavailable(first_topic, second_topic)

        return (
            f"Comparison between files about {first.topic} and {second.topic}:\n\n"
            f"File 1 ({first.topic}):\n{first.content}\n\n"
            f"File 2 ({second.topic}):\n{second.content}"
        )

    def _materialize(self, question: str, new_document_ingested: bool) -> str:
        if self._compare_mode and len(self.store) >= 2:
            first = self.store.get(0)
            second = self.store.get(1)
            return f"Both Files:\n\nFirst File:\n{first.content}\n\nSecond File:\n{second.content}"

        if self._active_document is not None:
            return self._active_document.content

        if not new_document_ingested and len(self.store) == 0:
            # Nothing uploaded yet, the question stands on its own.
            return question

        latest = self.store.latest()
        return latest.content if latest is not None else question


def get_resolver() -> FileContextResolver:
    """Return the resolver shared by every request of the current app."""
    return current_app.extensions[RESOLVER_EXTENSION]
