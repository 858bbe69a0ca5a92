"""Document store port.

The persisted store is treated as a collection-of-documents abstraction.
Every document is a JSON-compatible mapping with a string ``id``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

Document = dict[str, Any]
DocumentListener = Callable[[list[Document]], None]
Unsubscribe = Callable[[], None]


@dataclass(frozen=True)
class RecordFilter:
    """Equality and inclusive range conditions on top-level document fields.

    Range bounds are compared against the stored value as-is, so dates
    must be given in the same ISO form the documents use.
    """

    equals: Mapping[str, Any] = field(default_factory=dict)
    range_field: str | None = None
    lower: Any = None
    upper: Any = None

    def matches(self, document: Mapping[str, Any]) -> bool:
        for key, expected in self.equals.items():
            if document.get(key) != expected:
                return False
        if self.range_field is None:
            return True
        value = document.get(self.range_field)
        if value is None:
            return False
        if self.lower is not None and value < self.lower:
            return False
        return not (self.upper is not None and value > self.upper)


class DocumentStore(Protocol):
    """Port for the persisted document store."""

    async def put(self, collection: str, documents: Sequence[Document]) -> None:
        """Upsert documents by ``id``; writing the same document twice is a no-op."""
        ...

    async def list(
        self,
        collection: str,
        record_filter: RecordFilter | None = None,
    ) -> list[Document]:
        """Return the documents of a collection matching ``record_filter``."""
        ...

    async def get(self, collection: str, document_id: str) -> Document | None:
        """Return one document or None."""
        ...

    async def delete(self, collection: str, ids: Sequence[str]) -> int:
        """Delete documents by id and return how many existed."""
        ...

    def subscribe(self, collection: str, listener: DocumentListener) -> Unsubscribe:
        """Push the full collection to ``listener`` after every change."""
        ...
