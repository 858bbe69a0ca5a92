"""Repository factory over a session-scoped document store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rollcast.infrastructure.persistence.documents.estimate_repository import (
    DocumentEstimateRepository,
)
from rollcast.infrastructure.persistence.documents.transaction_repository import (
    DocumentTransactionRepository,
)

if TYPE_CHECKING:
    from rollcast.application.ports import DocumentStore, SessionContext


class DocumentRepositoryFactory:
    """Document store implementation of the RepositoryFactory Protocol."""

    def __init__(self, store: DocumentStore, session: SessionContext):
        self._store = store
        self._session = session

        # Cached instances (created on demand)
        self._transaction_repo: DocumentTransactionRepository | None = None
        self._estimate_repo: DocumentEstimateRepository | None = None

    @property
    def session(self) -> SessionContext:
        return self._session

    @property
    def store(self) -> DocumentStore:
        return self._store

    def transaction_repository(self) -> DocumentTransactionRepository:
        if self._transaction_repo is None:
            self._transaction_repo = DocumentTransactionRepository(self._store)
        return self._transaction_repo

    def estimate_repository(self) -> DocumentEstimateRepository:
        if self._estimate_repo is None:
            self._estimate_repo = DocumentEstimateRepository(self._store)
        return self._estimate_repo
