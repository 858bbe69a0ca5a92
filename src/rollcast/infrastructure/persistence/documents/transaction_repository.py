"""Transaction repository backed by a document store."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from rollcast.application.ports import RecordFilter
from rollcast.domain.banking.repositories import (
    TransactionListener,
    TransactionRepository,
    Unsubscribe,
)
from rollcast.domain.banking.value_objects import Transaction
from rollcast.infrastructure.persistence.documents.mapper import (
    from_documents,
    to_document,
)

if TYPE_CHECKING:
    from rollcast.application.ports import Document, DocumentStore

logger = logging.getLogger(__name__)

TRANSACTIONS = "transactions"


def _by_date(transactions: list[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=lambda tx: (tx.date, tx.imported_at))


class DocumentTransactionRepository(TransactionRepository):
    """Stores each transaction as one document in the ``transactions`` collection.

    The hash index is the set of ``hash`` fields of the stored documents.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    async def save_batch(self, transactions: list[Transaction]) -> list[str]:
        if not transactions:
            return []
        await self._store.put(
            TRANSACTIONS,
            [to_document(tx) for tx in transactions],
        )
        logger.debug("Saved %d transactions", len(transactions))
        return [tx.id for tx in transactions]

    async def find_all(self) -> list[Transaction]:
        documents = await self._store.list(TRANSACTIONS)
        return _by_date(from_documents(Transaction, documents))

    async def find_by_date_range(self, start: date, end: date) -> list[Transaction]:
        documents = await self._store.list(
            TRANSACTIONS,
            RecordFilter(
                range_field="date",
                lower=start.isoformat(),
                upper=end.isoformat(),
            ),
        )
        return _by_date(from_documents(Transaction, documents))

    async def get_known_hashes(self) -> set[str]:
        documents = await self._store.list(TRANSACTIONS)
        return {str(document["hash"]) for document in documents if "hash" in document}

    async def delete_all(self) -> int:
        documents = await self._store.list(TRANSACTIONS)
        if not documents:
            return 0
        deleted = await self._store.delete(
            TRANSACTIONS,
            [str(document["id"]) for document in documents],
        )
        logger.info("Deleted %d stored transactions", deleted)
        return deleted

    def subscribe(self, listener: TransactionListener) -> Unsubscribe:
        def _on_change(documents: list[Document]) -> None:
            listener(_by_date(from_documents(Transaction, documents)))

        return self._store.subscribe(TRANSACTIONS, _on_change)
