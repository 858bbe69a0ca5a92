"""DocumentStore implementation on a SQLAlchemy async engine."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from rollcast.domain.shared.exceptions import PersistenceError
from rollcast.infrastructure.persistence.sqlalchemy.models import DocumentModel
from rollcast.infrastructure.persistence.sqlalchemy.subscription_hub import (
    SubscriptionHub,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from rollcast.application.ports import (
        Document,
        DocumentListener,
        RecordFilter,
        Unsubscribe,
    )

logger = logging.getLogger(__name__)


class SQLAlchemyDocumentStore:
    """Session-namespaced document store over the ``documents`` table.

    Every operation runs in its own database transaction. Subscribers are
    notified with the full collection after a write has been committed.
    """

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        namespace: str,
        hub: SubscriptionHub | None = None,
    ):
        self._session_maker = session_maker
        self._namespace = namespace
        self._hub = hub or SubscriptionHub()

    @property
    def namespace(self) -> str:
        return self._namespace

    async def put(self, collection: str, documents: Sequence[Document]) -> None:
        """Upsert ``documents`` by id; the last document with a given id wins."""
        if not documents:
            return
        latest = {str(document["id"]): dict(document) for document in documents}

        try:
            async with self._session_maker() as session, session.begin():
                stmt = select(DocumentModel).where(
                    DocumentModel.namespace == self._namespace,
                    DocumentModel.collection == collection,
                    DocumentModel.document_id.in_(list(latest)),
                )
                existing = {
                    model.document_id: model
                    for model in (await session.execute(stmt)).scalars()
                }
                for document_id, body in latest.items():
                    model = existing.get(document_id)
                    if model is None:
                        session.add(
                            DocumentModel(
                                namespace=self._namespace,
                                collection=collection,
                                document_id=document_id,
                                body=body,
                            ),
                        )
                    elif model.body != body:
                        model.body = body
        except SQLAlchemyError as e:
            raise self._failure("write", collection, e) from e

        logger.debug(
            "Stored %d documents in %s/%s",
            len(latest),
            self._namespace,
            collection,
        )
        await self._notify(collection)

    async def list(
        self,
        collection: str,
        record_filter: RecordFilter | None = None,
    ) -> list[Document]:
        try:
            async with self._session_maker() as session:
                stmt = (
                    select(DocumentModel)
                    .where(
                        DocumentModel.namespace == self._namespace,
                        DocumentModel.collection == collection,
                    )
                    .order_by(DocumentModel.created_at, DocumentModel.document_id)
                )
                models = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as e:
            raise self._failure("read", collection, e) from e

        documents = [dict(model.body) for model in models]
        if record_filter is None:
            return documents
        return [document for document in documents if record_filter.matches(document)]

    async def get(self, collection: str, document_id: str) -> Document | None:
        try:
            async with self._session_maker() as session:
                model = await session.get(
                    DocumentModel,
                    (self._namespace, collection, document_id),
                )
        except SQLAlchemyError as e:
            raise self._failure("read", collection, e) from e
        return None if model is None else dict(model.body)

    async def delete(self, collection: str, ids: Sequence[str]) -> int:
        if not ids:
            return 0
        try:
            async with self._session_maker() as session, session.begin():
                result = await session.execute(
                    delete(DocumentModel).where(
                        DocumentModel.namespace == self._namespace,
                        DocumentModel.collection == collection,
                        DocumentModel.document_id.in_(list(ids)),
                    ),
                )
                deleted = result.rowcount or 0
        except SQLAlchemyError as e:
            raise self._failure("delete", collection, e) from e

        if deleted:
            await self._notify(collection)
        return deleted

    def subscribe(self, collection: str, listener: DocumentListener) -> Unsubscribe:
        return self._hub.add(self._namespace, collection, listener)

    async def _notify(self, collection: str) -> None:
        if not self._hub.has_listeners(self._namespace, collection):
            return
        try:
            documents = await self.list(collection)
        except PersistenceError:
            # The write is already committed; only the push is lost.
            logger.warning(
                "Skipped notifying listeners of %s/%s",
                self._namespace,
                collection,
            )
            return
        self._hub.publish(self._namespace, collection, documents)

    def _failure(
        self,
        operation: str,
        collection: str,
        error: SQLAlchemyError,
    ) -> PersistenceError:
        logger.error(
            "Document store %s failed for %s/%s: %s",
            operation,
            self._namespace,
            collection,
            error,
        )
        return PersistenceError(
            f"Could not {operation} {collection}",
            details={"namespace": self._namespace, "collection": collection},
        )
