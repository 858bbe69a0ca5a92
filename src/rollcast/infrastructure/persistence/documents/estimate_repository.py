"""Estimate repository backed by a document store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rollcast.application.ports import RecordFilter
from rollcast.domain.forecasting.repositories import (
    EstimateListener,
    EstimateRepository,
    Unsubscribe,
)
from rollcast.domain.forecasting.value_objects import Estimate
from rollcast.infrastructure.persistence.documents.mapper import (
    from_document,
    from_documents,
    to_document,
)

if TYPE_CHECKING:
    from rollcast.application.ports import Document, DocumentStore

ESTIMATES = "estimates"


def _ordered(estimates: list[Estimate]) -> list[Estimate]:
    return sorted(estimates, key=lambda est: (est.week_start, est.created_at))


class DocumentEstimateRepository(EstimateRepository):
    """Stores each estimate as one document in the ``estimates`` collection."""

    def __init__(self, store: DocumentStore):
        self._store = store

    async def save(self, estimate: Estimate) -> None:
        await self._store.put(ESTIMATES, [to_document(estimate)])

    async def find_by_id(self, estimate_id: str) -> Estimate | None:
        document = await self._store.get(ESTIMATES, estimate_id)
        if document is None:
            return None
        return from_document(Estimate, document)

    async def find_all(self) -> list[Estimate]:
        documents = await self._store.list(ESTIMATES)
        return _ordered(from_documents(Estimate, documents))

    async def find_by_scenario(self, scenario: str) -> list[Estimate]:
        documents = await self._store.list(
            ESTIMATES,
            RecordFilter(equals={"scenario": scenario}),
        )
        return _ordered(from_documents(Estimate, documents))

    async def delete(self, estimate_id: str) -> bool:
        return await self._store.delete(ESTIMATES, [estimate_id]) > 0

    def subscribe(self, listener: EstimateListener) -> Unsubscribe:
        def _on_change(documents: list[Document]) -> None:
            listener(_ordered(from_documents(Estimate, documents)))

        return self._store.subscribe(ESTIMATES, _on_change)
