"""Query listing stored transactions."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from rollcast.domain.banking.value_objects import Transaction

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.domain.banking.repositories import TransactionRepository


class TransactionListQuery:
    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> TransactionListQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(
        self,
        start: date | None = None,
        end: date | None = None,
    ) -> list[Transaction]:
        if start is None and end is None:
            return await self._transaction_repo.find_all()
        return await self._transaction_repo.find_by_date_range(
            start or date.min,
            end or date.max,
        )
