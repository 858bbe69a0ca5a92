"""Bulk removal of a session's imported transactions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.application.ports import SessionContext
    from rollcast.domain.banking.repositories import TransactionRepository

logger = logging.getLogger(__name__)


class ResetSessionCommand:
    """Delete every imported transaction of the session.

    This is the only way transactions leave the store; estimates are kept.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        session: SessionContext,
    ):
        self._transaction_repo = transaction_repository
        self._session = session

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ResetSessionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            session=factory.session,
        )

    async def execute(self) -> int:
        removed = await self._transaction_repo.delete_all()
        logger.info("Reset %s: removed %d transactions", self._session, removed)
        return removed
