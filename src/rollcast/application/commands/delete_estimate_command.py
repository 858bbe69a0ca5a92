"""Delete a cashflow estimate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rollcast.domain.forecasting.exceptions import EstimateNotFoundError

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.domain.forecasting.repositories import EstimateRepository

logger = logging.getLogger(__name__)


class DeleteEstimateCommand:
    def __init__(self, estimate_repository: EstimateRepository):
        self._estimate_repo = estimate_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteEstimateCommand:
        return cls(estimate_repository=factory.estimate_repository())

    async def execute(self, estimate_id: str) -> None:
        if not await self._estimate_repo.delete(estimate_id):
            raise EstimateNotFoundError(estimate_id)
        logger.info("Deleted estimate %s", estimate_id)
